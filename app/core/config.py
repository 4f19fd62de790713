from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str
    AUTH_SECRET: str = Field(..., min_length=1)  # sem chave o app nao sobe

    TOKEN_TTL_DAYS: int = 7
    LOGIN_FAILURE_DELAY_SECONDS: float = 0.5

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    CREATE_TABLES_ON_STARTUP: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
