from pydantic import BaseModel, Field

class EnderecoIn(BaseModel):
    logradouro: str | None = Field(default=None, max_length=200)
    numero: str | None = Field(default=None, max_length=20)
    bairro: str | None = Field(default=None, max_length=120)
    cidade: str | None = Field(default=None, max_length=120)
    estado: str | None = Field(default=None, max_length=60)
    cep: str | None = Field(default=None, max_length=9)


class EnderecoOut(BaseModel):
    logradouro: str | None = None
    numero: str | None = None
    bairro: str | None = None
    cidade: str | None = None
    estado: str | None = None
    cep: str | None = None

    class Config:
        from_attributes = True
