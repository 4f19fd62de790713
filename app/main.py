import logging

from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.session import engine
from app import models  # noqa: F401  registra as tabelas no metadata

from app.api.error_handlers import register_exception_handlers
from app.api.routes.auth import router as auth_router
from app.api.routes.users import router as users_router
from app.api.routes.faculdades import router as faculdades_router
from app.api.routes.cursos import router as cursos_router
from app.api.routes.colaboradores import router as colaboradores_router
from app.api.routes.estudantes import router as estudantes_router

setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
logger = logging.getLogger(__name__)

app = FastAPI(title="CampusSync API", version="0.1.0")

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(faculdades_router)
app.include_router(cursos_router)
app.include_router(colaboradores_router)
app.include_router(estudantes_router)

@app.on_event("startup")
def ensure_tables():
    if not settings.CREATE_TABLES_ON_STARTUP:
        return
    Base.metadata.create_all(bind=engine)
    logger.info("[BOOTSTRAP] tabelas verificadas")

@app.get("/health")
def health():
    return {"status": "ok"}
