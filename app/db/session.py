import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.exceptions import CampusSyncError, InternalError

logger = logging.getLogger(__name__)


def build_engine(url: str):
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # banco em memoria precisa de uma unica conexao compartilhada
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        eng = create_engine(url, **kwargs)

        @event.listens_for(eng, "connect")
        def _fk_on(dbapi_conn, _record):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

        return eng

    return create_engine(url, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transacao(db: Session, operacao: str) -> Iterator[Session]:
    """
    Unidade de trabalho: commit no fim, rollback em qualquer erro.

    Erros de dominio sobem como estao; falhas do banco viram InternalError
    (logadas com traceback, sem detalhes para o cliente).
    """
    try:
        yield db
        db.commit()
    except CampusSyncError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Falha na transação '{operacao}'")
        raise InternalError(f"Falha ao executar '{operacao}'", original_error=e) from e
