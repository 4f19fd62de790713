"""
Fixtures compartilhadas.

O app lê as settings na importação, então as variáveis de ambiente são
definidas aqui antes de qualquer import de `app`.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_SECRET"] = "segredo-de-teste-" + "x" * 64
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_clock
from app.core.clock import Clock
from app.core.config import settings
from app.core.security import TokenIssuer
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app
from app.models import Periodo
from app.schemas import ColaboradorIn, EstudanteIn, TurmaIn
from app.services import (
    AuthService,
    ColaboradorService,
    CursoService,
    EstudanteService,
    FaculdadeService,
)
from tests.factories import curso_in, faculdade_in, registrar


class FakeClock(Clock):
    """Relógio real para datas, mas sem dormir: registra os atrasos pedidos."""

    def __init__(self):
        self.sleeps: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


# =============================================================================
# Banco / infraestrutura
# =============================================================================


@pytest.fixture
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(tables):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tokens(clock):
    return TokenIssuer(settings.AUTH_SECRET, ttl_days=settings.TOKEN_TTL_DAYS, clock=clock)


@pytest.fixture
def auth_service(db, tokens, clock):
    return AuthService(db, tokens, clock, failure_delay=0.5)


@pytest.fixture
def client(tables, clock):
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# Grafo de exemplo
# =============================================================================


@pytest.fixture
def usuario(auth_service):
    user, _ = registrar(auth_service, universidade_nome="Universidade Federal")
    return user


@pytest.fixture
def grafo(db, usuario):
    """Usuário -> Faculdade -> Curso (1 turma, 1 disciplina) -> Estudante, mais um Docente."""
    faculdade = FaculdadeService(db).criar(faculdade_in(), usuario.cpf)
    curso = CursoService(db).criar(
        curso_in(
            faculdade.id,
            turmas=[TurmaIn(nome="ES-1", periodo=Periodo.Matutino)],
            disciplinas=[{"nome": "Cálculo", "descricao": "Cálculo I"}],
        )
    )
    turma = curso.turmas[0]
    estudante = EstudanteService(db).criar(
        EstudanteIn(nome="Bruno Aluno", cpf="39053344705", turma_id=turma.id, data_matricula=date(2024, 2, 1))
    )
    colaborador = ColaboradorService(db).criar(
        ColaboradorIn(nome="Carla Docente", cargo="Docente", curso_id=curso.id), usuario.cpf
    )
    return {
        "user": usuario,
        "faculdade": faculdade,
        "curso": curso,
        "turma": turma,
        "disciplina": curso.disciplinas[0],
        "estudante": estudante,
        "colaborador": colaborador,
    }
