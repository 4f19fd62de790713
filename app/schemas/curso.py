from decimal import Decimal

from pydantic import BaseModel, Field

from app.models.turma import Periodo
from app.schemas.estudante import EstudanteOut


class TurmaIn(BaseModel):
    id: int | None = None
    nome: str = Field(..., min_length=1, max_length=120)
    periodo: Periodo


class DisciplinaIn(BaseModel):
    id: int | None = None
    nome: str = Field(..., min_length=1, max_length=200)
    descricao: str = ""


class CursoIn(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200)
    mensalidade: Decimal = Field(default=Decimal("0"), ge=0, max_digits=18, decimal_places=2)
    faculdade_id: int
    quantidade_turmas: int | None = Field(default=None, ge=0)
    turmas: list[TurmaIn] = []
    disciplinas: list[DisciplinaIn] = []


class TurmaOut(BaseModel):
    id: int
    nome: str
    periodo: Periodo
    estudantes: list[EstudanteOut] = []


class DisciplinaOut(BaseModel):
    id: int
    nome: str
    descricao: str

    class Config:
        from_attributes = True


class CursoOut(BaseModel):
    id: int
    nome: str
    mensalidade: Decimal
    faculdade_id: int
    faculdade_nome: str | None = None
    colaborador_nome: str | None = None
    turmas: list[TurmaOut] = []
    disciplinas: list[DisciplinaOut] = []


class CursoPageOut(BaseModel):
    page: int
    page_size: int
    total: int
    items: list[CursoOut]
