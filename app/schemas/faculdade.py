from decimal import Decimal

from pydantic import BaseModel, Field

from app.models.faculdade import TipoFaculdade
from app.schemas.endereco import EnderecoIn, EnderecoOut


class FaculdadeIn(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200)
    cnpj: str = Field(..., min_length=1, max_length=18)
    telefone: str | None = Field(default=None, max_length=20)
    email_responsavel: str | None = Field(default=None, max_length=200)
    endereco: EnderecoIn | None = None
    tipo: TipoFaculdade
    cursos_oferecidos: list[str] | None = None
    # quando ausente, a rota usa o cpf do token
    user_cpf: str | None = None


class FaculdadeUpdate(BaseModel):
    nome: str | None = Field(default=None, max_length=200)
    cnpj: str | None = Field(default=None, max_length=18)
    telefone: str | None = Field(default=None, max_length=20)
    email_responsavel: str | None = Field(default=None, max_length=200)
    endereco: EnderecoIn | None = None
    tipo: TipoFaculdade | None = None


class CursoResumoOut(BaseModel):
    id: int
    nome: str
    mensalidade: Decimal
    faculdade_id: int
    faculdade_nome: str | None = None
    colaborador_nome: str | None = None

    class Config:
        from_attributes = True


class FaculdadeOut(BaseModel):
    id: int
    nome: str
    cnpj: str
    telefone: str | None = None
    email_responsavel: str | None = None
    endereco: EnderecoOut
    tipo: TipoFaculdade
    universidade_nome: str
    user_cpf: str
    cursos: list[CursoResumoOut] = []


class AdicionarCursosIn(BaseModel):
    curso_ids: list[int] = Field(..., min_length=1)


class AdicionarCursosOut(BaseModel):
    faculdade_id: int
    cursos_adicionados: list[CursoResumoOut]
