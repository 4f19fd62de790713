from datetime import date

from pydantic import BaseModel, Field

from app.schemas.endereco import EnderecoOut
from app.schemas.pessoa import PessoaIn


class EstudanteIn(PessoaIn):
    nome: str = Field(..., min_length=1, max_length=200)
    numero_matricula: str | None = Field(default=None, max_length=40)
    data_matricula: date | None = None
    telefone_pai: str | None = Field(default=None, max_length=20)
    telefone_mae: str | None = Field(default=None, max_length=20)
    turma_id: int


class EstudanteUpdate(PessoaIn):
    numero_matricula: str | None = Field(default=None, max_length=40)
    data_matricula: date | None = None
    telefone_pai: str | None = Field(default=None, max_length=20)
    telefone_mae: str | None = Field(default=None, max_length=20)
    turma_id: int | None = None


class EstudanteOut(BaseModel):
    id: int
    nome: str
    cpf: str | None = None
    rg: str | None = None
    email: str | None = None
    telefone: str | None = None
    numero_matricula: str | None = None
    data_matricula: date | None = None
    data_nascimento: date | None = None
    nome_pai: str | None = None
    nome_mae: str | None = None
    telefone_pai: str | None = None
    telefone_mae: str | None = None
    endereco: EnderecoOut
    turma_id: int
    turma_nome: str = ""
