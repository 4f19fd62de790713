from datetime import date

from pydantic import BaseModel, Field

from app.schemas.endereco import EnderecoOut
from app.schemas.pessoa import PessoaIn


class ColaboradorIn(PessoaIn):
    nome: str = Field(..., min_length=1, max_length=200)
    cargo: str = Field(..., min_length=1, max_length=60)
    numero_registro: str | None = Field(default=None, max_length=40)
    data_admissao: date | None = None
    curso_id: int | None = None
    user_cpf: str | None = None


class ColaboradorUpdate(PessoaIn):
    cargo: str | None = Field(default=None, max_length=60)
    numero_registro: str | None = Field(default=None, max_length=40)
    data_admissao: date | None = None
    curso_id: int | None = None


class ColaboradorOut(BaseModel):
    id: int
    nome: str
    cpf: str | None = None
    rg: str | None = None
    email: str | None = None
    telefone: str | None = None
    cargo: str
    numero_registro: str | None = None
    data_admissao: date | None = None
    data_nascimento: date | None = None
    nome_pai: str | None = None
    nome_mae: str | None = None
    endereco: EnderecoOut
    curso_id: int | None = None
    curso_nome: str | None = None
    universidade_nome: str | None = None
