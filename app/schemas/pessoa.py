from datetime import date

from pydantic import BaseModel, Field

from app.schemas.endereco import EnderecoIn


class PessoaIn(BaseModel):
    """Campos pessoais; no update, vazio/None significa 'não alterar'."""

    nome: str | None = Field(default=None, max_length=200)
    cpf: str | None = Field(default=None, max_length=14)
    rg: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=200)
    telefone: str | None = Field(default=None, max_length=20)
    titulo_eleitor: str | None = Field(default=None, max_length=20)
    estado_civil: str | None = Field(default=None, max_length=30)
    nacionalidade: str | None = Field(default=None, max_length=60)
    cor_raca_etnia: str | None = Field(default=None, max_length=30)
    escolaridade: str | None = Field(default=None, max_length=60)
    nome_pai: str | None = Field(default=None, max_length=200)
    nome_mae: str | None = Field(default=None, max_length=200)
    data_nascimento: date | None = None
    endereco: EnderecoIn | None = None
