from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.endereco import EnderecoMixin

PESSOA_CAMPOS = (
    "nome",
    "cpf",
    "rg",
    "email",
    "telefone",
    "titulo_eleitor",
    "estado_civil",
    "nacionalidade",
    "cor_raca_etnia",
    "escolaridade",
    "nome_pai",
    "nome_mae",
    "data_nascimento",
)


class Pessoa(EnderecoMixin, Base):
    """Dados pessoais compartilhados por colaboradores e estudantes (composição)."""

    __tablename__ = "pessoas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    nome: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    cpf: Mapped[str | None] = mapped_column(String(14), nullable=True, index=True)
    rg: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    telefone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    titulo_eleitor: Mapped[str | None] = mapped_column(String(20), nullable=True)
    estado_civil: Mapped[str | None] = mapped_column(String(30), nullable=True)
    nacionalidade: Mapped[str | None] = mapped_column(String(60), nullable=True)
    cor_raca_etnia: Mapped[str | None] = mapped_column(String(30), nullable=True)
    escolaridade: Mapped[str | None] = mapped_column(String(60), nullable=True)
    nome_pai: Mapped[str | None] = mapped_column(String(200), nullable=True)
    nome_mae: Mapped[str | None] = mapped_column(String(200), nullable=True)
    data_nascimento: Mapped[date | None] = mapped_column(Date, nullable=True)
