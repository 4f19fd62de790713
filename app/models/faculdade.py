from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.endereco import EnderecoMixin

if TYPE_CHECKING:
    from app.models.curso import Curso
    from app.models.user import User

UNIVERSIDADE_INDEFINIDA = "Universidade não definida"


class TipoFaculdade(str, enum.Enum):
    Publica = "Publica"
    Privada = "Privada"
    Militar = "Militar"


class Faculdade(EnderecoMixin, Base):
    __tablename__ = "faculdades"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    # (user_cpf, cnpj) unico: validado no servico, nao no schema
    cnpj: Mapped[str] = mapped_column(String(18), nullable=False, index=True)
    telefone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email_responsavel: Mapped[str | None] = mapped_column(String(200), nullable=True)
    tipo: Mapped[TipoFaculdade] = mapped_column(Enum(TipoFaculdade), nullable=False)

    user_cpf: Mapped[str] = mapped_column(
        ForeignKey("users.cpf", ondelete="CASCADE"), nullable=False, index=True
    )

    user: Mapped[User] = relationship(back_populates="faculdades")
    cursos: Mapped[list[Curso]] = relationship(
        back_populates="faculdade", cascade="all, delete-orphan", order_by="Curso.id"
    )

    @property
    def universidade_nome(self) -> str:
        if self.user is not None and self.user.universidade_nome:
            return self.user.universidade_nome
        return UNIVERSIDADE_INDEFINIDA
