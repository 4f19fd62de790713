from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.colaborador import Colaborador
    from app.models.faculdade import Faculdade

class User(Base):
    __tablename__ = "users"

    cpf: Mapped[str] = mapped_column(String(11), primary_key=True)
    nome: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)

    # par hash/salt fica nulo ate o cadastro ser concluido
    password_hash: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    password_salt: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)

    url_imagem: Mapped[str | None] = mapped_column(String(500), nullable=True)
    universidade_nome: Mapped[str | None] = mapped_column(String(200), nullable=True)
    universidade_cnpj: Mapped[str | None] = mapped_column(String(18), nullable=True)
    universidade_contato_info: Mapped[str | None] = mapped_column(String(500), nullable=True)

    faculdades: Mapped[list[Faculdade]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    colaboradores: Mapped[list[Colaborador]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
