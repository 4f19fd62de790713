from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.pessoa import Pessoa

if TYPE_CHECKING:
    from app.models.curso import Curso
    from app.models.user import User

CARGO_DOCENTE = "Docente"


class Colaborador(Base):
    __tablename__ = "colaboradores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    cargo: Mapped[str] = mapped_column(String(60), nullable=False, default="")
    numero_registro: Mapped[str | None] = mapped_column(String(40), nullable=True)
    data_admissao: Mapped[date | None] = mapped_column(Date, nullable=True)

    pessoa_id: Mapped[int] = mapped_column(ForeignKey("pessoas.id"), nullable=False, unique=True)
    user_cpf: Mapped[str] = mapped_column(
        ForeignKey("users.cpf", ondelete="CASCADE"), nullable=False, index=True
    )
    # obrigatorio para Docente; um curso tem no maximo um responsavel
    curso_id: Mapped[int | None] = mapped_column(
        ForeignKey("cursos.id", ondelete="SET NULL"), nullable=True, unique=True
    )

    pessoa: Mapped[Pessoa] = relationship(cascade="all, delete-orphan", single_parent=True)
    user: Mapped[User] = relationship(back_populates="colaboradores")
    curso: Mapped[Curso | None] = relationship(back_populates="colaborador")

    @property
    def is_docente(self) -> bool:
        return self.cargo == CARGO_DOCENTE
