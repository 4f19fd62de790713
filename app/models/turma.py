from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.curso import Curso
    from app.models.estudante import Estudante


class Periodo(str, enum.Enum):
    Matutino = "Matutino"
    Vespertino = "Vespertino"
    Noturno = "Noturno"
    Integral = "Integral"


class Turma(Base):
    __tablename__ = "turmas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    nome: Mapped[str] = mapped_column(String(120), nullable=False)
    periodo: Mapped[Periodo] = mapped_column(Enum(Periodo), nullable=False)

    curso_id: Mapped[int] = mapped_column(
        ForeignKey("cursos.id", ondelete="CASCADE"), nullable=False, index=True
    )

    curso: Mapped[Curso] = relationship(back_populates="turmas")
    estudantes: Mapped[list[Estudante]] = relationship(
        back_populates="turma", cascade="all, delete-orphan", order_by="Estudante.id"
    )
