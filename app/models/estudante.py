from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.pessoa import Pessoa

if TYPE_CHECKING:
    from app.models.turma import Turma

class Estudante(Base):
    __tablename__ = "estudantes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    numero_matricula: Mapped[str | None] = mapped_column(String(40), nullable=True, index=True)
    data_matricula: Mapped[date | None] = mapped_column(Date, nullable=True)
    telefone_pai: Mapped[str | None] = mapped_column(String(20), nullable=True)
    telefone_mae: Mapped[str | None] = mapped_column(String(20), nullable=True)

    pessoa_id: Mapped[int] = mapped_column(ForeignKey("pessoas.id"), nullable=False, unique=True)
    turma_id: Mapped[int] = mapped_column(
        ForeignKey("turmas.id", ondelete="CASCADE"), nullable=False, index=True
    )

    pessoa: Mapped[Pessoa] = relationship(cascade="all, delete-orphan", single_parent=True)
    turma: Mapped[Turma] = relationship(back_populates="estudantes")

    @property
    def turma_nome(self) -> str:
        return self.turma.nome if self.turma is not None else ""
