from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.colaborador import Colaborador
    from app.models.disciplina import Disciplina
    from app.models.faculdade import Faculdade
    from app.models.turma import Turma

MAX_TURMAS = 4


class Curso(Base):
    __tablename__ = "cursos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # unico dentro da faculdade (checado no servico)
    nome: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    mensalidade: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=Decimal("0"))

    faculdade_id: Mapped[int] = mapped_column(
        ForeignKey("faculdades.id", ondelete="CASCADE"), nullable=False, index=True
    )

    faculdade: Mapped[Faculdade] = relationship(back_populates="cursos")
    turmas: Mapped[list[Turma]] = relationship(
        back_populates="curso", cascade="all, delete-orphan", order_by="Turma.id"
    )
    disciplinas: Mapped[list[Disciplina]] = relationship(
        back_populates="curso", cascade="all, delete-orphan", order_by="Disciplina.id"
    )

    # responsavel (1:1 opcional); a FK fica em colaboradores.curso_id
    colaborador: Mapped[Colaborador | None] = relationship(
        back_populates="curso", uselist=False, cascade="all"
    )

    @property
    def faculdade_nome(self) -> str | None:
        return self.faculdade.nome if self.faculdade is not None else None

    @property
    def colaborador_nome(self) -> str | None:
        if self.colaborador is None or self.colaborador.pessoa is None:
            return None
        return self.colaborador.pessoa.nome
