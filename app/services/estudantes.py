import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import NotFoundError
from app.db.session import transacao
from app.models import Curso, Estudante, Faculdade, Pessoa, Turma, User
from app.models.pessoa import PESSOA_CAMPOS
from app.schemas import EstudanteIn, EstudanteUpdate
from app.services.base import aplicar_endereco, aplicar_parcial, novo_endereco

logger = logging.getLogger(__name__)

CAMPOS_ESTUDANTE = ("numero_matricula", "data_matricula", "telefone_pai", "telefone_mae")

_GRAFO = (selectinload(Estudante.pessoa), selectinload(Estudante.turma))


class EstudanteService:
    def __init__(self, db: Session):
        self.db = db

    def _get(self, estudante_id: int) -> Estudante:
        estudante = self.db.execute(
            select(Estudante).options(*_GRAFO).where(Estudante.id == estudante_id)
        ).scalar_one_or_none()
        if estudante is None:
            raise NotFoundError("Estudante", estudante_id)
        return estudante

    def _turma(self, turma_id: int) -> Turma:
        turma = self.db.get(Turma, turma_id)
        if turma is None:
            raise NotFoundError("Turma", turma_id)
        return turma

    def criar(self, payload: EstudanteIn) -> Estudante:
        turma = self._turma(payload.turma_id)

        pessoa = Pessoa(**{campo: getattr(payload, campo) for campo in PESSOA_CAMPOS})
        pessoa.endereco = novo_endereco(payload.endereco)

        with transacao(self.db, "criar estudante"):
            estudante = Estudante(
                numero_matricula=payload.numero_matricula,
                data_matricula=payload.data_matricula,
                telefone_pai=payload.telefone_pai,
                telefone_mae=payload.telefone_mae,
                pessoa=pessoa,
            )
            turma.estudantes.append(estudante)

        logger.info(f"Estudante {estudante.id} matriculado na turma {turma.id}")
        return estudante

    def obter(self, estudante_id: int) -> Estudante:
        return self._get(estudante_id)

    def listar(self) -> list[Estudante]:
        return self.db.execute(
            select(Estudante).options(*_GRAFO).order_by(Estudante.id)
        ).scalars().all()

    def listar_por_cpf(self, cpf: str) -> list[Estudante]:
        """Estudantes das turmas dos cursos das faculdades do usuário."""
        if self.db.get(User, cpf) is None:
            raise NotFoundError("Usuário", cpf)
        return self.db.execute(
            select(Estudante)
            .join(Estudante.turma)
            .join(Turma.curso)
            .join(Curso.faculdade)
            .options(*_GRAFO)
            .where(Faculdade.user_cpf == cpf)
            .order_by(Estudante.id)
        ).scalars().all()

    def atualizar(self, estudante_id: int, payload: EstudanteUpdate) -> Estudante:
        estudante = self._get(estudante_id)

        turma = None
        if payload.turma_id is not None and payload.turma_id != estudante.turma_id:
            turma = self._turma(payload.turma_id)

        with transacao(self.db, "atualizar estudante"):
            alterados = aplicar_parcial(estudante, payload, CAMPOS_ESTUDANTE)
            alterados += aplicar_parcial(estudante.pessoa, payload, PESSOA_CAMPOS)
            alterados += aplicar_endereco(estudante.pessoa, payload.endereco)
            if turma is not None:
                estudante.turma = turma
                alterados.append("turma_id")

        logger.info(f"Estudante {estudante_id} atualizado: {alterados}")
        return estudante

    def remover(self, estudante_id: int) -> None:
        estudante = self._get(estudante_id)
        with transacao(self.db, "remover estudante"):
            self.db.delete(estudante)
        logger.info(f"Estudante {estudante_id} removido")
