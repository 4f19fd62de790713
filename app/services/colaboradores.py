import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.db.session import transacao
from app.models import Colaborador, Curso, Pessoa, User
from app.models.colaborador import CARGO_DOCENTE
from app.models.pessoa import PESSOA_CAMPOS
from app.schemas import ColaboradorIn, ColaboradorUpdate
from app.services.base import aplicar_endereco, aplicar_parcial, novo_endereco

logger = logging.getLogger(__name__)

CAMPOS_COLABORADOR = ("cargo", "numero_registro", "data_admissao")

_GRAFO = (
    selectinload(Colaborador.pessoa),
    selectinload(Colaborador.curso),
    selectinload(Colaborador.user),
)


class ColaboradorService:
    def __init__(self, db: Session):
        self.db = db

    def _get(self, colaborador_id: int) -> Colaborador:
        colaborador = self.db.execute(
            select(Colaborador).options(*_GRAFO).where(Colaborador.id == colaborador_id)
        ).scalar_one_or_none()
        if colaborador is None:
            raise NotFoundError("Colaborador", colaborador_id)
        return colaborador

    def _curso_livre(self, curso_id: int, colaborador_id: int | None = None) -> Curso:
        curso = self.db.get(Curso, curso_id)
        if curso is None:
            raise NotFoundError("Curso", curso_id)
        if curso.colaborador is not None and curso.colaborador.id != colaborador_id:
            raise ConflictError(
                "Este curso já possui um colaborador responsável.",
                details={"curso_id": curso_id},
            )
        return curso

    def criar(self, payload: ColaboradorIn, user_cpf: str) -> Colaborador:
        if payload.cargo == CARGO_DOCENTE and payload.curso_id is None:
            raise ValidationError("O campo Curso é obrigatório para o cargo 'Docente'.")

        user = self.db.get(User, user_cpf)
        if user is None:
            raise NotFoundError("Usuário", user_cpf)

        curso = self._curso_livre(payload.curso_id) if payload.curso_id is not None else None

        pessoa = Pessoa(**{campo: getattr(payload, campo) for campo in PESSOA_CAMPOS})
        pessoa.endereco = novo_endereco(payload.endereco)

        with transacao(self.db, "criar colaborador"):
            colaborador = Colaborador(
                cargo=payload.cargo,
                numero_registro=payload.numero_registro,
                data_admissao=payload.data_admissao,
                pessoa=pessoa,
                curso=curso,
            )
            user.colaboradores.append(colaborador)

        logger.info(f"Colaborador {colaborador.id} criado ({colaborador.cargo})")
        return colaborador

    def obter(self, colaborador_id: int) -> Colaborador:
        return self._get(colaborador_id)

    def listar(self) -> list[Colaborador]:
        return self.db.execute(
            select(Colaborador).options(*_GRAFO).order_by(Colaborador.id)
        ).scalars().all()

    def listar_por_cpf(self, cpf: str) -> list[Colaborador]:
        if self.db.get(User, cpf) is None:
            raise NotFoundError("Usuário", cpf)
        return self.db.execute(
            select(Colaborador)
            .join(Colaborador.user)
            .options(*_GRAFO)
            .where(User.cpf == cpf)
            .order_by(Colaborador.id)
        ).scalars().all()

    def atualizar(self, colaborador_id: int, payload: ColaboradorUpdate) -> Colaborador:
        colaborador = self._get(colaborador_id)

        curso = colaborador.curso
        if payload.curso_id is not None and payload.curso_id != colaborador.curso_id:
            curso = self._curso_livre(payload.curso_id, colaborador_id=colaborador.id)

        cargo_final = payload.cargo or colaborador.cargo
        if cargo_final == CARGO_DOCENTE and curso is None:
            raise ValidationError("O campo Curso é obrigatório para o cargo 'Docente'.")

        with transacao(self.db, "atualizar colaborador"):
            alterados = aplicar_parcial(colaborador, payload, CAMPOS_COLABORADOR)
            alterados += aplicar_parcial(colaborador.pessoa, payload, PESSOA_CAMPOS)
            alterados += aplicar_endereco(colaborador.pessoa, payload.endereco)
            if curso is not colaborador.curso:
                colaborador.curso = curso
                alterados.append("curso_id")

        logger.info(f"Colaborador {colaborador_id} atualizado: {alterados}")
        return colaborador

    def remover(self, colaborador_id: int) -> None:
        colaborador = self._get(colaborador_id)
        with transacao(self.db, "remover colaborador"):
            # solta o curso antes; a pessoa vai junto por cascade
            colaborador.curso = None
            self.db.delete(colaborador)
        logger.info(f"Colaborador {colaborador_id} removido")
