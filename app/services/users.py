import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, InternalError, NotFoundError, ValidationError
from app.core.security import TokenIssuer
from app.core.validators import is_filled, is_valid_cpf, is_valid_email, normalize_email, only_digits
from app.db.session import transacao
from app.models import Curso, Estudante, Faculdade, Turma, User
from app.schemas import UserUpdate
from app.services.base import aplicar_parcial, offset

logger = logging.getLogger(__name__)

CAMPOS_ATUALIZAVEIS = (
    "nome",
    "url_imagem",
    "universidade_nome",
    "universidade_cnpj",
    "universidade_contato_info",
)


class UserService:
    def __init__(self, db: Session, tokens: TokenIssuer | None = None):
        self.db = db
        self.tokens = tokens

    def _get(self, cpf: str) -> User:
        user = self.db.get(User, cpf)
        if user is None:
            raise NotFoundError("Usuário", cpf)
        return user

    def perfil(self, cpf: str) -> User:
        return self._get(cpf)

    def verificar_cpf(self, cpf: str) -> User:
        # CPF malformado nem chega ao banco
        if not is_valid_cpf(cpf):
            raise ValidationError("CPF inválido.")
        user = self.db.get(User, only_digits(cpf))
        if user is None:
            raise NotFoundError("CPF", only_digits(cpf))
        return user

    def verificar_email(self, email: str) -> User:
        if not is_valid_email(email):
            raise ValidationError("E-mail inválido.")
        user = self.db.execute(
            select(User).where(func.lower(User.email) == normalize_email(email))
        ).scalars().first()
        if user is None:
            raise NotFoundError("E-mail", email)
        return user

    def atualizar(self, cpf: str, payload: UserUpdate) -> tuple[User, str]:
        # a resposta leva um token novo; sem emissor nada é gravado
        if self.tokens is None:
            raise InternalError("UserService sem TokenIssuer não pode atualizar usuários")
        user = self._get(cpf)

        # email só entra se preenchido E bem formado; do contrario fica o atual
        novo_email = None
        if is_filled(payload.email) and is_valid_email(payload.email):
            novo_email = normalize_email(payload.email)
        if novo_email and novo_email != user.email:
            dono = self.db.execute(
                select(User).where(func.lower(User.email) == novo_email, User.cpf != cpf)
            ).scalars().first()
            if dono is not None:
                raise ConflictError("Já existe um usuário com este Email.")

        with transacao(self.db, "atualizar usuário"):
            alterados = aplicar_parcial(user, payload, CAMPOS_ATUALIZAVEIS)
            if novo_email and novo_email != user.email:
                user.email = novo_email
                alterados.append("email")

        logger.info(f"Usuário {cpf[:3]}*** atualizado: {alterados}")
        return user, self.tokens.create_token(user)

    def conquistas(self, cpf: str) -> dict:
        self._get(cpf)

        faculdades_ids = select(Faculdade.id).where(Faculdade.user_cpf == cpf)
        cursos_ids = select(Curso.id).where(Curso.faculdade_id.in_(faculdades_ids))
        turmas_ids = select(Turma.id).where(Turma.curso_id.in_(cursos_ids))

        faculdades = self.db.execute(
            select(func.count()).select_from(Faculdade).where(Faculdade.user_cpf == cpf)
        ).scalar_one()
        cursos = self.db.execute(
            select(func.count()).select_from(Curso).where(Curso.faculdade_id.in_(faculdades_ids))
        ).scalar_one()
        estudantes = self.db.execute(
            select(func.count()).select_from(Estudante).where(Estudante.turma_id.in_(turmas_ids))
        ).scalar_one()

        return {"faculdades": faculdades, "cursos": cursos, "estudantes": estudantes}

    def listar(self, page: int = 1, page_size: int = 10) -> list[User]:
        return self.db.execute(
            select(User).order_by(User.cpf).offset(offset(page, page_size)).limit(page_size)
        ).scalars().all()

    def remover(self, cpf: str) -> None:
        """
        Remove o usuário e todo o grafo que ele possui.

        Faculdades -> Cursos -> Turmas -> Estudantes, Disciplinas, colaborador
        responsável; mais os colaboradores criados por ele. Tudo ou nada.
        """
        user = self._get(cpf)
        with transacao(self.db, "remover usuário"):
            self.db.delete(user)
        logger.info(f"Usuário {cpf[:3]}*** removido com todo o grafo")
