import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from app.core.clock import Clock
from app.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.security import TokenIssuer, hash_password, verify_password
from app.core.validators import is_valid_cpf, is_valid_email, normalize_email, only_digits
from app.db.session import transacao
from app.models import User
from app.schemas import ChangePasswordIn, RegisterIn, ResetPasswordIn

logger = logging.getLogger(__name__)

# usado quando o email nao existe: o custo do hash fica igual ao de senha errada
_DUMMY_HASH, _DUMMY_SALT = hash_password("campussync-dummy")


class AuthService:
    def __init__(self, db: Session, tokens: TokenIssuer, clock: Clock, failure_delay: float = 0.5):
        self.db = db
        self.tokens = tokens
        self.clock = clock
        self.failure_delay = failure_delay

    def login(self, email: str, password: str) -> tuple[User, str]:
        if not (email or "").strip() or not (password or "").strip():
            raise ValidationError("Email e senha são obrigatórios.")

        user = self.db.execute(
            select(User).where(func.lower(User.email) == normalize_email(email))
        ).scalar_one_or_none()

        if user is None:
            verify_password(password, _DUMMY_HASH, _DUMMY_SALT)
            ok = False
        else:
            ok = verify_password(password, user.password_hash, user.password_salt)

        if not ok:
            # atraso fixo: dificulta enumerar contas pelo tempo de resposta
            self.clock.sleep(self.failure_delay)
            logger.warning("Login rejeitado")
            raise AuthError("Credenciais inválidas.")

        logger.info(f"Login ok: {user.cpf[:3]}***")
        return user, self.tokens.create_token(user)

    def register(self, payload: RegisterIn) -> tuple[User, str]:
        if not payload.cpf.strip() or not payload.email.strip() or not payload.password.strip():
            raise ValidationError("CPF, Email e Senha são obrigatórios.")

        cpf = only_digits(payload.cpf)
        email = normalize_email(payload.email)
        if not is_valid_cpf(cpf):
            raise ValidationError("CPF inválido.", details={"field": "cpf"})
        if not is_valid_email(email):
            raise ValidationError("E-mail inválido.", details={"field": "email"})

        existing = self.db.execute(
            select(User).where(or_(User.cpf == cpf, func.lower(User.email) == email))
        ).scalars().first()
        if existing is not None:
            raise ConflictError("Já existe um usuário com este CPF ou Email.")

        password_hash, password_salt = hash_password(payload.password)
        user = User(
            cpf=cpf,
            nome=payload.nome,
            email=email,
            password_hash=password_hash,
            password_salt=password_salt,
            url_imagem=payload.url_imagem,
            universidade_nome=payload.universidade_nome,
            universidade_cnpj=payload.universidade_cnpj,
            universidade_contato_info=payload.universidade_contato_info,
        )

        with transacao(self.db, "registrar usuário"):
            self.db.add(user)

        logger.info(f"Usuário registrado: {cpf[:3]}***")
        return user, self.tokens.create_token(user)

    def change_password(self, payload: ChangePasswordIn) -> None:
        if not payload.cpf or not payload.old_password or not payload.new_password:
            raise ValidationError("Todos os campos são obrigatórios.")

        user = self.db.get(User, only_digits(payload.cpf))
        if user is None or not verify_password(payload.old_password, user.password_hash, user.password_salt):
            raise ValidationError("Credenciais inválidas.")

        with transacao(self.db, "alterar senha"):
            user.password_hash, user.password_salt = hash_password(payload.new_password)

    def reset_password(self, payload: ResetPasswordIn) -> None:
        """
        Redefine a senha só com o CPF.

        Contrato fraco herdado: não há prova de posse (token por e-mail etc).
        Cada uso é logado em WARNING.
        """
        if not payload.cpf or not payload.new_password:
            raise ValidationError("Todos os campos são obrigatórios.")

        cpf = only_digits(payload.cpf)
        user = self.db.get(User, cpf)
        if user is None:
            raise NotFoundError("Usuário", cpf)

        logger.warning(f"Senha redefinida sem verificação da senha anterior: {cpf[:3]}***")
        with transacao(self.db, "redefinir senha"):
            user.password_hash, user.password_salt = hash_password(payload.new_password)
