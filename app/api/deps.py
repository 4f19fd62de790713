from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.clock import Clock, system_clock
from app.core.config import settings
from app.core.exceptions import AuthError
from app.core.security import TokenIssuer
from app.db.session import get_db
from app.services import (
    AuthService,
    ColaboradorService,
    CursoService,
    EstudanteService,
    FaculdadeService,
    UserService,
)

bearer_scheme = HTTPBearer(auto_error=False)

def get_clock() -> Clock:
    return system_clock

def get_token_issuer(clock: Clock = Depends(get_clock)) -> TokenIssuer:
    return TokenIssuer(settings.AUTH_SECRET, ttl_days=settings.TOKEN_TTL_DAYS, clock=clock)

def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """Resolve o token para o CPF do usuário autenticado."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("Token de acesso ausente.")

    payload = tokens.decode(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise AuthError("Token inválido ou expirado.")

    return payload["sub"]


# ----------------------------
# Serviços
# ----------------------------
def get_auth_service(
    db: Session = Depends(get_db),
    tokens: TokenIssuer = Depends(get_token_issuer),
    clock: Clock = Depends(get_clock),
) -> AuthService:
    return AuthService(db, tokens, clock, failure_delay=settings.LOGIN_FAILURE_DELAY_SECONDS)

def get_user_service(
    db: Session = Depends(get_db),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> UserService:
    return UserService(db, tokens)

def get_faculdade_service(db: Session = Depends(get_db)) -> FaculdadeService:
    return FaculdadeService(db)

def get_curso_service(db: Session = Depends(get_db)) -> CursoService:
    return CursoService(db)

def get_colaborador_service(db: Session = Depends(get_db)) -> ColaboradorService:
    return ColaboradorService(db)

def get_estudante_service(db: Session = Depends(get_db)) -> EstudanteService:
    return EstudanteService(db)
