from fastapi import APIRouter, Depends

from app.api.deps import get_auth_service
from app.mappers import user_out
from app.schemas import ChangePasswordIn, LoginIn, MensagemOut, RegisterIn, ResetPasswordIn, UserOut
from app.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserOut)
def login(payload: LoginIn, service: AuthService = Depends(get_auth_service)):
    user, token = service.login(payload.email, payload.password)
    return user_out(user, token)


@router.post("/register", response_model=UserOut)
def register(payload: RegisterIn, service: AuthService = Depends(get_auth_service)):
    user, token = service.register(payload)
    return user_out(user, token)


@router.post("/change-password", response_model=MensagemOut)
def change_password(payload: ChangePasswordIn, service: AuthService = Depends(get_auth_service)):
    service.change_password(payload)
    return MensagemOut(message="Senha alterada com sucesso.")


@router.post("/reset-password", response_model=MensagemOut)
def reset_password(payload: ResetPasswordIn, service: AuthService = Depends(get_auth_service)):
    service.reset_password(payload)
    return MensagemOut(message="Senha redefinida com sucesso.")
