from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, get_user_service
from app.mappers import user_out, user_resumo_out
from app.schemas import ConquistasOut, MensagemOut, UserOut, UserResumoOut, UserUpdate
from app.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResumoOut])
def list_users(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    service: UserService = Depends(get_user_service),
    current_user: str = Depends(get_current_user),
):
    return [user_resumo_out(u) for u in service.listar(page, page_size)]


@router.get("/profile", response_model=UserOut)
def profile(service: UserService = Depends(get_user_service), current_user: str = Depends(get_current_user)):
    return user_out(service.perfil(current_user))


@router.get("/verify-cpf", response_model=MensagemOut)
def verify_cpf(cpf: str = Query(...), service: UserService = Depends(get_user_service)):
    service.verificar_cpf(cpf)
    return MensagemOut(message="CPF está cadastrado.")


@router.get("/verify-email", response_model=MensagemOut)
def verify_email(email: str = Query(...), service: UserService = Depends(get_user_service)):
    service.verificar_email(email)
    return MensagemOut(message="E-mail está cadastrado.")


@router.put("/update", response_model=UserOut)
def update_user(
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
    current_user: str = Depends(get_current_user),
):
    user, token = service.atualizar(current_user, payload)
    return user_out(user, token)


@router.get("/achievements", response_model=ConquistasOut)
def achievements(service: UserService = Depends(get_user_service), current_user: str = Depends(get_current_user)):
    return ConquistasOut(**service.conquistas(current_user))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(service: UserService = Depends(get_user_service), current_user: str = Depends(get_current_user)):
    service.remover(current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
