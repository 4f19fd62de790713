from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_colaborador_service, get_current_user
from app.mappers import colaborador_out
from app.schemas import ColaboradorIn, ColaboradorOut, ColaboradorUpdate
from app.services import ColaboradorService

router = APIRouter(prefix="/colaboradores", tags=["colaboradores"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[ColaboradorOut])
def list_colaboradores(service: ColaboradorService = Depends(get_colaborador_service)):
    return [colaborador_out(c) for c in service.listar()]


@router.get("/por-cpf", response_model=list[ColaboradorOut])
def list_by_cpf(
    cpf: str | None = Query(None, description="CPF do usuário dono; padrão: usuário do token"),
    service: ColaboradorService = Depends(get_colaborador_service),
    current_user: str = Depends(get_current_user),
):
    return [colaborador_out(c) for c in service.listar_por_cpf(cpf or current_user)]


@router.get("/{colaborador_id}", response_model=ColaboradorOut)
def get_colaborador(colaborador_id: int, service: ColaboradorService = Depends(get_colaborador_service)):
    return colaborador_out(service.obter(colaborador_id))


@router.post("", response_model=ColaboradorOut, status_code=status.HTTP_201_CREATED)
def create_colaborador(
    payload: ColaboradorIn,
    response: Response,
    service: ColaboradorService = Depends(get_colaborador_service),
    current_user: str = Depends(get_current_user),
):
    colaborador = service.criar(payload, payload.user_cpf or current_user)
    response.headers["Location"] = f"/colaboradores/{colaborador.id}"
    return colaborador_out(colaborador)


@router.put("/{colaborador_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_colaborador(
    colaborador_id: int,
    payload: ColaboradorUpdate,
    service: ColaboradorService = Depends(get_colaborador_service),
):
    service.atualizar(colaborador_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{colaborador_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_colaborador(colaborador_id: int, service: ColaboradorService = Depends(get_colaborador_service)):
    service.remover(colaborador_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
