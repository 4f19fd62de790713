from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, get_estudante_service
from app.mappers import estudante_out
from app.schemas import EstudanteIn, EstudanteOut, EstudanteUpdate
from app.services import EstudanteService

router = APIRouter(prefix="/estudantes", tags=["estudantes"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[EstudanteOut])
def list_estudantes(service: EstudanteService = Depends(get_estudante_service)):
    return [estudante_out(e) for e in service.listar()]


@router.get("/por-cpf", response_model=list[EstudanteOut])
def list_by_cpf(
    cpf: str | None = Query(None, description="CPF do dono das faculdades; padrão: usuário do token"),
    service: EstudanteService = Depends(get_estudante_service),
    current_user: str = Depends(get_current_user),
):
    return [estudante_out(e) for e in service.listar_por_cpf(cpf or current_user)]


@router.get("/{estudante_id}", response_model=EstudanteOut)
def get_estudante(estudante_id: int, service: EstudanteService = Depends(get_estudante_service)):
    return estudante_out(service.obter(estudante_id))


@router.post("", response_model=EstudanteOut, status_code=status.HTTP_201_CREATED)
def create_estudante(payload: EstudanteIn, response: Response, service: EstudanteService = Depends(get_estudante_service)):
    estudante = service.criar(payload)
    response.headers["Location"] = f"/estudantes/{estudante.id}"
    return estudante_out(estudante)


@router.put("/{estudante_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_estudante(
    estudante_id: int,
    payload: EstudanteUpdate,
    service: EstudanteService = Depends(get_estudante_service),
):
    service.atualizar(estudante_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{estudante_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_estudante(estudante_id: int, service: EstudanteService = Depends(get_estudante_service)):
    service.remover(estudante_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
