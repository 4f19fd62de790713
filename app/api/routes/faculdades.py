from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, get_faculdade_service
from app.mappers import curso_resumo_out, faculdade_out
from app.schemas import AdicionarCursosIn, AdicionarCursosOut, FaculdadeIn, FaculdadeOut, FaculdadeUpdate
from app.services import FaculdadeService

router = APIRouter(prefix="/faculdades", tags=["faculdades"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[FaculdadeOut])
def list_faculdades(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    service: FaculdadeService = Depends(get_faculdade_service),
):
    return [faculdade_out(f) for f in service.listar(page, page_size)]


@router.get("/por-cpf", response_model=list[FaculdadeOut])
def list_by_cpf(
    cpf: str | None = Query(None, description="CPF do dono; padrão: usuário do token"),
    service: FaculdadeService = Depends(get_faculdade_service),
    current_user: str = Depends(get_current_user),
):
    return [faculdade_out(f) for f in service.listar_por_cpf(cpf or current_user)]


@router.get("/{faculdade_id}", response_model=FaculdadeOut)
def get_faculdade(faculdade_id: int, service: FaculdadeService = Depends(get_faculdade_service)):
    return faculdade_out(service.obter(faculdade_id))


@router.post("", response_model=FaculdadeOut, status_code=status.HTTP_201_CREATED)
def create_faculdade(
    payload: FaculdadeIn,
    response: Response,
    service: FaculdadeService = Depends(get_faculdade_service),
    current_user: str = Depends(get_current_user),
):
    faculdade = service.criar(payload, payload.user_cpf or current_user)
    response.headers["Location"] = f"/faculdades/{faculdade.id}"
    return faculdade_out(faculdade)


@router.put("/{faculdade_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_faculdade(
    faculdade_id: int,
    payload: FaculdadeUpdate,
    service: FaculdadeService = Depends(get_faculdade_service),
):
    service.atualizar(faculdade_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{faculdade_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_faculdade(faculdade_id: int, service: FaculdadeService = Depends(get_faculdade_service)):
    service.remover(faculdade_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{faculdade_id}/adicionar-cursos", response_model=AdicionarCursosOut)
def adicionar_cursos(
    faculdade_id: int,
    payload: AdicionarCursosIn,
    service: FaculdadeService = Depends(get_faculdade_service),
):
    novos = service.adicionar_cursos(faculdade_id, payload.curso_ids)
    return AdicionarCursosOut(
        faculdade_id=faculdade_id,
        cursos_adicionados=[curso_resumo_out(c) for c in novos],
    )
