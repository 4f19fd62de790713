from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, get_curso_service
from app.mappers import curso_out
from app.schemas import CursoIn, CursoOut, CursoPageOut, DisciplinaIn, TurmaIn
from app.services import CursoService

router = APIRouter(prefix="/cursos", tags=["cursos"], dependencies=[Depends(get_current_user)])


# ----------------------------
# Leitura
# ----------------------------
@router.get("", response_model=list[CursoOut])
def list_cursos(service: CursoService = Depends(get_curso_service)):
    return [curso_out(c) for c in service.listar()]


@router.get("/paginado", response_model=CursoPageOut)
def list_paginado(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, description="Trecho do nome do curso"),
    service: CursoService = Depends(get_curso_service),
):
    itens, total = service.listar_paginado(page, page_size, search)
    return CursoPageOut(page=page, page_size=page_size, total=total, items=[curso_out(c) for c in itens])


@router.get("/por-faculdade/{faculdade_id}", response_model=list[CursoOut])
def list_by_faculdade(faculdade_id: int, service: CursoService = Depends(get_curso_service)):
    return [curso_out(c) for c in service.listar_por_faculdade(faculdade_id)]


@router.get("/{curso_id}", response_model=CursoOut)
def get_curso(curso_id: int, service: CursoService = Depends(get_curso_service)):
    return curso_out(service.obter(curso_id))


# ----------------------------
# Escrita
# ----------------------------
@router.post("", response_model=CursoOut, status_code=status.HTTP_201_CREATED)
def create_curso(payload: CursoIn, response: Response, service: CursoService = Depends(get_curso_service)):
    curso = service.criar(payload)
    response.headers["Location"] = f"/cursos/{curso.id}"
    return curso_out(curso)


@router.put("/{curso_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_curso(curso_id: int, payload: CursoIn, service: CursoService = Depends(get_curso_service)):
    service.atualizar(curso_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{curso_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_curso(curso_id: int, service: CursoService = Depends(get_curso_service)):
    service.remover(curso_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{curso_id}/turmas", response_model=CursoOut)
def add_turmas(curso_id: int, payload: list[TurmaIn], service: CursoService = Depends(get_curso_service)):
    return curso_out(service.adicionar_turmas(curso_id, payload))


@router.post("/{curso_id}/disciplinas", response_model=CursoOut)
def add_disciplinas(curso_id: int, payload: list[DisciplinaIn], service: CursoService = Depends(get_curso_service)):
    return curso_out(service.adicionar_disciplinas(curso_id, payload))


@router.delete("/{curso_id}/turmas/{turma_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_turma(curso_id: int, turma_id: int, service: CursoService = Depends(get_curso_service)):
    service.remover_turma(curso_id, turma_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{curso_id}/disciplinas/{disciplina_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_disciplina(curso_id: int, disciplina_id: int, service: CursoService = Depends(get_curso_service)):
    service.remover_disciplina(curso_id, disciplina_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
