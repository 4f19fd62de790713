import logging
from collections import Counter

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.db.session import transacao
from app.models import Colaborador, Curso, Disciplina, Estudante, Faculdade, Turma
from app.models.curso import MAX_TURMAS
from app.schemas import CursoIn, DisciplinaIn, TurmaIn
from app.services.base import LIKE_ESCAPE, nome_normalizado, offset, termo_like

logger = logging.getLogger(__name__)

_GRAFO = (
    selectinload(Curso.faculdade),
    selectinload(Curso.colaborador).selectinload(Colaborador.pessoa),
    selectinload(Curso.turmas).selectinload(Turma.estudantes).selectinload(Estudante.pessoa),
    selectinload(Curso.disciplinas),
)


# ----------------------------
# Regras de turmas/disciplinas
# ----------------------------
def periodos_repetidos(periodos) -> list:
    contagem = Counter(periodos)
    return [p for p in dict.fromkeys(periodos) if contagem[p] > 1]

def validar_periodos(periodos) -> None:
    repetidos = periodos_repetidos(periodos)
    if repetidos:
        nomes = ", ".join(p.value for p in repetidos)
        raise ValidationError(
            f"Os seguintes períodos foram repetidos: {nomes}.",
            details={"periodos": [p.value for p in repetidos]},
        )

def validar_limite_turmas(total: int) -> None:
    if total > MAX_TURMAS:
        raise ValidationError(
            f"Um curso pode ter no máximo {MAX_TURMAS} turmas.",
            details={"total": total},
        )

def validar_nomes_disciplinas(nomes) -> None:
    contagem = Counter(nome_normalizado(n) for n in nomes)
    repetidos = [n for n in dict.fromkeys(nomes) if contagem[nome_normalizado(n)] > 1]
    if repetidos:
        raise ValidationError(
            f"As seguintes disciplinas foram repetidas: {', '.join(dict.fromkeys(repetidos))}.",
            details={"disciplinas": list(dict.fromkeys(repetidos))},
        )


class CursoService:
    def __init__(self, db: Session):
        self.db = db

    def _get(self, curso_id: int) -> Curso:
        curso = self.db.execute(
            select(Curso).options(*_GRAFO).where(Curso.id == curso_id)
        ).scalar_one_or_none()
        if curso is None:
            raise NotFoundError("Curso", curso_id)
        return curso

    def _faculdade(self, faculdade_id: int) -> Faculdade:
        faculdade = self.db.get(Faculdade, faculdade_id)
        if faculdade is None:
            raise NotFoundError("Faculdade", faculdade_id)
        return faculdade

    def _checar_nome(self, faculdade_id: int, nome: str, ignorar_id: int | None = None) -> None:
        q = select(Curso.id).where(
            Curso.faculdade_id == faculdade_id, func.lower(func.trim(Curso.nome)) == nome_normalizado(nome)
        )
        if ignorar_id is not None:
            q = q.where(Curso.id != ignorar_id)
        if self.db.execute(q).first() is not None:
            raise ConflictError(
                f"Já existe um curso chamado '{nome}' nesta faculdade.",
                details={"faculdade_id": faculdade_id},
            )

    # ----------------------------
    # CRUD
    # ----------------------------
    def criar(self, payload: CursoIn) -> Curso:
        faculdade = self._faculdade(payload.faculdade_id)
        self._checar_nome(faculdade.id, payload.nome)

        if payload.quantidade_turmas is not None and len(payload.turmas) != payload.quantidade_turmas:
            raise ValidationError(
                "A quantidade de turmas fornecida não corresponde à quantidade especificada.",
                details={"esperado": payload.quantidade_turmas, "recebido": len(payload.turmas)},
            )
        validar_periodos([t.periodo for t in payload.turmas])
        validar_limite_turmas(len(payload.turmas))
        validar_nomes_disciplinas([d.nome for d in payload.disciplinas])

        curso = Curso(nome=payload.nome, mensalidade=payload.mensalidade)
        for t in payload.turmas:
            curso.turmas.append(Turma(nome=t.nome, periodo=t.periodo))
        for d in payload.disciplinas:
            curso.disciplinas.append(Disciplina(nome=d.nome, descricao=d.descricao))

        with transacao(self.db, "criar curso"):
            faculdade.cursos.append(curso)

        logger.info(
            f"Curso {curso.id} criado na faculdade {faculdade.id} "
            f"({len(payload.turmas)} turmas, {len(payload.disciplinas)} disciplinas)"
        )
        return self._get(curso.id)

    def obter(self, curso_id: int) -> Curso:
        return self._get(curso_id)

    def listar(self) -> list[Curso]:
        return self.db.execute(select(Curso).options(*_GRAFO).order_by(Curso.id)).scalars().all()

    def listar_por_faculdade(self, faculdade_id: int) -> list[Curso]:
        self._faculdade(faculdade_id)
        return self.db.execute(
            select(Curso).options(*_GRAFO).where(Curso.faculdade_id == faculdade_id).order_by(Curso.id)
        ).scalars().all()

    def listar_paginado(self, page: int = 1, page_size: int = 10, busca: str | None = None) -> tuple[list[Curso], int]:
        q = select(Curso)
        if busca:
            q = q.where(Curso.nome.ilike(termo_like(busca), escape=LIKE_ESCAPE))

        total = self.db.execute(select(func.count()).select_from(q.subquery())).scalar_one()
        itens = self.db.execute(
            q.options(*_GRAFO).order_by(Curso.id).offset(offset(page, page_size)).limit(page_size)
        ).scalars().all()
        return itens, total

    def atualizar(self, curso_id: int, payload: CursoIn) -> Curso:
        """
        Substitui os escalares e reconcilia turmas/disciplinas pelo id.

        Existente e enviado -> atualiza; enviado sem id conhecido -> cria;
        existente e não enviado -> remove (turma leva junto os estudantes).
        """
        curso = self._get(curso_id)

        faculdade = curso.faculdade
        if payload.faculdade_id != curso.faculdade_id:
            faculdade = self._faculdade(payload.faculdade_id)
        if payload.nome != curso.nome or faculdade.id != curso.faculdade_id:
            self._checar_nome(faculdade.id, payload.nome, ignorar_id=curso.id)

        validar_periodos([t.periodo for t in payload.turmas])
        validar_limite_turmas(len(payload.turmas))
        validar_nomes_disciplinas([d.nome for d in payload.disciplinas])

        with transacao(self.db, "atualizar curso"):
            curso.nome = payload.nome
            curso.mensalidade = payload.mensalidade
            if faculdade.id != curso.faculdade_id:
                curso.faculdade = faculdade

            self._reconciliar(curso.turmas, payload.turmas, Turma, ("nome", "periodo"))
            self._reconciliar(curso.disciplinas, payload.disciplinas, Disciplina, ("nome", "descricao"))

        logger.info(
            f"Curso {curso_id} atualizado: {len(curso.turmas)} turmas, {len(curso.disciplinas)} disciplinas"
        )
        return curso

    @staticmethod
    def _reconciliar(existentes: list, enviados: list, model, campos: tuple) -> None:
        por_id = {item.id: item for item in existentes}
        manter = set()

        for req in enviados:
            atual = por_id.get(req.id) if req.id is not None else None
            if atual is not None:
                for campo in campos:
                    setattr(atual, campo, getattr(req, campo))
                manter.add(atual.id)
            else:
                existentes.append(model(**{campo: getattr(req, campo) for campo in campos}))

        # delete-orphan: sair da colecao apaga a linha
        for item in [i for i in existentes if i.id is not None and i.id not in manter]:
            existentes.remove(item)

    def remover(self, curso_id: int) -> None:
        curso = self._get(curso_id)
        with transacao(self.db, "remover curso"):
            self.db.delete(curso)
        logger.info(f"Curso {curso_id} removido")

    # ----------------------------
    # Sub-recursos
    # ----------------------------
    def adicionar_turmas(self, curso_id: int, turmas: list[TurmaIn]) -> Curso:
        if not turmas:
            raise ValidationError("Nenhuma turma informada.")
        curso = self._get(curso_id)

        validar_limite_turmas(len(curso.turmas) + len(turmas))
        validar_periodos([t.periodo for t in curso.turmas] + [t.periodo for t in turmas])

        with transacao(self.db, "adicionar turmas"):
            for t in turmas:
                curso.turmas.append(Turma(nome=t.nome, periodo=t.periodo))

        logger.info(f"Curso {curso_id}: {len(turmas)} turma(s) adicionada(s)")
        return curso

    def adicionar_disciplinas(self, curso_id: int, disciplinas: list[DisciplinaIn]) -> Curso:
        if not disciplinas:
            raise ValidationError("Nenhuma disciplina informada.")
        curso = self._get(curso_id)

        validar_nomes_disciplinas([d.nome for d in curso.disciplinas] + [d.nome for d in disciplinas])

        with transacao(self.db, "adicionar disciplinas"):
            for d in disciplinas:
                curso.disciplinas.append(Disciplina(nome=d.nome, descricao=d.descricao))

        logger.info(f"Curso {curso_id}: {len(disciplinas)} disciplina(s) adicionada(s)")
        return curso

    def remover_turma(self, curso_id: int, turma_id: int) -> None:
        curso = self._get(curso_id)
        turma = next((t for t in curso.turmas if t.id == turma_id), None)
        if turma is None:
            raise NotFoundError("Turma", turma_id)

        with transacao(self.db, "remover turma"):
            curso.turmas.remove(turma)
        logger.info(f"Curso {curso_id}: turma {turma_id} removida")

    def remover_disciplina(self, curso_id: int, disciplina_id: int) -> None:
        curso = self._get(curso_id)
        disciplina = next((d for d in curso.disciplinas if d.id == disciplina_id), None)
        if disciplina is None:
            raise NotFoundError("Disciplina", disciplina_id)

        with transacao(self.db, "remover disciplina"):
            curso.disciplinas.remove(disciplina)
        logger.info(f"Curso {curso_id}: disciplina {disciplina_id} removida")
