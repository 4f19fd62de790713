import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.db.session import transacao
from app.models import Colaborador, Curso, Faculdade, User
from app.schemas import FaculdadeIn, FaculdadeUpdate
from app.services.base import aplicar_endereco, aplicar_parcial, nome_normalizado, novo_endereco, offset

logger = logging.getLogger(__name__)

CAMPOS_ATUALIZAVEIS = ("nome", "cnpj", "telefone", "email_responsavel", "tipo")

# o que as respostas de faculdade precisam carregado
_GRAFO = (
    selectinload(Faculdade.user),
    selectinload(Faculdade.cursos).selectinload(Curso.colaborador).selectinload(Colaborador.pessoa),
)


class FaculdadeService:
    def __init__(self, db: Session):
        self.db = db

    def _get(self, faculdade_id: int) -> Faculdade:
        faculdade = self.db.execute(
            select(Faculdade).options(*_GRAFO).where(Faculdade.id == faculdade_id)
        ).scalar_one_or_none()
        if faculdade is None:
            raise NotFoundError("Faculdade", faculdade_id)
        return faculdade

    def _cnpj_em_uso(self, user_cpf: str, cnpj: str, ignorar_id: int | None = None) -> bool:
        q = select(Faculdade.id).where(Faculdade.user_cpf == user_cpf, Faculdade.cnpj == cnpj)
        if ignorar_id is not None:
            q = q.where(Faculdade.id != ignorar_id)
        return self.db.execute(q).first() is not None

    def criar(self, payload: FaculdadeIn, user_cpf: str) -> Faculdade:
        user = self.db.get(User, user_cpf)
        if user is None:
            raise NotFoundError("Usuário", user_cpf)

        if self._cnpj_em_uso(user_cpf, payload.cnpj):
            raise ConflictError(
                "Este usuário já possui uma faculdade com este CNPJ.",
                details={"cnpj": payload.cnpj},
            )

        nomes = [n.strip() for n in (payload.cursos_oferecidos or []) if n and n.strip()]
        vistos = set()
        repetidos = []
        for nome in nomes:
            if nome_normalizado(nome) in vistos:
                repetidos.append(nome)
            vistos.add(nome_normalizado(nome))
        if repetidos:
            raise ValidationError(f"Cursos repetidos: {', '.join(repetidos)}.")

        faculdade = Faculdade(
            nome=payload.nome,
            cnpj=payload.cnpj,
            telefone=payload.telefone,
            email_responsavel=payload.email_responsavel,
            tipo=payload.tipo,
        )
        faculdade.endereco = novo_endereco(payload.endereco)
        for nome in nomes:
            faculdade.cursos.append(Curso(nome=nome, mensalidade=Decimal("0")))

        with transacao(self.db, "criar faculdade"):
            user.faculdades.append(faculdade)

        logger.info(f"Faculdade {faculdade.id} criada com {len(nomes)} curso(s)")
        return self._get(faculdade.id)

    def obter(self, faculdade_id: int) -> Faculdade:
        return self._get(faculdade_id)

    def listar(self, page: int = 1, page_size: int = 10) -> list[Faculdade]:
        return self.db.execute(
            select(Faculdade)
            .options(*_GRAFO)
            .order_by(Faculdade.id)
            .offset(offset(page, page_size))
            .limit(page_size)
        ).scalars().all()

    def listar_por_cpf(self, cpf: str) -> list[Faculdade]:
        if self.db.get(User, cpf) is None:
            raise NotFoundError("Usuário", cpf)
        return self.db.execute(
            select(Faculdade).options(*_GRAFO).where(Faculdade.user_cpf == cpf).order_by(Faculdade.id)
        ).scalars().all()

    def atualizar(self, faculdade_id: int, payload: FaculdadeUpdate) -> Faculdade:
        faculdade = self._get(faculdade_id)

        if payload.cnpj and payload.cnpj != faculdade.cnpj:
            if self._cnpj_em_uso(faculdade.user_cpf, payload.cnpj, ignorar_id=faculdade.id):
                raise ConflictError(
                    "Este usuário já possui uma faculdade com este CNPJ.",
                    details={"cnpj": payload.cnpj},
                )

        with transacao(self.db, "atualizar faculdade"):
            alterados = aplicar_parcial(faculdade, payload, CAMPOS_ATUALIZAVEIS)
            alterados += aplicar_endereco(faculdade, payload.endereco)

        logger.info(f"Faculdade {faculdade_id} atualizada: {alterados}")
        return faculdade

    def remover(self, faculdade_id: int) -> None:
        faculdade = self._get(faculdade_id)
        with transacao(self.db, "remover faculdade"):
            self.db.delete(faculdade)
        logger.info(f"Faculdade {faculdade_id} removida")

    def adicionar_cursos(self, faculdade_id: int, curso_ids: list[int]) -> list[Curso]:
        """
        Vincula cursos existentes a esta faculdade.

        Ids já vinculados são ignorados; se nenhum for novo, é erro.
        """
        faculdade = self._get(faculdade_id)
        ids = list(dict.fromkeys(curso_ids))

        cursos = self.db.execute(select(Curso).where(Curso.id.in_(ids))).scalars().all()
        encontrados = {c.id for c in cursos}
        faltando = [i for i in ids if i not in encontrados]
        if faltando:
            raise NotFoundError("Curso", ", ".join(str(i) for i in faltando))

        novos = [c for c in cursos if c.faculdade_id != faculdade.id]
        if not novos:
            raise ValidationError("Nenhum curso novo para adicionar.")

        nomes = {nome_normalizado(c.nome) for c in faculdade.cursos}
        for curso in novos:
            if nome_normalizado(curso.nome) in nomes:
                raise ConflictError(
                    f"A faculdade já possui um curso chamado '{curso.nome}'.",
                    details={"curso_id": curso.id},
                )
            nomes.add(nome_normalizado(curso.nome))

        with transacao(self.db, "adicionar cursos à faculdade"):
            for curso in novos:
                curso.faculdade = faculdade

        logger.info(f"Faculdade {faculdade_id}: cursos vinculados {[c.id for c in novos]}")
        return novos
