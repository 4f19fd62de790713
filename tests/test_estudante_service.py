from datetime import date

import pytest
from sqlalchemy import func, select

from app.core.exceptions import NotFoundError
from app.mappers import estudante_out
from app.models import Periodo, Pessoa
from app.schemas import EstudanteIn, EstudanteUpdate, TurmaIn
from app.services import CursoService, EstudanteService
from tests.factories import CPF_VALIDO, CPF_VALIDO_2, registrar


class TestCriar:
    def test_matricula_na_turma(self, db, grafo):
        estudante = EstudanteService(db).criar(
            EstudanteIn(
                nome="Caio Aluno",
                turma_id=grafo["turma"].id,
                numero_matricula="2024-002",
                data_nascimento=date(2005, 6, 1),
            )
        )

        out = estudante_out(estudante)
        assert out.turma_id == grafo["turma"].id
        assert out.turma_nome == "ES-1"
        assert out.nome == "Caio Aluno"
        assert out.data_nascimento == date(2005, 6, 1)

    def test_turma_inexistente(self, db, usuario):
        with pytest.raises(NotFoundError):
            EstudanteService(db).criar(EstudanteIn(nome="X", turma_id=999))


class TestListagem:
    def test_por_cpf_segue_faculdades_do_usuario(self, db, grafo, auth_service):
        registrar(auth_service, cpf=CPF_VALIDO_2, email="outro@campus.edu.br")
        service = EstudanteService(db)

        assert [e.id for e in service.listar_por_cpf(CPF_VALIDO)] == [grafo["estudante"].id]
        assert service.listar_por_cpf(CPF_VALIDO_2) == []

    def test_por_cpf_desconhecido(self, db, tables):
        with pytest.raises(NotFoundError):
            EstudanteService(db).listar_por_cpf(CPF_VALIDO)

    def test_listar(self, db, grafo):
        assert [e.pessoa.nome for e in EstudanteService(db).listar()] == ["Bruno Aluno"]


class TestAtualizar:
    def test_parcial(self, db, grafo):
        service = EstudanteService(db)
        estudante_id = grafo["estudante"].id

        service.atualizar(estudante_id, EstudanteUpdate(nome="", telefone_pai="81999990000"))

        estudante = service.obter(estudante_id)
        assert estudante.pessoa.nome == "Bruno Aluno"
        assert estudante.telefone_pai == "81999990000"
        assert estudante.data_matricula == date(2024, 2, 1)

    def test_troca_de_turma(self, db, grafo):
        curso = CursoService(db).adicionar_turmas(
            grafo["curso"].id, [TurmaIn(nome="ES-2", periodo=Periodo.Noturno)]
        )
        nova = next(t for t in curso.turmas if t.nome == "ES-2")

        service = EstudanteService(db)
        service.atualizar(grafo["estudante"].id, EstudanteUpdate(turma_id=nova.id))

        estudante = service.obter(grafo["estudante"].id)
        assert estudante.turma_id == nova.id
        assert estudante.turma_nome == "ES-2"

    def test_turma_inexistente(self, db, grafo):
        with pytest.raises(NotFoundError):
            EstudanteService(db).atualizar(grafo["estudante"].id, EstudanteUpdate(turma_id=999))


class TestRemover:
    def test_remove_a_pessoa_junto(self, db, grafo):
        antes = db.execute(select(func.count()).select_from(Pessoa)).scalar_one()

        EstudanteService(db).remover(grafo["estudante"].id)

        with pytest.raises(NotFoundError):
            EstudanteService(db).obter(grafo["estudante"].id)
        assert db.execute(select(func.count()).select_from(Pessoa)).scalar_one() == antes - 1
