import pytest

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.mappers import faculdade_out
from app.models import TipoFaculdade
from app.models.faculdade import UNIVERSIDADE_INDEFINIDA
from app.schemas import EnderecoIn, FaculdadeUpdate
from app.services import ColaboradorService, CursoService, EstudanteService, FaculdadeService
from tests.factories import CPF_VALIDO, CPF_VALIDO_2, curso_in, faculdade_in, registrar


class TestCriar:
    def test_cria_com_endereco(self, db, usuario):
        faculdade = FaculdadeService(db).criar(faculdade_in(), CPF_VALIDO)

        assert faculdade.id is not None
        assert faculdade.user_cpf == CPF_VALIDO
        assert faculdade.endereco.cidade == "Recife"
        assert faculdade.tipo == TipoFaculdade.Publica

    def test_cursos_oferecidos_viram_cursos(self, db, usuario):
        faculdade = FaculdadeService(db).criar(
            faculdade_in(cursos_oferecidos=["Direito", "Medicina"]), CPF_VALIDO
        )

        assert [c.nome for c in faculdade.cursos] == ["Direito", "Medicina"]

    def test_cursos_oferecidos_repetidos(self, db, usuario):
        with pytest.raises(ValidationError) as exc:
            FaculdadeService(db).criar(faculdade_in(cursos_oferecidos=["Direito", "direito"]), CPF_VALIDO)
        assert "direito" in exc.value.message

    def test_cnpj_repetido_para_o_mesmo_usuario(self, db, usuario):
        service = FaculdadeService(db)
        service.criar(faculdade_in(), CPF_VALIDO)

        with pytest.raises(ConflictError):
            service.criar(faculdade_in(nome="Outra"), CPF_VALIDO)

    def test_mesmo_cnpj_em_usuarios_diferentes(self, db, auth_service, usuario):
        registrar(auth_service, cpf=CPF_VALIDO_2, email="outro@campus.edu.br")
        service = FaculdadeService(db)

        service.criar(faculdade_in(), CPF_VALIDO)
        outra = service.criar(faculdade_in(), CPF_VALIDO_2)

        assert outra.user_cpf == CPF_VALIDO_2

    def test_usuario_inexistente(self, db, tables):
        with pytest.raises(NotFoundError):
            FaculdadeService(db).criar(faculdade_in(), CPF_VALIDO)


class TestLeitura:
    def test_universidade_nome_vem_do_usuario(self, db, usuario):
        faculdade = FaculdadeService(db).criar(faculdade_in(), CPF_VALIDO)
        assert faculdade_out(faculdade).universidade_nome == "Universidade Federal"

    def test_universidade_nao_definida(self, db, auth_service):
        registrar(auth_service)
        faculdade = FaculdadeService(db).criar(faculdade_in(), CPF_VALIDO)
        assert faculdade.universidade_nome == UNIVERSIDADE_INDEFINIDA

    def test_listar_por_cpf(self, db, auth_service, usuario):
        registrar(auth_service, cpf=CPF_VALIDO_2, email="outro@campus.edu.br")
        service = FaculdadeService(db)
        minha = service.criar(faculdade_in(), CPF_VALIDO)
        service.criar(faculdade_in(cnpj="99"), CPF_VALIDO_2)

        assert [f.id for f in service.listar_por_cpf(CPF_VALIDO)] == [minha.id]
        assert len(service.listar()) == 2

    def test_listar_por_cpf_desconhecido(self, db, tables):
        with pytest.raises(NotFoundError):
            FaculdadeService(db).listar_por_cpf(CPF_VALIDO)

    def test_obter_inexistente(self, db, tables):
        with pytest.raises(NotFoundError):
            FaculdadeService(db).obter(999)


class TestAtualizar:
    def test_vazio_nao_sobrescreve(self, db, usuario):
        service = FaculdadeService(db)
        faculdade = service.criar(faculdade_in(), CPF_VALIDO)

        service.atualizar(faculdade.id, FaculdadeUpdate(telefone=""))
        assert service.obter(faculdade.id).telefone == "111"

        service.atualizar(faculdade.id, FaculdadeUpdate(telefone="222"))
        assert service.obter(faculdade.id).telefone == "222"

    def test_endereco_parcial(self, db, usuario):
        service = FaculdadeService(db)
        faculdade = service.criar(faculdade_in(), CPF_VALIDO)

        service.atualizar(faculdade.id, FaculdadeUpdate(endereco=EnderecoIn(cidade="Olinda", cep="")))

        endereco = service.obter(faculdade.id).endereco
        assert endereco.cidade == "Olinda"
        assert endereco.logradouro == "Rua A"
        assert endereco.cep == "50000-000"

    def test_tipo(self, db, usuario):
        service = FaculdadeService(db)
        faculdade = service.criar(faculdade_in(), CPF_VALIDO)

        service.atualizar(faculdade.id, FaculdadeUpdate(tipo=TipoFaculdade.Militar))
        assert service.obter(faculdade.id).tipo == TipoFaculdade.Militar

    def test_cnpj_de_outra_faculdade_do_usuario(self, db, usuario):
        service = FaculdadeService(db)
        service.criar(faculdade_in(), CPF_VALIDO)
        segunda = service.criar(faculdade_in(cnpj="99"), CPF_VALIDO)

        with pytest.raises(ConflictError):
            service.atualizar(segunda.id, FaculdadeUpdate(cnpj="12345678000199"))


class TestAdicionarCursos:
    def _duas_faculdades(self, db):
        service = FaculdadeService(db)
        destino = service.criar(faculdade_in(), CPF_VALIDO)
        origem = service.criar(faculdade_in(cnpj="99", cursos_oferecidos=["Direito", "Medicina"]), CPF_VALIDO)
        return service, destino, origem

    def test_move_cursos(self, db, usuario):
        service, destino, origem = self._duas_faculdades(db)
        ids = [c.id for c in origem.cursos]

        novos = service.adicionar_cursos(destino.id, ids)

        assert sorted(c.id for c in novos) == sorted(ids)
        assert sorted(c.nome for c in service.obter(destino.id).cursos) == ["Direito", "Medicina"]
        assert CursoService(db).obter(ids[0]).faculdade_id == destino.id

    def test_ja_vinculados_sao_ignorados(self, db, usuario):
        service, destino, origem = self._duas_faculdades(db)
        direito, medicina = origem.cursos
        service.adicionar_cursos(destino.id, [direito.id])

        novos = service.adicionar_cursos(destino.id, [direito.id, medicina.id])
        assert [c.id for c in novos] == [medicina.id]

    def test_nenhum_novo(self, db, usuario):
        service, destino, origem = self._duas_faculdades(db)
        ids = [c.id for c in origem.cursos]
        service.adicionar_cursos(destino.id, ids)

        with pytest.raises(ValidationError):
            service.adicionar_cursos(destino.id, ids)

    def test_curso_inexistente(self, db, usuario):
        service, destino, _ = self._duas_faculdades(db)
        with pytest.raises(NotFoundError):
            service.adicionar_cursos(destino.id, [999])

    def test_nome_ja_usado_na_faculdade(self, db, usuario):
        service, destino, origem = self._duas_faculdades(db)
        CursoService(db).criar(curso_in(destino.id, nome="direito"))

        with pytest.raises(ConflictError):
            service.adicionar_cursos(destino.id, [origem.cursos[0].id])


    def test_nome_com_espacos_nas_pontas(self, db, usuario):
        service, destino, _ = self._duas_faculdades(db)
        CursoService(db).criar(curso_in(destino.id, nome="Filosofia"))
        terceira = service.criar(faculdade_in(cnpj="77"), CPF_VALIDO)
        avulso = CursoService(db).criar(curso_in(terceira.id, nome=" filosofia  "))

        with pytest.raises(ConflictError):
            service.adicionar_cursos(destino.id, [avulso.id])


class TestRemover:
    def test_cascata(self, db, grafo):
        FaculdadeService(db).remover(grafo["faculdade"].id)

        with pytest.raises(NotFoundError):
            FaculdadeService(db).obter(grafo["faculdade"].id)
        with pytest.raises(NotFoundError):
            CursoService(db).obter(grafo["curso"].id)
        with pytest.raises(NotFoundError):
            EstudanteService(db).obter(grafo["estudante"].id)
        with pytest.raises(NotFoundError):
            ColaboradorService(db).obter(grafo["colaborador"].id)

    def test_inexistente(self, db, tables):
        with pytest.raises(NotFoundError):
            FaculdadeService(db).remover(1)
