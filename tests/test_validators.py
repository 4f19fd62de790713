"""Testes do validador de CPF/e-mail e da regra de campo preenchido."""
import pytest

from app.core.validators import is_filled, is_valid_cpf, is_valid_email, only_digits

CPF = "52998224725"


class TestCpf:
    def test_cpf_conhecido_valido(self):
        assert is_valid_cpf(CPF) is True

    def test_outro_cpf_valido(self):
        assert is_valid_cpf("11144477735") is True

    def test_pontuacao_e_descartada(self):
        assert is_valid_cpf("529.982.247-25") is True

    @pytest.mark.parametrize("posicao", range(11))
    def test_qualquer_digito_alterado_invalida(self, posicao):
        original = int(CPF[posicao])
        for novo in range(10):
            if novo == original:
                continue
            mutado = CPF[:posicao] + str(novo) + CPF[posicao + 1:]
            assert is_valid_cpf(mutado) is False, mutado

    @pytest.mark.parametrize("valor", ["", "5299822472", "529982247251", "abc", None])
    def test_tamanho_diferente_de_11_invalida(self, valor):
        assert is_valid_cpf(valor) is False

    def test_only_digits(self):
        assert only_digits("529.982.247-25") == CPF
        assert only_digits(None) == ""


class TestEmail:
    @pytest.mark.parametrize("email", ["a@b.co", "Reitoria@Campus.edu.br"])
    def test_validos(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", ["", None, "sem-arroba", "a@b", "a b@c.com"])
    def test_invalidos(self, email):
        assert not is_valid_email(email)


class TestIsFilled:
    def test_none_e_vazio_nao_contam(self):
        assert is_filled(None) is False
        assert is_filled("") is False

    def test_valores_preenchidos(self):
        assert is_filled("222") is True
        assert is_filled(0) is True
