from decimal import Decimal

from app.models import TipoFaculdade
from app.schemas import CursoIn, EnderecoIn, FaculdadeIn, RegisterIn

CPF_VALIDO = "52998224725"
CPF_VALIDO_2 = "11144477735"
SENHA = "s3nh@-forte"


def registrar(auth_service, cpf=CPF_VALIDO, email="reitoria@campus.edu.br", nome="Ana Reitora", **extra):
    payload = RegisterIn(cpf=cpf, email=email, nome=nome, password=SENHA, **extra)
    return auth_service.register(payload)


def faculdade_in(**overrides) -> FaculdadeIn:
    data = dict(
        nome="Faculdade de Tecnologia",
        cnpj="12345678000199",
        telefone="111",
        email_responsavel="dir@fatec.edu.br",
        endereco=EnderecoIn(logradouro="Rua A", numero="10", cidade="Recife", estado="PE", cep="50000-000"),
        tipo=TipoFaculdade.Publica,
    )
    data.update(overrides)
    return FaculdadeIn(**data)


def curso_in(faculdade_id: int, **overrides) -> CursoIn:
    data = dict(nome="Engenharia de Software", mensalidade=Decimal("1500.00"), faculdade_id=faculdade_id)
    data.update(overrides)
    return CursoIn(**data)
