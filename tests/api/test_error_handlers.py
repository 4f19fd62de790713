"""
Testes dos exception handlers: status por tipo de erro e corpo padronizado.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from app.api.error_handlers import GENERIC_500, register_exception_handlers
from app.core.exceptions import (
    AuthError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)


class Corpo(BaseModel):
    quantidade: int


@pytest.fixture
def app_with_handlers():
    """App FastAPI mínimo com os handlers registrados."""
    app = FastAPI()
    register_exception_handlers(app)
    return app


@pytest.fixture
def client(app_with_handlers):
    return TestClient(app_with_handlers, raise_server_exceptions=False)


class TestExceptionHandlers:
    def test_validation_error_400(self, app_with_handlers, client):
        @app_with_handlers.get("/validation")
        async def raise_validation():
            raise ValidationError("CPF inválido.", details={"field": "cpf"})

        response = client.get("/validation")

        assert response.status_code == 400
        assert response.json() == {
            "error": "ValidationError",
            "message": "CPF inválido.",
            "details": {"field": "cpf"},
        }

    def test_auth_error_401_com_header(self, app_with_handlers, client):
        @app_with_handlers.get("/auth")
        async def raise_auth():
            raise AuthError()

        response = client.get("/auth")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["message"] == "Usuário não autenticado."

    def test_not_found_404(self, app_with_handlers, client):
        @app_with_handlers.get("/not-found")
        async def raise_not_found():
            raise NotFoundError("Curso", 42)

        response = client.get("/not-found")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "NotFoundError"
        assert data["message"] == "Curso não encontrado(a)."
        assert data["details"]["id"] == "42"

    def test_conflict_409(self, app_with_handlers, client):
        @app_with_handlers.get("/conflict")
        async def raise_conflict():
            raise ConflictError("Já existe um usuário com este CPF ou Email.")

        response = client.get("/conflict")

        assert response.status_code == 409
        assert response.json()["error"] == "ConflictError"


class TestErrosInternos:
    def test_internal_error_nao_vaza_detalhes(self, app_with_handlers, client):
        @app_with_handlers.get("/internal")
        async def raise_internal():
            raise InternalError("Falha ao executar 'remover usuário'", original_error=RuntimeError("disk"))

        response = client.get("/internal")

        assert response.status_code == 500
        assert response.json() == GENERIC_500

    def test_excecao_generica(self, app_with_handlers, client):
        @app_with_handlers.get("/boom")
        async def boom():
            raise RuntimeError("segredo do banco")

        response = client.get("/boom")

        assert response.status_code == 500
        assert "segredo" not in response.text
        assert response.json() == GENERIC_500


class TestRequestValidation:
    def test_corpo_invalido_vira_400(self, app_with_handlers, client):
        @app_with_handlers.post("/corpo")
        async def recebe(corpo: Corpo):
            return {"ok": True}

        response = client.post("/corpo", json={"quantidade": "muitos"})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "ValidationError"
        assert data["message"] == "Requisição inválida."
        assert data["details"]["erros"][0]["campo"] == "body.quantidade"
