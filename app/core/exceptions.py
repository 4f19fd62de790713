"""
Exceptions de dominio do CampusSync.

Cada classe corresponde a um status HTTP em app/api/error_handlers.py.
Os servicos levantam estas exceptions antes de qualquer escrita.
"""
from typing import Optional


class CampusSyncError(Exception):
    """Base para todos os erros de dominio."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(CampusSyncError):
    """Entrada malformada, ausente ou contraditoria."""
    pass


class NotFoundError(CampusSyncError):
    """Entidade referenciada nao existe."""

    def __init__(self, resource: str, identifier: Optional[object] = None):
        self.resource = resource
        message = f"{resource} não encontrado(a)."
        details = {}
        if identifier is not None:
            details["id"] = str(identifier)
        super().__init__(message, details)


class AuthError(CampusSyncError):
    """Credenciais ou token ausentes/invalidos."""

    def __init__(self, message: str = "Usuário não autenticado."):
        super().__init__(message)


class ConflictError(CampusSyncError):
    """Violacao de unicidade (cpf, email, nome de curso...)."""
    pass


class InternalError(CampusSyncError):
    """
    Falha inesperada (ex.: transacao abortada no meio de uma cascata).

    A mensagem fica nos logs; o cliente recebe apenas um 500 generico.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(message)
