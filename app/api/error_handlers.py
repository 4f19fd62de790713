"""
Exception handlers do FastAPI.

Erros de dominio viram {"error", "message", "details"}; erros internos
nunca levam detalhes para o cliente (ficam só no log).
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    AuthError,
    CampusSyncError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_500 = {
    "error": "InternalServerError",
    "message": "Erro interno do servidor",
    "details": {},
}

STATUS_BY_ERROR = {
    ValidationError: 400,
    AuthError: 401,
    NotFoundError: 404,
    ConflictError: 409,
}


def _status_for(exc: CampusSyncError) -> int:
    for klass, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, klass):
            return status_code
    return 500


async def campussync_exception_handler(request: Request, exc: CampusSyncError) -> JSONResponse:
    status_code = _status_for(exc)
    error_type = exc.__class__.__name__

    if status_code == 500:
        logger.error(f"{error_type}: {exc.message}", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content=GENERIC_500)

    logger.info(f"{error_type} em {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"error": error_type, "message": exc.message, "details": exc.details},
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    erros = [
        {"campo": ".".join(str(p) for p in e.get("loc", ())), "erro": e.get("msg", "")}
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "message": "Requisição inválida.", "details": {"erros": erros}},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Erro nao tratado: {exc}", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content=GENERIC_500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CampusSyncError, campussync_exception_handler)
    app.add_exception_handler(InternalError, campussync_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
