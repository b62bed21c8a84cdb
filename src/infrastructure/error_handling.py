# infrastructure/error_handling.py
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from domain.exceptions import AppError
from domain.models.response_models import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Ocorreu um erro interno no servidor"


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    body = jsonable_encoder(ErrorResponse(message=message))
    return JSONResponse(status_code=status_code, content=body, headers=headers)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Última barreira: qualquer exceção não tratada vira 500 genérico.

    O detalhe vai para o log do servidor, nunca para o cliente.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Ocorreu uma exceção não tratada em %s %s", request.method, request.url.path)
            return error_response(500, INTERNAL_ERROR_MESSAGE)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", []) if p != "body")
        msg = str(error.get("msg", ""))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return error_response(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(400, f"Validação falhou: {_format_validation_errors(exc)}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Requisição inválida"
        return error_response(exc.status_code, message, getattr(exc, "headers", None))

    app.add_middleware(ErrorBoundaryMiddleware)
