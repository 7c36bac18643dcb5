from __future__ import annotations
"""server/prometheus_lens/core/middleware.py
~~~~~~~~~~~~~~~~~~~~~~~~
Middleware global + traduction des erreurs métier en réponses HTTP.

Corps d'erreur : {"error": <message>, "details": <optionnel>}
- ValidationError            -> 400 (details.field)
- RequestValidationError     -> 400 (details = erreurs pydantic)
- NotFoundError              -> 404
- PrometheusError            -> 500 (details.configWritten)
- SQLAlchemyError            -> 500
"""
import logging
import time
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from prometheus_lens.domain.errors import NotFoundError, PrometheusError, ValidationError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, details: Optional[Any] = None) -> JSONResponse:
    body: dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def install_global_middleware(app: FastAPI) -> None:
    """À appeler à l'import de main.py (avant le démarrage de l'app)."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.debug("%s %s -> %s (%d ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        details = {"field": exc.field} if exc.field else None
        return error_response(400, exc.message, details)

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        logger.info("%s %s: %s (%s)", request.method, request.url.path, exc.message, exc.entity_id)
        return error_response(404, exc.message)

    @app.exception_handler(PrometheusError)
    async def _prometheus_error(request: Request, exc: PrometheusError):
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
        return error_response(500, exc.message, {"configWritten": exc.config_written})

    @app.exception_handler(RequestValidationError)
    async def _request_validation(request: Request, exc: RequestValidationError):
        logger.warning("%s %s: corps de requête invalide", request.method, request.url.path)
        errors = [
            {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
            for e in exc.errors()
        ]
        return error_response(400, "Invalid request body", errors)

    @app.exception_handler(SQLAlchemyError)
    async def _database_error(request: Request, exc: SQLAlchemyError):
        logger.error("%s %s: erreur base de données", request.method, request.url.path, exc_info=exc)
        return error_response(500, "Database error", str(exc))
