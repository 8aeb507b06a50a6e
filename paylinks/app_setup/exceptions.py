"""
Gestionnaires d'exceptions de l'API.
- RequestValidationError -> 400 { message, errors: [{field, message}] } (un seul message par champ).
- ProviderError -> 500 { error } avec le message Stripe.
- HTTPException -> { detail } (forme FastAPI standard).
- toute autre exception -> 500 { error }, tracée avec la pile.
"""
import logging
from typing import Any, Dict, List, Sequence
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from paylinks.errors import ProviderError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Validation failed"


def _field_path(loc: Sequence[Any]) -> str:
    # ("body", "unitAmount") -> "unitAmount"; ("body",) -> "body"
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    return ".".join(parts)


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Une entrée par champ invalide, dans l'ordre des erreurs pydantic."""
    seen: Dict[str, str] = {}
    for err in errors:
        field = _field_path(err.get("loc") or ())
        if field not in seen:
            seen[field] = str(err.get("msg") or "Invalid value")
    return [{"field": f, "message": m} for f, m in seen.items()]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        errors = format_validation_errors(exc.errors())
        logger.info("request.invalid path=%s fields=%s", request.url.path, [e["field"] for e in errors])
        return JSONResponse(status_code=400, content={"message": VALIDATION_MESSAGE, "errors": errors})

    @app.exception_handler(ProviderError)
    async def provider_error(request: Request, exc: ProviderError):
        logger.error(
            "provider.error path=%s mode=%s operation=%s error=%s",
            request.url.path, exc.mode, exc.operation, exc.message,
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("request.failed path=%s", request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal error"})

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)
