# app/core/errors.py
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SavingsAPIError(Exception):
    """Base error for the API.

    `message` is safe to show to clients; `status_code` is the HTTP status
    the error maps to.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_public_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(SavingsAPIError):
    status_code = 400


class AuthError(SavingsAPIError):
    status_code = 401


class NotFoundError(SavingsAPIError):
    status_code = 404


class ConflictError(SavingsAPIError):
    status_code = 400


class InternalError(SavingsAPIError):
    status_code = 500


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # Drop the "body"/"path" prefix, keep the field name
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error to a `{"error": ...}` body."""

    @app.exception_handler(SavingsAPIError)
    async def savings_error_handler(request: Request, exc: SavingsAPIError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_public_dict(),
            headers=headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={"error": _describe_validation_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )
