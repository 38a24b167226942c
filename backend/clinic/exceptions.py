"""
Error taxonomy and the FastAPI handlers that turn it into JSON responses.

Every error body has the shape ``{"error": "<message>"}``; validation errors
also list the failing fields.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Location prefixes FastAPI puts in front of the offending field name
_LOCATION_PREFIXES = ("body", "query", "path", "header")


class ClinicError(Exception):
    """Base class for errors reported to API clients."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(ClinicError):
    """A required request field is missing or malformed."""
    status_code = 400

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.fields: List[str] = list(fields or [])

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body["fields"] = self.fields
        return body

    @classmethod
    def from_errors(cls, errors: Iterable[Dict[str, Any]]) -> "ValidationError":
        """Build a single error out of pydantic's per-field error list."""
        fields = []
        messages = []
        for err in errors:
            loc = tuple(err.get("loc", ()))
            if err.get("type") == "json_invalid":
                name = "body"
            else:
                parts = [str(p) for p in loc if p not in _LOCATION_PREFIXES]
                name = ".".join(parts) if parts else (str(loc[0]) if loc else "request")
            if name not in fields:
                fields.append(name)
            messages.append(f"{name}: {err.get('msg', 'invalid value')}")
        return cls("Validation failed: " + "; ".join(messages), fields)


class NotFoundError(ClinicError):
    """No row matches the requested identifier."""
    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class StorageError(ClinicError):
    """The database rejected a read or write."""
    status_code = 500


class StartupError(ClinicError):
    """Connecting, creating the schema or seeding failed; the process must not serve."""


async def clinic_error_handler(request: Request, exc: ClinicError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError.from_errors(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {error.message}")
    return await clinic_error_handler(request, error)


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return await clinic_error_handler(request, StorageError(str(getattr(exc, "orig", None) or exc)))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an application."""
    app.add_exception_handler(ClinicError, clinic_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
