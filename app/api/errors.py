# ============================================================================
# FILE: app/api/errors.py
# ============================================================================
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from app.core.errors import Conflict, NotFound, StorageError
import logging

logger = logging.getLogger(__name__)

def unwrap(result):
    """Return a service result, or raise the HTTPException matching its error"""
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    if isinstance(result, Conflict):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)
    if isinstance(result, StorageError):
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result.message)
    return result

def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # drop the leading "body"/"path"/"query" segment
        field = ".".join(str(loc) for loc in error.get("loc", ())[1:]) or "body"
        parts.append(f"{field}: {error.get('msg')}")
    return f"Validation failed: {', '.join(parts)}"

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _format_validation_errors(exc)},
    )

async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
