"""
Maps DevEventError subclasses to JSON error responses.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from devevent.core.errors import DevEventError, ValidationError
from devevent.core.logging import get_logger

logger = get_logger(__name__)


class ErrorResponse(BaseModel):
    error: str
    detail: str
    field: Optional[str] = None


async def devevent_error_handler(request: Request, exc: DevEventError) -> JSONResponse:
    field = exc.field if isinstance(exc, ValidationError) else None
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "request_rejected",
        error=exc.error,
        detail=exc.message,
        field=field,
        status_code=exc.status_code,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.error,
            detail=exc.message,
            field=field,
        ).model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DevEventError, devevent_error_handler)
