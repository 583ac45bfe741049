"""
Recommendation Errors

Structured boundary errors for the recommendation API. Every rejected
request is answered with {"error", "code", "field"}.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


INVALID_INPUT = "INVALID_INPUT"
MIXED_CANDIDATES = "MIXED_CANDIDATES"
PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"


class RecommendationError(Exception):
    """Caller error raised before any scoring happens."""

    def __init__(
        self,
        message: str,
        code: str = INVALID_INPUT,
        field: Optional[str] = None,
        status_code: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field
        self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code, "field": self.field}


def _field_from_location(loc) -> Optional[str]:
    # ("body", "profile", "logical") -> "profile.logical"
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or None


async def recommendation_error_handler(request: Request, exc: RecommendationError):
    logger.warning(f"⚠️ Rejected {request.url.path}: {exc.code} ({exc.field}) {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    error = RecommendationError(
        first.get("msg", "Invalid request body"),
        code=INVALID_INPUT,
        field=_field_from_location(first.get("loc", ())),
    )
    return await recommendation_error_handler(request, error)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecommendationError, recommendation_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
