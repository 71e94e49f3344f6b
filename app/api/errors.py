"""Error responses shared by the engine routers."""

import logging
from typing import Any, NoReturn

from fastapi import HTTPException, status
from pydantic import BaseModel, Field

from src.section_engine import InvalidInputError


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(description="Error type")
    message: str = Field(description="Error message")
    detail: Any = Field(default=None, description="Additional error details")


class ErrorEnvelope(BaseModel):
    """Body of an engine error response, as raised through HTTPException."""

    detail: ErrorResponse


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {
        "model": ErrorEnvelope,
        "description": (
            "Invalid input. Engine errors carry an ErrorResponse under `detail`; "
            "request body schema errors use the standard FastAPI validation "
            "body, a list of field errors under `detail`."
        ),
    },
    500: {"model": ErrorEnvelope, "description": "Computation error"},
}


def raise_http_error(exc: Exception, logger: logging.Logger) -> NoReturn:
    """Translate an engine failure into an HTTPException."""
    if isinstance(exc, InvalidInputError):
        logger.error("Invalid input: %s", exc.message)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "invalid_input", "message": exc.message, "detail": exc.errors},
        ) from exc
    if isinstance(exc, ValueError):
        logger.error("Validation error: %s", str(exc))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "validation_error", "message": str(exc)},
        ) from exc
    logger.exception("Computation error")
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "computation_error", "message": str(exc)},
    ) from exc
