"""Application error types and error response rendering."""

from typing import Any

from fastapi.responses import JSONResponse

from project_api.schemas.error import ErrorResponse


class OutcomeMappingError(RuntimeError):
    """Raised at startup when an outcome variant has no HTTP mapping."""


def error_response(status_code: int, code: str, message: str, details: dict[str, Any] | None = None) -> JSONResponse:
    """Render the structured error envelope."""
    payload = ErrorResponse(code=code, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json", exclude_none=True),
    )


__all__ = ["OutcomeMappingError", "error_response"]
