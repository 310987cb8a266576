"""API error response schemas."""

from typing import Any

from pydantic import BaseModel, ValidationError


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ValidationIssue(BaseModel):
    loc: list[str | int]
    msg: str
    type: str


def validation_issues(exc: ValidationError) -> list[ValidationIssue]:
    """Flatten a pydantic error into JSON-safe issues (no input echo, no ctx)."""
    return [
        ValidationIssue(loc=list(error["loc"]), msg=error["msg"], type=error["type"])
        for error in exc.errors(include_url=False)
    ]
