"""Caller identity verification interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from project_api.domain.identifiers import UserId
from project_api.schemas.error import ValidationIssue


class IdentityVerificationError(Exception):
    """Raised when a header value cannot be turned into a caller identity."""

    def __init__(self, message: str, issues: list[ValidationIssue] | None = None) -> None:
        self.issues = issues or []
        super().__init__(message)


class CallerIdentityVerifier(ABC):
    """Provider-neutral identity verification interface."""

    @abstractmethod
    def verify(self, value: str | list[str]) -> UserId:
        """Verify a raw header value and return the caller's user id."""


__all__ = ["CallerIdentityVerifier", "IdentityVerificationError"]
