"""Header verifier that trusts any well-formed UUID as the caller's user id."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from project_api.adapters.auth.base import CallerIdentityVerifier, IdentityVerificationError
from project_api.domain.identifiers import UserId
from project_api.schemas.error import ValidationIssue, validation_issues
from project_api.schemas.project import UserIdField

_USER_ID_ADAPTER: TypeAdapter[str] = TypeAdapter(UserIdField)


class UuidHeaderIdentityVerifier(CallerIdentityVerifier):
    """Checks UUID syntax only.

    This is a format gate, not authentication: the value is not proven to
    belong to the caller.
    """

    def __init__(self, header_name: str = "Authorization") -> None:
        self._header_name = header_name

    def verify(self, value: str | list[str]) -> UserId:
        location: list[str | int] = ["header", self._header_name]
        if isinstance(value, list):
            raise IdentityVerificationError(
                "Invalid caller identity",
                issues=[
                    ValidationIssue(
                        loc=location,
                        msg="Header must be supplied exactly once",
                        type="multiple_values",
                    )
                ],
            )

        try:
            user_id = _USER_ID_ADAPTER.validate_python(value)
        except ValidationError as exc:
            issues = [
                ValidationIssue(loc=[*location, *issue.loc], msg=issue.msg, type=issue.type)
                for issue in validation_issues(exc)
            ]
            raise IdentityVerificationError("Invalid caller identity", issues=issues) from exc

        return UserId(user_id)


__all__ = ["UuidHeaderIdentityVerifier"]
