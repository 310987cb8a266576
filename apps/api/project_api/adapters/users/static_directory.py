"""Fixed user directory for local development and tests."""

from collections.abc import Iterable

from project_api.adapters.users.base import UserDirectory
from project_api.domain.identifiers import UserId


class StaticUserDirectory(UserDirectory):
    """Knows exactly the configured user ids (compared case-insensitively)."""

    def __init__(self, user_ids: Iterable[str] = ()) -> None:
        self._user_ids = frozenset(user_id.strip().lower() for user_id in user_ids)

    def exists(self, user_id: UserId) -> bool:
        return user_id.lower() in self._user_ids


__all__ = ["StaticUserDirectory"]
