"""User directory interfaces."""

from abc import ABC, abstractmethod

from project_api.domain.identifiers import UserId


class UserDirectory(ABC):
    """Answers whether a caller identity refers to a known user."""

    @abstractmethod
    def exists(self, user_id: UserId) -> bool:
        """Return True when the user is known."""


__all__ = ["UserDirectory"]
