"""Randomized user directory used as a stand-in for a real user store."""

from __future__ import annotations

import random
from collections.abc import Callable

from project_api.adapters.users.base import UserDirectory
from project_api.domain.identifiers import UserId

DEFAULT_MISS_RATIO = 0.3


class RandomUserDirectory(UserDirectory):
    """Reports a user as missing when a uniform draw in [0, 1) falls below ``miss_ratio``."""

    def __init__(self, miss_ratio: float = DEFAULT_MISS_RATIO, draw: Callable[[], float] = random.random) -> None:
        if not 0.0 <= miss_ratio <= 1.0:
            raise ValueError("miss_ratio must be between 0 and 1")
        self._miss_ratio = miss_ratio
        self._draw = draw

    def exists(self, user_id: UserId) -> bool:
        return self._draw() >= self._miss_ratio


__all__ = ["DEFAULT_MISS_RATIO", "RandomUserDirectory"]
