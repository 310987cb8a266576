"""User directory adapters."""

from .base import UserDirectory
from .random_directory import DEFAULT_MISS_RATIO, RandomUserDirectory
from .static_directory import StaticUserDirectory

__all__ = [
    "DEFAULT_MISS_RATIO",
    "UserDirectory",
    "RandomUserDirectory",
    "StaticUserDirectory",
]
