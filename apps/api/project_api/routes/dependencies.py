"""Collaborator wiring for routes."""

from __future__ import annotations

import logging
from collections.abc import Callable

from project_api.adapters.auth import CallerIdentityVerifier, UuidHeaderIdentityVerifier
from project_api.adapters.users import RandomUserDirectory, StaticUserDirectory, UserDirectory
from project_api.core.config import Settings
from project_api.services.projects import ProjectService

logger = logging.getLogger(__name__)


def get_user_directory(settings: Settings) -> UserDirectory:
    """Resolve the user directory adapter from configuration."""
    if settings.user_directory == "static":
        logger.info("users.directory kind=static known_users=%d", len(settings.known_user_ids))
        return StaticUserDirectory(settings.known_user_ids)
    logger.info("users.directory kind=random miss_ratio=%.2f", settings.user_not_found_ratio)
    return RandomUserDirectory(miss_ratio=settings.user_not_found_ratio)


def get_identity_verifier(header_name: str) -> CallerIdentityVerifier:
    return UuidHeaderIdentityVerifier(header_name=header_name)


def get_project_service(users: UserDirectory, id_factory: Callable[[], str] | None = None) -> ProjectService:
    if id_factory is None:
        return ProjectService(users)
    return ProjectService(users, id_factory=id_factory)
