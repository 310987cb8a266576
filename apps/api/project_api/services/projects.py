"""Project service layer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from uuid import uuid4

from project_api.adapters.users import UserDirectory
from project_api.core.logging_safety import safe_log_identifier
from project_api.domain.identifiers import UserId, parse_project_id
from project_api.domain.outcomes import CreateProjectResponse, Created, UserNotFound
from project_api.schemas.project import CreateProjectRequest, Project

logger = logging.getLogger(__name__)


def _new_project_id() -> str:
    return str(uuid4())


class ProjectService:
    def __init__(self, users: UserDirectory, id_factory: Callable[[], str] = _new_project_id) -> None:
        self._users = users
        self._id_factory = id_factory

    def create_project(self, *, caller_id: UserId, request: CreateProjectRequest) -> CreateProjectResponse:
        safe_principal_id = safe_log_identifier(caller_id, prefix="pid")
        if not self._users.exists(caller_id):
            logger.info("project.user_not_found principal_id=%s", safe_principal_id)
            return UserNotFound(user_id=caller_id)

        project = Project(
            id=parse_project_id(self._id_factory()),
            user_id=caller_id,
            name=request.name,
        )
        logger.info(
            "project.created project_id=%s principal_id=%s",
            project.id,
            safe_principal_id,
        )
        return Created(project=project)
