"""Create-project outcomes.

Business results are values, never raised. ``CreateProjectResponse`` is the
closed set of variants the HTTP layer must map.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from project_api.domain.identifiers import UserId
from project_api.schemas.project import Project


@dataclass(frozen=True, slots=True)
class Created:
    project: Project


@dataclass(frozen=True, slots=True)
class UserNotFound:
    user_id: UserId


CreateProjectResponse = Union[Created, UserNotFound]

__all__ = ["CreateProjectResponse", "Created", "UserNotFound"]
