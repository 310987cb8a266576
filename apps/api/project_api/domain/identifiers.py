"""Nominal identifier types and their format rules."""

from __future__ import annotations

import re
from typing import NewType

ProjectName = NewType("ProjectName", str)
ProjectId = NewType("ProjectId", str)
UserId = NewType("UserId", str)

_UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def _uuid_text(value: str, *, label: str) -> str:
    if not _UUID_PATTERN.fullmatch(value):
        raise ValueError(f"{label} must be a UUID")
    return value


def parse_project_name(value: str) -> ProjectName:
    """Trim and require at least one character."""
    name = value.strip()
    if not name:
        raise ValueError("Project name must not be blank")
    return ProjectName(name)


def parse_project_id(value: str) -> ProjectId:
    return ProjectId(_uuid_text(value, label="Project id"))


def parse_user_id(value: str) -> UserId:
    return UserId(_uuid_text(value, label="User id"))


__all__ = [
    "ProjectId",
    "ProjectName",
    "UserId",
    "parse_project_id",
    "parse_project_name",
    "parse_user_id",
]
