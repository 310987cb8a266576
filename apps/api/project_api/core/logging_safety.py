"""Logging setup and utilities for safe structured logging fields."""

from __future__ import annotations

import hashlib
import logging
from typing import Any

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str) -> None:
    """Install a root handler for the service process."""
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)


def safe_log_identifier(value: Any, *, prefix: str) -> str:
    """Return a deterministic non-reversible token for log correlation fields.

    UUID text is case-insensitive, so values are lower-cased before hashing and
    the same user always maps to the same token.
    """
    text = str(value or "").strip()
    if not text:
        return f"{prefix}-missing"

    digest = hashlib.sha256(text.lower().encode("utf-8")).hexdigest()[:12]
    return f"{prefix}-{digest}"
