"""Route modules."""

from .projects import build_projects_router

__all__ = ["build_projects_router"]
