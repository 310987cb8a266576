"""FastAPI application entrypoint."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from project_api.adapters.users import UserDirectory
from project_api.core.config import Settings, get_settings
from project_api.routes import build_projects_router
from project_api.routes.dependencies import get_identity_verifier, get_project_service, get_user_directory
from project_api.routes.projects import AUTHORIZATION_HEADER
from project_api.schemas.project import CreateProjectRequest

_CREATE_PROJECT_RESPONSE_CODES = frozenset({"201", "400", "404"})


def _apply_create_project_contract_schema(schema: dict) -> None:
    """Document the body and header the pipeline reads by hand, and its response codes."""
    operation = schema.get("paths", {}).get("/", {}).get("post")
    if not operation:
        return

    responses = operation.setdefault("responses", {})
    for status_code in list(responses.keys()):
        if status_code not in _CREATE_PROJECT_RESPONSE_CODES:
            responses.pop(status_code, None)
    for status_code in sorted(_CREATE_PROJECT_RESPONSE_CODES):
        responses.setdefault(status_code, {"description": "See API contract"})

    components = schema.setdefault("components", {}).setdefault("schemas", {})
    components["CreateProjectRequest"] = CreateProjectRequest.model_json_schema()
    operation["requestBody"] = {
        "required": True,
        "content": {
            "application/json": {"schema": {"$ref": "#/components/schemas/CreateProjectRequest"}},
        },
    }
    operation["parameters"] = [
        {
            "name": AUTHORIZATION_HEADER,
            "in": "header",
            "required": True,
            "description": "Caller user id (UUID).",
            "schema": {"type": "string", "format": "uuid"},
        }
    ]


def create_app(
    settings: Settings | None = None,
    *,
    user_directory: UserDirectory | None = None,
    id_factory: Callable[[], str] | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Project API", version="1.0.0")
    app.state.settings = settings

    users = user_directory or get_user_directory(settings)
    service = get_project_service(users, id_factory)
    verifier = get_identity_verifier(AUTHORIZATION_HEADER)
    app.include_router(build_projects_router(service, verifier))

    def custom_openapi() -> dict:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        _apply_create_project_contract_schema(schema)
        app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app


app = create_app()
