"""Project routes."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, get_args

from fastapi import APIRouter, status

from project_api.adapters.auth import CallerIdentityVerifier
from project_api.domain.identifiers import UserId
from project_api.domain.outcomes import CreateProjectResponse, Created, UserNotFound
from project_api.errors import OutcomeMappingError
from project_api.routes.pipeline import (
    HeaderValue,
    RequestHandler,
    complete_as_json,
    entity_as,
    header_value_by_name,
    identity_as,
)
from project_api.schemas.error import ErrorResponse
from project_api.schemas.project import CreateProjectRequest, Project
from project_api.services.projects import ProjectService

AUTHORIZATION_HEADER = "Authorization"
USER_NOT_FOUND_MESSAGE = "Sry, no user found"

OutcomeResponder = Callable[[Any], tuple[int, object]]


def _created_response(outcome: Created) -> tuple[int, object]:
    return status.HTTP_201_CREATED, outcome.project


def _user_not_found_response(outcome: UserNotFound) -> tuple[int, object]:
    # Body omits the user id.
    return status.HTTP_404_NOT_FOUND, USER_NOT_FOUND_MESSAGE


OUTCOME_RESPONSES: dict[type, OutcomeResponder] = {
    Created: _created_response,
    UserNotFound: _user_not_found_response,
}


def ensure_outcome_mapping(responses: Mapping[type, OutcomeResponder] = OUTCOME_RESPONSES) -> None:
    """Fail fast when a create-project outcome variant has no HTTP mapping."""
    variants = set(get_args(CreateProjectResponse))
    missing = sorted(variant.__name__ for variant in variants - responses.keys())
    if missing:
        raise OutcomeMappingError(f"No HTTP mapping for outcome variants: {', '.join(missing)}")


def outcome_response(
    outcome: CreateProjectResponse,
    responses: Mapping[type, OutcomeResponder] = OUTCOME_RESPONSES,
) -> tuple[int, object]:
    return responses[type(outcome)](outcome)


def build_create_project_handler(
    service: ProjectService,
    verifier: CallerIdentityVerifier,
    responses: Mapping[type, OutcomeResponder] = OUTCOME_RESPONSES,
) -> RequestHandler:
    """Compose body validation, header extraction, identity check and outcome mapping."""
    ensure_outcome_mapping(responses)

    def with_payload(payload: CreateProjectRequest) -> RequestHandler:
        def with_token(token: HeaderValue) -> RequestHandler:
            def with_caller(caller_id: UserId) -> RequestHandler:
                return complete_as_json(
                    lambda: outcome_response(
                        service.create_project(caller_id=caller_id, request=payload),
                        responses,
                    )
                )

            return identity_as(verifier, token, with_caller)

        return header_value_by_name(AUTHORIZATION_HEADER, with_token)

    return entity_as(CreateProjectRequest, with_payload)


def build_projects_router(service: ProjectService, verifier: CallerIdentityVerifier) -> APIRouter:
    router = APIRouter(tags=["Projects"])
    router.add_api_route(
        "/",
        build_create_project_handler(service, verifier),
        methods=["POST"],
        name="create_project",
        response_model=None,
        status_code=status.HTTP_201_CREATED,
        responses={
            201: {"model": Project},
            400: {"model": ErrorResponse},
            404: {"content": {"text/plain": {"schema": {"type": "string", "example": USER_NOT_FOUND_MESSAGE}}}},
        },
    )
    return router
