"""Composable request stages.

Each stage either short-circuits with a response or hands a validated value to
a continuation that returns the next request handler. Stages run in order
within a single request and share no state across requests.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar
from uuid import uuid4

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ValidationError

from project_api.adapters.auth import CallerIdentityVerifier, IdentityVerificationError
from project_api.core.logging_safety import safe_log_identifier
from project_api.domain.identifiers import UserId
from project_api.errors import error_response
from project_api.schemas.error import ValidationIssue, validation_issues

RequestHandler = Callable[[Request], Awaitable[Response]]
HeaderValue = str | list[str]
ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


def request_correlation_id(request: Request) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get("X-Correlation-Id") or f"req-{uuid4()}"
    request.state.correlation_id = correlation_id
    return correlation_id


def _log_rejection(request: Request, *, stage: str, reason: str) -> None:
    logger.warning(
        "request.rejected correlation_id=%s method=%s path=%s stage=%s reason=%s",
        safe_log_identifier(request_correlation_id(request), prefix="cid"),
        request.method,
        request.url.path,
        stage,
        reason,
    )


def _issues_details(issues: list[ValidationIssue]) -> dict[str, list[dict]]:
    return {"errors": [issue.model_dump(mode="json") for issue in issues]}


def _is_json_media_type(content_type: str | None) -> bool:
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def entity_as(model: type[ModelT], result: Callable[[ModelT], RequestHandler]) -> RequestHandler:
    """Run ``result`` only when the JSON body matches ``model``.

    An empty body, or a body not sent as ``application/json`` (or ``+json``),
    is treated as ``{}``. Fields the model does not declare are ignored. On
    failure the request ends with 400 and the validation issues.
    """

    async def handler(request: Request) -> Response:
        raw_body = b""
        if _is_json_media_type(request.headers.get("content-type")):
            raw_body = await request.body()
        try:
            entity = model.model_validate_json(raw_body or b"{}")
        except ValidationError as exc:
            _log_rejection(request, stage="body", reason="invalid_payload")
            return error_response(
                status_code=400,
                code="VALIDATION_ERROR",
                message="Invalid request payload",
                details=_issues_details(validation_issues(exc)),
            )
        return await result(entity)(request)

    return handler


def header_value_by_name(name: str, result: Callable[[HeaderValue], RequestHandler]) -> RequestHandler:
    """Run ``result`` with the header's value, or its ordered values when repeated.

    Presence check only; the value itself is not verified here.
    """

    async def handler(request: Request) -> Response:
        values = request.headers.getlist(name.lower())
        if not values:
            _log_rejection(request, stage="header", reason="missing_header")
            return PlainTextResponse(f"No header {name}", status_code=400)

        value: HeaderValue = values[0] if len(values) == 1 else values
        return await result(value)(request)

    return handler


def identity_as(
    verifier: CallerIdentityVerifier,
    value: HeaderValue,
    result: Callable[[UserId], RequestHandler],
) -> RequestHandler:
    """Turn a raw header value into a caller identity before running ``result``."""

    async def handler(request: Request) -> Response:
        try:
            caller_id = verifier.verify(value)
        except IdentityVerificationError as exc:
            _log_rejection(request, stage="identity", reason="invalid_caller_identity")
            return error_response(
                status_code=400,
                code="INVALID_CALLER_IDENTITY",
                message=str(exc),
                details=_issues_details(exc.issues),
            )
        return await result(caller_id)(request)

    return handler


def render_payload(status_code: int, payload: object) -> Response:
    if isinstance(payload, BaseModel):
        return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json", by_alias=True))
    if isinstance(payload, str):
        return PlainTextResponse(payload, status_code=status_code)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


def complete_as_json(result: Callable[[], tuple[int, object]]) -> RequestHandler:
    """Terminal stage: call ``result`` once and write its status and payload.

    Exceptions raised by ``result`` propagate to the server.
    """

    async def handler(request: Request) -> Response:
        status_code, payload = result()
        return render_payload(status_code, payload)

    return handler


__all__ = [
    "HeaderValue",
    "RequestHandler",
    "complete_as_json",
    "entity_as",
    "header_value_by_name",
    "identity_as",
    "render_payload",
    "request_correlation_id",
]
