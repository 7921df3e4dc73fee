# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""FastAPI routes for form submissions."""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from form_relay.api.cors import cors_headers, is_origin_allowed
from form_relay.api.dependencies import ServiceContainer, get_container
from form_relay.api.presenter import (
    FORBIDDEN_ORIGIN_BODY,
    HTTP_BAD_REQUEST,
    HTTP_FORBIDDEN,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_OK,
    INTERNAL_ERROR_BODY,
    INVALID_JSON_BODY,
    PREFLIGHT_BODY,
    Payload,
    present_error,
)
from form_relay.core.submissions.exceptions import ConfigurationError, FormRelayError
from form_relay.core.submissions.value_objects import ClientAddress
from form_relay.orchestrator.submissions.commands import SubmitFormCommand

from .schemas import ErrorResponse, SubmissionAcceptedResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["submissions"])

UNKNOWN_CLIENT = "unknown"


def get_service_container() -> ServiceContainer:
    """Provide the process-wide service container."""
    return get_container()


def _client_address(request: Request) -> ClientAddress:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        candidate = forwarded.split(",")[0].strip()
    elif request.client is not None:
        candidate = request.client.host
    else:
        candidate = UNKNOWN_CLIENT
    try:
        return ClientAddress(candidate or UNKNOWN_CLIENT)
    except ValueError:
        logger.warning("Unusable client address %r, using %s", candidate, UNKNOWN_CLIENT)
        return ClientAddress(UNKNOWN_CLIENT)


def _error_response(
    status_code: int,
    body: Payload,
    origin: Optional[str],
    container: ServiceContainer,
) -> JSONResponse:
    content = ErrorResponse.model_validate(body).model_dump(by_alias=True, exclude_none=True)
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers=cors_headers(origin, container.settings.allowed_origins),
    )


@router.options("/submit")
def preflight(
    request: Request,
    container: ServiceContainer = Depends(get_service_container),
) -> JSONResponse:
    """Answer a CORS preflight request."""
    origin = request.headers.get("origin")
    return JSONResponse(
        status_code=HTTP_OK,
        content=PREFLIGHT_BODY,
        headers=cors_headers(origin, container.settings.allowed_origins),
    )


@router.post(
    "/submit",
    response_model=SubmissionAcceptedResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_form(
    request: Request,
    container: ServiceContainer = Depends(get_service_container),
) -> JSONResponse:
    """Accept a form submission and forward it by email.

    The body is any JSON object; its fields are checked by the submission
    pipeline rather than by a request model.
    """
    origin = request.headers.get("origin")
    correlation_id = request.headers.get("x-request-id")

    if not is_origin_allowed(origin, container.settings.allowed_origins):
        logger.warning("Rejected request from disallowed origin %s", origin)
        return _error_response(HTTP_FORBIDDEN, FORBIDDEN_ORIGIN_BODY, origin, container)

    raw_body = await request.body()
    try:
        submission = json.loads(raw_body or b"{}")
    except ValueError as exc:
        logger.warning("Invalid JSON body: %s", exc)
        return _error_response(HTTP_BAD_REQUEST, INVALID_JSON_BODY, origin, container)

    command = SubmitFormCommand(
        submission=submission,
        client_address=_client_address(request),
        user_agent=request.headers.get("user-agent"),
        correlation_id=correlation_id,
    )

    try:
        receipt = await run_in_threadpool(container.submit_form.execute, command)
    except ConfigurationError:
        raise
    except FormRelayError as exc:
        status_code, body = present_error(exc)
        return _error_response(status_code, body, origin, container)
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error processing submission %s", correlation_id)
        return _error_response(
            HTTP_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_BODY, origin, container
        )

    accepted = SubmissionAcceptedResponse(submission_id=receipt.submission_id)
    return JSONResponse(
        status_code=HTTP_OK,
        content=accepted.model_dump(by_alias=True),
        headers=cors_headers(origin, container.settings.allowed_origins),
    )
