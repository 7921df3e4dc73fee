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

"""AWS Lambda entry point for API Gateway proxy events."""

import base64
import binascii
import json
import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from form_relay.api.cors import cors_headers, is_origin_allowed
from form_relay.api.dependencies import ServiceContainer, get_container
from form_relay.api.presenter import (
    FORBIDDEN_ORIGIN_BODY,
    HTTP_BAD_REQUEST,
    HTTP_FORBIDDEN,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_METHOD_NOT_ALLOWED,
    HTTP_OK,
    INTERNAL_ERROR_BODY,
    INVALID_JSON_BODY,
    METHOD_NOT_ALLOWED_BODY,
    PREFLIGHT_BODY,
    Payload,
    present_error,
    present_receipt,
)
from form_relay.core.submissions.exceptions import ConfigurationError, FormRelayError
from form_relay.core.submissions.value_objects import ClientAddress
from form_relay.orchestrator.submissions.commands import SubmitFormCommand

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Handle one API Gateway proxy request.

    Args:
        event: API Gateway proxy event.
        context: Lambda context; ``aws_request_id`` is used for correlation.

    Returns:
        API Gateway proxy response.

    Raises:
        ConfigurationError: If the environment is incomplete.
    """
    container = get_container()
    return handle_event(event, context, container)


def handle_event(
    event: Mapping[str, Any],
    context: Any,
    container: ServiceContainer,
) -> Dict[str, Any]:
    """Handle an event against an explicit container."""
    allowed_origins = container.settings.allowed_origins
    headers = event.get("headers") or {}
    origin = _header(headers, "origin")
    method = (event.get("httpMethod") or "").upper()
    correlation_id = getattr(context, "aws_request_id", None)

    logger.info("Received %s request from origin %s", method or "<none>", origin)

    if method == "OPTIONS":
        return _response(HTTP_OK, PREFLIGHT_BODY, origin, allowed_origins)

    if method != "POST":
        return _response(HTTP_METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED_BODY, origin, allowed_origins)

    if not is_origin_allowed(origin, allowed_origins):
        logger.warning("Rejected request from disallowed origin %s", origin)
        return _response(HTTP_FORBIDDEN, FORBIDDEN_ORIGIN_BODY, origin, allowed_origins)

    try:
        submission = _decode_body(event)
    except ValueError as exc:
        logger.warning("Invalid JSON body: %s", exc)
        return _response(HTTP_BAD_REQUEST, INVALID_JSON_BODY, origin, allowed_origins)

    command = SubmitFormCommand(
        submission=submission,
        client_address=_client_address(event),
        user_agent=_header(headers, "user-agent"),
        correlation_id=correlation_id,
    )

    try:
        receipt = container.submit_form.execute(command)
    except ConfigurationError:
        raise
    except FormRelayError as exc:
        status_code, body = present_error(exc)
        return _response(status_code, body, origin, allowed_origins)
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error processing submission %s", correlation_id)
        return _response(
            HTTP_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_BODY, origin, allowed_origins
        )

    status_code, body = present_receipt(receipt)
    return _response(status_code, body, origin, allowed_origins)


def _header(headers: Mapping[str, Any], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def _decode_body(event: Mapping[str, Any]) -> Any:
    """Parse the request body; a missing or empty body reads as an empty object."""
    body = event.get("body")
    if body is None or body == "":
        return {}
    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValueError(f"undecodable body: {exc}") from exc
    return json.loads(body)


def _client_address(event: Mapping[str, Any]) -> ClientAddress:
    identity = (event.get("requestContext") or {}).get("identity") or {}
    source_ip = identity.get("sourceIp") or UNKNOWN_CLIENT
    try:
        return ClientAddress(source_ip)
    except ValueError:
        logger.warning("Unusable source address %r, using %s", source_ip, UNKNOWN_CLIENT)
        return ClientAddress(UNKNOWN_CLIENT)


def _response(
    status_code: int,
    body: Payload,
    origin: Optional[str],
    allowed_origins: Sequence[str],
) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": cors_headers(origin, allowed_origins),
        "body": json.dumps(body),
    }
