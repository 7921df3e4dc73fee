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

"""Maps use case outcomes to HTTP status codes and JSON bodies."""

from typing import Any, Dict, Tuple

from form_relay.core.submissions.exceptions import (
    DuplicateSubmissionError,
    FormRelayError,
    RateLimitExceededError,
    SubmissionValidationError,
)
from form_relay.orchestrator.submissions.dtos import SubmissionReceipt

Payload = Dict[str, Any]

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_FORBIDDEN = 403
HTTP_METHOD_NOT_ALLOWED = 405
HTTP_TOO_MANY_REQUESTS = 429
HTTP_INTERNAL_SERVER_ERROR = 500

PREFLIGHT_BODY: Payload = {"message": "OK"}

METHOD_NOT_ALLOWED_BODY: Payload = {
    "error": "Method not allowed",
    "message": "Only POST requests are allowed",
}

FORBIDDEN_ORIGIN_BODY: Payload = {
    "error": "Forbidden",
    "message": "Origin not allowed",
}

INVALID_JSON_BODY: Payload = {
    "error": "Invalid JSON",
    "message": "Request body must be valid JSON",
}

INTERNAL_ERROR_BODY: Payload = {
    "error": "Internal server error",
    "message": "An error occurred while processing your submission",
}


def present_receipt(receipt: SubmissionReceipt) -> Tuple[int, Payload]:
    """Success response for an accepted submission."""
    return HTTP_OK, {
        "success": True,
        "message": "Form submitted successfully",
        "submissionId": receipt.submission_id,
    }


def present_error(exc: FormRelayError) -> Tuple[int, Payload]:
    """Error response for a domain exception.

    Internal details are never exposed for errors other than the
    client-facing rejections.
    """
    if isinstance(exc, SubmissionValidationError):
        return HTTP_BAD_REQUEST, {
            "error": "Validation failed",
            "message": "Invalid form data",
            "details": [error.to_dict() for error in exc.errors],
        }
    if isinstance(exc, DuplicateSubmissionError):
        return HTTP_TOO_MANY_REQUESTS, {
            "error": "Too many requests",
            "message": "This submission has been received too many times",
            "retryAfter": exc.retry_after,
        }
    if isinstance(exc, RateLimitExceededError):
        return HTTP_TOO_MANY_REQUESTS, {
            "error": "Rate limit exceeded",
            "message": "Too many requests from this IP",
            "retryAfter": exc.retry_after,
        }
    return HTTP_INTERNAL_SERVER_ERROR, dict(INTERNAL_ERROR_BODY)
