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

"""Unit tests for the AWS Lambda handler."""

import base64
import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from form_relay.api import dependencies
from form_relay.api.dependencies import ServiceContainer
from form_relay.api.lambda_handler import handle_event, handler
from form_relay.core.submissions.exceptions import ConfigurationError
from form_relay.orchestrator.submissions.use_cases import (
    CheckDuplicateUseCase,
    CheckRateLimitUseCase,
    SubmitFormUseCase,
)

ORIGIN = "https://example.com"
CONTEXT = SimpleNamespace(aws_request_id="lambda-req-1")


def _event(body=None, method="POST", origin=ORIGIN, source_ip="203.0.113.7", **extra):
    headers = {"Content-Type": "application/json", "User-Agent": "pytest"}
    if origin is not None:
        headers["Origin"] = origin
    event = {
        "httpMethod": method,
        "headers": headers,
        "body": json.dumps(body) if body is not None else None,
        "requestContext": {"identity": {"sourceIp": source_ip}},
    }
    event.update(extra)
    return event


@pytest.fixture
def container(settings, duplicate_repo, rate_limit_repo, notifier, fake_clock):
    submit_form = SubmitFormUseCase(
        duplicate_check=CheckDuplicateUseCase(duplicate_repo, fake_clock),
        rate_limit_check=CheckRateLimitUseCase(rate_limit_repo, fake_clock),
        notifier=notifier,
        clock=fake_clock,
        dedupe_policy=settings.dedupe_policy,
        rate_limit_policy=settings.rate_limit_policy,
    )
    return ServiceContainer(settings=settings, submit_form=submit_form)


def _body(response):
    return json.loads(response["body"])


class TestLambdaHandlerRouting:
    """Tests for method and origin handling."""

    def test_options_preflight(self, container):
        response = handle_event(_event(method="OPTIONS"), CONTEXT, container)
        assert response["statusCode"] == 200
        assert _body(response) == {"message": "OK"}
        assert response["headers"]["Access-Control-Allow-Origin"] == ORIGIN

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_non_post_rejected(self, container, method):
        response = handle_event(_event(method=method), CONTEXT, container)
        assert response["statusCode"] == 405
        assert _body(response)["error"] == "Method not allowed"

    def test_disallowed_origin_rejected(self, container, notifier):
        response = handle_event(
            _event({"name": "Ada"}, origin="https://evil.example"), CONTEXT, container
        )
        assert response["statusCode"] == 403
        assert response["headers"]["Access-Control-Allow-Origin"] == ORIGIN
        assert notifier.sent == []

    def test_missing_origin_rejected(self, container):
        response = handle_event(_event({"name": "Ada"}, origin=None), CONTEXT, container)
        assert response["statusCode"] == 403

    def test_wildcard_origin_accepted(self, container, valid_submission):
        response = handle_event(
            _event(valid_submission, origin="https://forms.example.org"), CONTEXT, container
        )
        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Origin"] == "https://forms.example.org"

    def test_lowercase_headers(self, container, valid_submission, notifier):
        event = _event(valid_submission)
        event["headers"] = {"origin": ORIGIN, "user-agent": "lower-agent"}
        response = handle_event(event, CONTEXT, container)
        assert response["statusCode"] == 200
        assert "User Agent: lower-agent" in notifier.sent[0].text_body


class TestLambdaHandlerBody:
    """Tests for request body decoding."""

    def test_invalid_json(self, container):
        event = _event()
        event["body"] = "{not json"
        response = handle_event(event, CONTEXT, container)
        assert response["statusCode"] == 400
        assert _body(response)["error"] == "Invalid JSON"

    @pytest.mark.parametrize("body", [None, ""])
    def test_missing_body_fails_validation(self, container, body):
        """An absent body is an empty submission, not malformed JSON."""
        event = _event()
        event["body"] = body
        response = handle_event(event, CONTEXT, container)

        assert response["statusCode"] == 400
        assert _body(response) == {
            "error": "Validation failed",
            "message": "Invalid form data",
            "details": [{"field": "root", "message": "Submission must have at least 1 field"}],
        }

    def test_base64_body(self, container, valid_submission):
        event = _event()
        event["body"] = base64.b64encode(json.dumps(valid_submission).encode("utf-8")).decode("ascii")
        event["isBase64Encoded"] = True
        response = handle_event(event, CONTEXT, container)
        assert response["statusCode"] == 200


class TestLambdaHandlerOutcomes:
    """Tests for pipeline outcomes mapped to responses."""

    def test_success(self, container, valid_submission, notifier):
        response = handle_event(_event(valid_submission), CONTEXT, container)

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["success"] is True
        assert body["message"] == "Form submitted successfully"
        assert len(body["submissionId"]) == 8
        assert len(notifier.sent) == 1

    def test_validation_failure(self, container):
        response = handle_event(_event({"email": "bad"}), CONTEXT, container)

        assert response["statusCode"] == 400
        body = _body(response)
        assert body["error"] == "Validation failed"
        assert body["details"] == [{"field": "email", "message": "Must be a valid email address"}]

    def test_duplicate_submission(self, container, valid_submission):
        for _ in range(3):
            handle_event(_event(valid_submission), CONTEXT, container)

        response = handle_event(_event(valid_submission), CONTEXT, container)
        assert response["statusCode"] == 429
        body = _body(response)
        assert body["error"] == "Too many requests"
        assert body["retryAfter"] == 3600

    def test_rate_limited(self, container):
        for index in range(10):
            handle_event(_event({"message": f"note {index}"}), CONTEXT, container)

        response = handle_event(_event({"message": "note 10"}), CONTEXT, container)
        assert response["statusCode"] == 429
        assert _body(response)["error"] == "Rate limit exceeded"

    def test_missing_source_ip_uses_unknown(self, container, rate_limit_repo, valid_submission):
        event = _event(valid_submission)
        event["requestContext"] = {}
        handle_event(event, CONTEXT, container)
        assert "unknown" in rate_limit_repo.records

    def test_notification_failure_is_500(self, settings, duplicate_repo, rate_limit_repo,
                                         failing_notifier, fake_clock, valid_submission):
        submit_form = SubmitFormUseCase(
            duplicate_check=CheckDuplicateUseCase(duplicate_repo, fake_clock),
            rate_limit_check=CheckRateLimitUseCase(rate_limit_repo, fake_clock),
            notifier=failing_notifier,
            clock=fake_clock,
            dedupe_policy=settings.dedupe_policy,
            rate_limit_policy=settings.rate_limit_policy,
        )
        container = ServiceContainer(settings=settings, submit_form=submit_form)

        response = handle_event(_event(valid_submission), CONTEXT, container)
        assert response["statusCode"] == 500
        assert _body(response)["error"] == "Internal server error"

    def test_unexpected_error_is_500(self, settings):
        submit_form = MagicMock()
        submit_form.execute.side_effect = RuntimeError("boom")
        container = ServiceContainer(settings=settings, submit_form=submit_form)

        response = handle_event(_event({"name": "Ada"}), CONTEXT, container)
        assert response["statusCode"] == 500
        assert _body(response) == {
            "error": "Internal server error",
            "message": "An error occurred while processing your submission",
        }

    def test_correlation_id_passed_to_command(self, settings):
        submit_form = MagicMock()
        submit_form.execute.side_effect = RuntimeError("boom")
        container = ServiceContainer(settings=settings, submit_form=submit_form)

        handle_event(_event({"name": "Ada"}), CONTEXT, container)
        command = submit_form.execute.call_args.args[0]
        assert command.correlation_id == "lambda-req-1"
        assert command.user_agent == "pytest"


class TestHandlerEntryPoint:
    """Tests for the module-level Lambda entry point."""

    def test_uses_process_container(self, container, valid_submission):
        dependencies.set_container(container)
        try:
            response = handler(_event(valid_submission), CONTEXT)
        finally:
            dependencies.set_container(None)
        assert response["statusCode"] == 200

    def test_missing_configuration_raises(self, monkeypatch):
        dependencies.set_container(None)
        monkeypatch.delenv("EMAIL_RECIPIENT", raising=False)
        with pytest.raises(ConfigurationError):
            handler(_event({"name": "Ada"}), CONTEXT)
