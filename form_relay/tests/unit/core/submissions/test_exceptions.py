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

"""Unit tests for Submissions domain exceptions."""

from form_relay.core.submissions.exceptions import (
    ConfigurationError,
    DependencyError,
    DuplicateSubmissionError,
    FormRelayError,
    NotificationError,
    RateLimitExceededError,
    SubmissionValidationError,
)
from form_relay.core.submissions.validation import FieldError


class TestFormRelayError:
    """Tests for the base exception."""

    def test_message_and_correlation_id(self):
        exc = FormRelayError("boom", correlation_id="req-1")
        assert str(exc) == "boom"
        assert exc.message == "boom"
        assert exc.correlation_id == "req-1"

    def test_correlation_id_defaults_to_none(self):
        assert FormRelayError("boom").correlation_id is None

    def test_subclasses_share_base(self):
        for exc_class in (ConfigurationError, NotificationError):
            assert issubclass(exc_class, FormRelayError)


class TestDependencyError:
    def test_message_names_operation_and_resource(self):
        exc = DependencyError("get_item", "dedupe-table", "throttled")
        assert exc.message == "get_item on dedupe-table failed: throttled"
        assert exc.operation == "get_item"
        assert exc.resource == "dedupe-table"
        assert exc.reason == "throttled"


class TestRejectionErrors:
    """Tests for client-facing rejection errors."""

    def test_validation_error_keeps_errors(self):
        errors = [FieldError("email", "Must be a valid email address")]
        exc = SubmissionValidationError(errors, correlation_id="req-2")
        assert exc.errors == errors
        assert "1 error(s)" in exc.message
        assert exc.correlation_id == "req-2"

    def test_duplicate_error_fields(self):
        exc = DuplicateSubmissionError(fingerprint="f" * 64, count=4, retry_after=3600)
        assert exc.count == 4
        assert exc.retry_after == 3600

    def test_rate_limit_error_fields(self):
        exc = RateLimitExceededError(
            client_address="203.0.113.7",
            reset_time=1_700_000_000_000,
            retry_after=120,
        )
        assert exc.client_address == "203.0.113.7"
        assert exc.reset_time == 1_700_000_000_000
        assert exc.retry_after == 120
