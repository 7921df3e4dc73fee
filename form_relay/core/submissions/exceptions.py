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

"""Domain exceptions for form submissions."""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .validation import FieldError


class FormRelayError(Exception):
    """Base exception for all form relay errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class ConfigurationError(FormRelayError):
    """Required configuration is missing or malformed."""


class DependencyError(FormRelayError):
    """A backing service call failed."""

    def __init__(
        self,
        operation: str,
        resource: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize dependency error.

        Args:
            operation: Name of the failed call (e.g. get_item).
            resource: Table, queue or service the call targeted.
            reason: Underlying failure description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"{operation} on {resource} failed: {reason}",
            correlation_id=correlation_id
        )
        self.operation = operation
        self.resource = resource
        self.reason = reason


class SubmissionValidationError(FormRelayError):
    """Submission failed schema or content checks."""

    def __init__(
        self,
        errors: List["FieldError"],
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize validation error.

        Args:
            errors: Field-level errors in the order they were found.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Submission failed validation with {len(errors)} error(s)",
            correlation_id=correlation_id
        )
        self.errors = errors


class DuplicateSubmissionError(FormRelayError):
    """The same submission content was received too many times."""

    def __init__(
        self,
        fingerprint: str,
        count: int,
        retry_after: int,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize duplicate submission error.

        Args:
            fingerprint: Fingerprint of the blocked submission.
            count: Number of sightings including this one.
            retry_after: Seconds until the duplicate record may expire.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Submission {fingerprint} received {count} times",
            correlation_id=correlation_id
        )
        self.fingerprint = fingerprint
        self.count = count
        self.retry_after = retry_after


class RateLimitExceededError(FormRelayError):
    """Client address exceeded its request quota for the current window."""

    def __init__(
        self,
        client_address: str,
        reset_time: int,
        retry_after: int,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize rate limit error.

        Args:
            client_address: Address that hit the limit.
            reset_time: Window end, epoch milliseconds.
            retry_after: Seconds until the window resets.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Rate limit exceeded for {client_address}",
            correlation_id=correlation_id
        )
        self.client_address = client_address
        self.reset_time = reset_time
        self.retry_after = retry_after


class NotificationError(FormRelayError):
    """The notification channel could not deliver the submission."""
