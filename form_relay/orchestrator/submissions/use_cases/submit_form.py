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

"""SubmitForm use case implementation."""

import logging
import math

from form_relay.core.notifications import Notifier, render_email
from form_relay.core.submissions.entities import ProcessedSubmission
from form_relay.core.submissions.exceptions import (
    DuplicateSubmissionError,
    RateLimitExceededError,
    SubmissionValidationError,
)
from form_relay.core.submissions.repositories import Clock
from form_relay.core.submissions.services import FingerprintService, NormalizerService
from form_relay.core.submissions.validation import validate_submission
from form_relay.core.submissions.value_objects import (
    DedupePolicy,
    RateLimitPolicy,
    to_epoch_ms,
    to_iso8601,
)

from ..commands import SubmitFormCommand
from ..dtos import SubmissionReceipt
from .check_duplicate import CheckDuplicateUseCase
from .check_rate_limit import CheckRateLimitUseCase

logger = logging.getLogger(__name__)


class SubmitFormUseCase:
    """Use case for accepting a form submission and forwarding it by email.

    This use case orchestrates the request pipeline in order:
    - Validation: schema, length, format and injection checks
    - Normalization and fingerprinting of the content
    - Duplicate tracking: blocks content seen too many times
    - Rate limiting: blocks addresses over their window quota
    - Notification: renders and sends the email

    The duplicate and rate limit checks fail open; a notification failure
    propagates.

    Attributes:
        duplicate_check: Duplicate tracker use case.
        rate_limit_check: Rate limiter use case.
        notifier: Notification port.
        clock: Time source.
    """

    def __init__(
        self,
        duplicate_check: CheckDuplicateUseCase,
        rate_limit_check: CheckRateLimitUseCase,
        notifier: Notifier,
        clock: Clock,
        dedupe_policy: DedupePolicy,
        rate_limit_policy: RateLimitPolicy,
    ) -> None:
        """Initialize use case with its collaborators.

        Args:
            duplicate_check: Duplicate tracker use case.
            rate_limit_check: Rate limiter use case.
            notifier: Notification channel implementation.
            clock: Time source implementation.
            dedupe_policy: Dedupe TTL and maximum count.
            rate_limit_policy: Window length and quota.
        """
        self._duplicate_check = duplicate_check
        self._rate_limit_check = rate_limit_check
        self._notifier = notifier
        self._clock = clock
        self._dedupe_policy = dedupe_policy
        self._rate_limit_policy = rate_limit_policy

    def execute(self, command: SubmitFormCommand) -> SubmissionReceipt:
        """Run the submission pipeline.

        Args:
            command: SubmitForm command with the raw submission.

        Returns:
            SubmissionReceipt for the accepted submission.

        Raises:
            SubmissionValidationError: If the submission fails validation.
            DuplicateSubmissionError: If the content was seen too many times.
            RateLimitExceededError: If the client address is over quota.
            NotificationError: If the email could not be sent.
        """
        validation = validate_submission(command.submission)
        if not validation.valid:
            logger.warning(
                "Validation failed with %d error(s): %s",
                len(validation.errors),
                [error.to_dict() for error in validation.errors],
            )
            raise SubmissionValidationError(
                validation.errors,
                correlation_id=command.correlation_id,
            )

        normalized = NormalizerService.normalize(command.submission)
        fingerprint = FingerprintService.compute(normalized)

        duplicate = self._duplicate_check.execute(fingerprint, self._dedupe_policy)
        if duplicate.should_block:
            logger.warning(
                "Submission %s blocked after %d duplicates",
                fingerprint.short,
                duplicate.count,
            )
            raise DuplicateSubmissionError(
                fingerprint=str(fingerprint),
                count=duplicate.count,
                retry_after=self._dedupe_policy.ttl_seconds,
                correlation_id=command.correlation_id,
            )

        rate_limit = self._rate_limit_check.execute(
            command.client_address, self._rate_limit_policy
        )
        if not rate_limit.allowed:
            logger.warning("Rate limit exceeded for %s", command.client_address)
            raise RateLimitExceededError(
                client_address=str(command.client_address),
                reset_time=rate_limit.reset_time,
                retry_after=self._seconds_until(rate_limit.reset_time),
                correlation_id=command.correlation_id,
            )

        processed = ProcessedSubmission(
            fingerprint=fingerprint,
            client_address=command.client_address,
            received_at=self._clock.now(),
            normalized=normalized,
            user_agent=command.user_agent,
        )
        self._notifier.send(render_email(processed))

        logger.info(
            "Submission %s processed for %s (duplicates=%d, remaining=%d)",
            fingerprint.short,
            command.client_address,
            duplicate.count,
            rate_limit.remaining,
        )
        return SubmissionReceipt(
            fingerprint=str(fingerprint),
            submission_id=fingerprint.short,
            duplicate_count=duplicate.count,
            rate_limit_remaining=rate_limit.remaining,
            received_at=to_iso8601(processed.received_at),
        )

    def _seconds_until(self, epoch_ms: int) -> int:
        """Whole seconds from now until the given instant, never negative."""
        remaining_ms = epoch_ms - to_epoch_ms(self._clock.now())
        return max(0, math.ceil(remaining_ms / 1000))
