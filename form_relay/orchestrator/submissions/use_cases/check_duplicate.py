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

"""CheckDuplicate use case implementation."""

import logging

from form_relay.core.submissions.entities import DuplicateRecord
from form_relay.core.submissions.exceptions import DependencyError
from form_relay.core.submissions.repositories import Clock, DuplicateRecordRepository
from form_relay.core.submissions.results import Err, Ok, Result, unwrap_or
from form_relay.core.submissions.value_objects import DedupePolicy, Fingerprint

from ..dtos import DuplicateCheck

logger = logging.getLogger(__name__)


class CheckDuplicateUseCase:
    """Use case for counting repeated submissions of the same content.

    Each sighting of a fingerprint increments its record and slides the
    record's expiry forward by the dedupe TTL. Store failures fail open.

    Attributes:
        duplicate_repo: Duplicate record repository port.
        clock: Time source.
    """

    def __init__(
        self,
        duplicate_repo: DuplicateRecordRepository,
        clock: Clock,
    ) -> None:
        """Initialize use case with its dependencies.

        Args:
            duplicate_repo: Duplicate record repository implementation.
            clock: Time source implementation.
        """
        self._duplicate_repo = duplicate_repo
        self._clock = clock

    def execute(self, fingerprint: Fingerprint, policy: DedupePolicy) -> DuplicateCheck:
        """Check and record a sighting, never failing the caller.

        Args:
            fingerprint: Fingerprint of the normalized submission.
            policy: Dedupe TTL and maximum allowed count.

        Returns:
            DuplicateCheck; the permissive default if the store failed.
        """
        result = self.evaluate(fingerprint, policy)
        if isinstance(result, Err):
            logger.error(
                "Duplicate check failed open for %s: %s",
                fingerprint.short,
                result.error.message,
            )
        return unwrap_or(result, DuplicateCheck.permissive())

    def evaluate(
        self,
        fingerprint: Fingerprint,
        policy: DedupePolicy,
    ) -> Result[DuplicateCheck, DependencyError]:
        """Check and record a sighting.

        Args:
            fingerprint: Fingerprint of the normalized submission.
            policy: Dedupe TTL and maximum allowed count.

        Returns:
            Ok with the outcome, or Err carrying the store failure.
        """
        now = self._clock.now()
        try:
            existing = self._duplicate_repo.find(fingerprint)
            if existing is None:
                record = DuplicateRecord.first_sighting(
                    fingerprint, now, policy.ttl_seconds
                )
                self._duplicate_repo.save(record)
                return Ok(DuplicateCheck(is_duplicate=False, count=1, should_block=False))

            record = existing.record_sighting(now, policy.ttl_seconds)
            self._duplicate_repo.update_sighting(record)
        except DependencyError as exc:
            return Err(exc)

        return Ok(DuplicateCheck(
            is_duplicate=True,
            count=record.count,
            should_block=record.exceeds(policy.max_duplicate_count),
        ))
