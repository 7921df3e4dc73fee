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

"""CheckRateLimit use case implementation."""

import logging

from form_relay.core.submissions.entities import RateLimitRecord
from form_relay.core.submissions.exceptions import DependencyError
from form_relay.core.submissions.repositories import Clock, RateLimitRecordRepository
from form_relay.core.submissions.results import Err, Ok, Result, unwrap_or
from form_relay.core.submissions.value_objects import (
    ClientAddress,
    FixedWindow,
    RateLimitPolicy,
    to_epoch_ms,
)

from ..dtos import RateLimitCheck

logger = logging.getLogger(__name__)


class CheckRateLimitUseCase:
    """Use case for fixed-window request counting per client address.

    Windows are aligned to the epoch, so every client shares the same
    boundaries. Store failures fail open.

    Attributes:
        rate_limit_repo: Rate limit record repository port.
        clock: Time source.
    """

    def __init__(
        self,
        rate_limit_repo: RateLimitRecordRepository,
        clock: Clock,
    ) -> None:
        """Initialize use case with its dependencies.

        Args:
            rate_limit_repo: Rate limit record repository implementation.
            clock: Time source implementation.
        """
        self._rate_limit_repo = rate_limit_repo
        self._clock = clock

    def execute(self, client_address: ClientAddress, policy: RateLimitPolicy) -> RateLimitCheck:
        """Count a request, never failing the caller.

        Args:
            client_address: Request source address.
            policy: Window length and request quota.

        Returns:
            RateLimitCheck; the permissive default if the store failed.
        """
        now_ms = to_epoch_ms(self._clock.now())
        result = self.evaluate(client_address, policy, now_ms)
        if isinstance(result, Err):
            logger.error(
                "Rate limit check failed open for %s: %s",
                client_address,
                result.error.message,
            )
        return unwrap_or(
            result,
            RateLimitCheck.permissive(policy.max_requests, now_ms + policy.window_ms),
        )

    def evaluate(
        self,
        client_address: ClientAddress,
        policy: RateLimitPolicy,
        now_ms: int,
    ) -> Result[RateLimitCheck, DependencyError]:
        """Count a request against the window containing now_ms.

        Past the quota the stored count is left as-is, so the counter stops
        growing during a burst.

        Args:
            client_address: Request source address.
            policy: Window length and request quota.
            now_ms: Current time, epoch milliseconds.

        Returns:
            Ok with the outcome, or Err carrying the store failure.
        """
        window = FixedWindow.containing(now_ms, policy.window_ms)
        opened = RateLimitCheck(
            allowed=True,
            remaining=policy.max_requests - 1,
            reset_time=window.end_ms,
        )
        try:
            existing = self._rate_limit_repo.find(client_address)
            if existing is None or existing.predates(window):
                self._rate_limit_repo.save(RateLimitRecord.open_window(client_address, window))
                return Ok(opened)

            record = existing.increment()
            allowed = record.count <= policy.max_requests
            if allowed:
                self._rate_limit_repo.update_count(client_address, record.count)
        except DependencyError as exc:
            return Err(exc)

        return Ok(RateLimitCheck(
            allowed=allowed,
            remaining=max(0, policy.max_requests - record.count),
            reset_time=window.end_ms,
        ))
