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

"""Check outcome DTOs returned by the duplicate tracker and rate limiter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DuplicateCheck:
    """Outcome of a duplicate check.

    Attributes:
        is_duplicate: True if the fingerprint had been seen before.
        count: Sightings including this one (0 when the store was unavailable).
        should_block: True if the count is past the allowed maximum.
    """

    is_duplicate: bool
    count: int
    should_block: bool

    @staticmethod
    def permissive() -> "DuplicateCheck":
        """Outcome used when the store cannot be consulted."""
        return DuplicateCheck(is_duplicate=False, count=0, should_block=False)

    def to_dict(self) -> dict:
        return {
            "isDuplicate": self.is_duplicate,
            "count": self.count,
            "shouldBlock": self.should_block,
        }


@dataclass(frozen=True)
class RateLimitCheck:
    """Outcome of a rate limit check.

    Attributes:
        allowed: True if the request fits in the current window.
        remaining: Requests left in the window, never negative.
        reset_time: Window end, epoch milliseconds.
    """

    allowed: bool
    remaining: int
    reset_time: int

    @staticmethod
    def permissive(max_requests: int, reset_time: int) -> "RateLimitCheck":
        """Outcome used when the store cannot be consulted."""
        return RateLimitCheck(allowed=True, remaining=max_requests, reset_time=reset_time)

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "remaining": self.remaining,
            "resetTime": self.reset_time,
        }
