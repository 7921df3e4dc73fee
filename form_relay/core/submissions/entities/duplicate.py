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

"""Duplicate tracking record entity."""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from ..value_objects import Fingerprint


@dataclass(frozen=True)
class DuplicateRecord:
    """Duplicate tracking record.

    Immutable record counting how often a submission fingerprint has been
    seen. Every sighting slides the expiry forward by the dedupe TTL.

    Attributes:
        fingerprint: Fingerprint of the normalized submission.
        count: Number of sightings (at least 1).
        first_seen: Timestamp of the first sighting.
        last_seen: Timestamp of the latest sighting.
        expires_at: Instant after which the store may discard the record.
    """

    fingerprint: Fingerprint
    count: int
    first_seen: datetime
    last_seen: datetime
    expires_at: datetime

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Duplicate count must be at least 1, got {self.count}")

    @classmethod
    def first_sighting(
        cls,
        fingerprint: Fingerprint,
        now: datetime,
        ttl_seconds: int,
    ) -> "DuplicateRecord":
        """Create the record for a fingerprint seen for the first time.

        Args:
            fingerprint: Submission fingerprint.
            now: Current timestamp.
            ttl_seconds: Record lifetime from now.

        Returns:
            New record with count 1.
        """
        return cls(
            fingerprint=fingerprint,
            count=1,
            first_seen=now,
            last_seen=now,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )

    def record_sighting(self, now: datetime, ttl_seconds: int) -> "DuplicateRecord":
        """Return a copy with one more sighting and a refreshed expiry.

        Args:
            now: Timestamp of this sighting.
            ttl_seconds: Record lifetime from now.

        Returns:
            Updated record; first_seen is preserved.
        """
        return replace(
            self,
            count=self.count + 1,
            last_seen=now,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )

    def exceeds(self, max_duplicate_count: int) -> bool:
        """Check if the sighting count is past the allowed maximum."""
        return self.count > max_duplicate_count

    def is_expired(self, current_time: datetime) -> bool:
        """Check if record has expired.

        Args:
            current_time: Current timestamp for comparison.

        Returns:
            True if record is expired.
        """
        return current_time >= self.expires_at
