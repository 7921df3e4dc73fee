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

"""Repository port interfaces (Protocols) for the Submissions domain.

These define the contracts that infrastructure implementations must satisfy.
Each method is a single round trip to the backing store and may fail
independently of the others.
"""

from datetime import datetime
from typing import Optional, Protocol

from .entities import DuplicateRecord, RateLimitRecord
from .value_objects import ClientAddress, Fingerprint


class Clock(Protocol):
    """Time source port."""

    def now(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        ...


class DuplicateRecordRepository(Protocol):
    """Repository port for DuplicateRecord persistence."""

    def find(self, fingerprint: Fingerprint) -> Optional[DuplicateRecord]:
        """Retrieve the record for a fingerprint.

        Args:
            fingerprint: Submission fingerprint.

        Returns:
            DuplicateRecord if present and not expired, None otherwise.

        Raises:
            DependencyError: If the store call fails.
        """
        ...

    def save(self, record: DuplicateRecord) -> None:
        """Create or overwrite a record.

        Args:
            record: Record to persist.

        Raises:
            DependencyError: If the store call fails.
        """
        ...

    def update_sighting(self, record: DuplicateRecord) -> None:
        """Persist count, last_seen and expiry of an existing record.

        Args:
            record: Record carrying the new sighting values.

        Raises:
            DependencyError: If the store call fails.
        """
        ...


class RateLimitRecordRepository(Protocol):
    """Repository port for RateLimitRecord persistence."""

    def find(self, client_address: ClientAddress) -> Optional[RateLimitRecord]:
        """Retrieve the counter for an address.

        Args:
            client_address: Request source address.

        Returns:
            RateLimitRecord if present and not expired, None otherwise.

        Raises:
            DependencyError: If the store call fails.
        """
        ...

    def save(self, record: RateLimitRecord) -> None:
        """Create or overwrite the counter for an address.

        Args:
            record: Record to persist.

        Raises:
            DependencyError: If the store call fails.
        """
        ...

    def update_count(self, client_address: ClientAddress, count: int) -> None:
        """Persist a new count for the current window.

        Args:
            client_address: Request source address.
            count: New request count.

        Raises:
            DependencyError: If the store call fails.
        """
        ...
