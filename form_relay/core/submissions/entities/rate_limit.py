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

"""Rate limit window record entity."""

from dataclasses import dataclass, replace
from datetime import datetime

from ..value_objects import ClientAddress, FixedWindow


@dataclass(frozen=True)
class RateLimitRecord:
    """Request counter for one client address in one fixed window.

    Attributes:
        client_address: Address the counter belongs to.
        count: Requests counted in the window.
        window_start: Start of the window the count applies to.
        expires_at: Window end; the store may discard the record afterwards.
    """

    client_address: ClientAddress
    count: int
    window_start: datetime
    expires_at: datetime

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Rate limit count must be at least 1, got {self.count}")

    @classmethod
    def open_window(
        cls,
        client_address: ClientAddress,
        window: FixedWindow,
    ) -> "RateLimitRecord":
        """Create the record for the first request of an address in a window."""
        return cls(
            client_address=client_address,
            count=1,
            window_start=window.start,
            expires_at=window.end,
        )

    def predates(self, window: FixedWindow) -> bool:
        """Check if this record belongs to a window earlier than the given one."""
        return window.start > self.window_start

    def increment(self) -> "RateLimitRecord":
        """Return a copy with one more request counted."""
        return replace(self, count=self.count + 1)
