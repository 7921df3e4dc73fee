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

"""Value objects for the Submissions domain.

All value objects are immutable and defined by their values, not identity.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Dict, Optional


@dataclass(frozen=True)
class Fingerprint:
    """Content identity of a submission, used as the duplicate record key.

    Two submissions that normalize to the same fields share a fingerprint.
    The leading characters double as the submission id returned to the
    client and quoted in logs.

    Attributes:
        value: Lowercase hex SHA-256 digest of the canonical field content.

    Raises:
        ValueError: If value is not a lowercase hex digest of DIGEST_LENGTH.
    """

    value: str

    DIGEST_LENGTH: ClassVar[int] = 64
    HEX_DIGITS: ClassVar[str] = "0123456789abcdef"
    SHORT_LENGTH: ClassVar[int] = 8

    def __post_init__(self) -> None:
        if len(self.value) != self.DIGEST_LENGTH:
            raise ValueError(
                f"Submission fingerprint must be {self.DIGEST_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if any(char not in self.HEX_DIGITS for char in self.value):
            raise ValueError(
                f"Submission fingerprint must be lowercase hex, got {self.value!r}"
            )

    @property
    def short(self) -> str:
        """Submission id: the leading characters of the digest."""
        return self.value[:self.SHORT_LENGTH]

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class ClientAddress:
    """Source address of a request, used as the rate limiting key.

    Attributes:
        value: IP address (or proxy-supplied identifier) string.

    Raises:
        ValueError: If value is empty or exceeds length.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 255

    def __post_init__(self) -> None:
        """Validate address is not empty and within length limit."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"ClientAddress length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not self.value or not self.value.strip():
            raise ValueError("Client address cannot be empty")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class KnownField(str, Enum):
    """Well-known submission fields.

    Closed set of recognized keys, each with its own length limit. Any
    other key belongs to the open extension bucket.
    """

    NAME = "name"
    EMAIL = "email"
    MESSAGE = "message"
    PHONE = "phone"
    COMPANY = "company"
    SUBJECT = "subject"

    @property
    def max_length(self) -> int:
        return _KNOWN_FIELD_MAX_LENGTHS[self]

    @classmethod
    def lookup(cls, key: str) -> Optional["KnownField"]:
        """Return the well-known field a raw key normalizes to, or None.

        Matching uses canonical_key, so " Email " and "EMAIL" are held to the
        email rules just as they are stored under "email".
        """
        try:
            return cls(canonical_key(key))
        except ValueError:
            return None


_KNOWN_FIELD_MAX_LENGTHS: Dict[KnownField, int] = {
    KnownField.NAME: 100,
    KnownField.EMAIL: 254,
    KnownField.MESSAGE: 5000,
    KnownField.PHONE: 20,
    KnownField.COMPANY: 100,
    KnownField.SUBJECT: 200,
}


def canonical_key(key: str) -> str:
    """Field name as stored after normalization: lower-cased and trimmed."""
    return str(key).lower().strip()


@dataclass(frozen=True)
class DedupePolicy:
    """Duplicate tracking settings.

    Attributes:
        ttl_seconds: Lifetime of a duplicate record after its latest sighting.
        max_duplicate_count: Highest sighting count that is still accepted.
    """

    ttl_seconds: int
    max_duplicate_count: int

    def __post_init__(self) -> None:
        if self.ttl_seconds <= 0:
            raise ValueError(f"Dedupe TTL must be positive, got {self.ttl_seconds}")
        if self.max_duplicate_count < 1:
            raise ValueError(
                f"Max duplicate count must be at least 1, got {self.max_duplicate_count}"
            )


@dataclass(frozen=True)
class RateLimitPolicy:
    """Fixed-window rate limiting settings.

    Attributes:
        window_seconds: Length of each window.
        max_requests: Requests allowed per address per window.
    """

    window_seconds: int
    max_requests: int

    def __post_init__(self) -> None:
        if self.window_seconds <= 0:
            raise ValueError(
                f"Rate limit window must be positive, got {self.window_seconds}"
            )
        if self.max_requests < 1:
            raise ValueError(
                f"Rate limit max requests must be at least 1, got {self.max_requests}"
            )

    @property
    def window_ms(self) -> int:
        return self.window_seconds * 1000


@dataclass(frozen=True)
class FixedWindow:
    """Epoch-aligned time window shared by every client.

    Attributes:
        start_ms: Window start, epoch milliseconds (inclusive).
        end_ms: Window end, epoch milliseconds (exclusive).
    """

    start_ms: int
    end_ms: int

    @classmethod
    def containing(cls, now_ms: int, window_ms: int) -> "FixedWindow":
        """Return the window that contains the given instant."""
        start_ms = (now_ms // window_ms) * window_ms
        return cls(start_ms=start_ms, end_ms=start_ms + window_ms)

    @property
    def start(self) -> datetime:
        return from_epoch_ms(self.start_ms)

    @property
    def end(self) -> datetime:
        return from_epoch_ms(self.end_ms)


def to_epoch_ms(moment: datetime) -> int:
    """Convert an aware datetime to integer epoch milliseconds."""
    return int(moment.timestamp() * 1000)


def from_epoch_ms(epoch_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)


def to_iso8601(moment: datetime) -> str:
    """Format an aware datetime as UTC ISO 8601 with millisecond precision."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso8601(text: str) -> datetime:
    """Parse a timestamp written by to_iso8601."""
    return datetime.fromisoformat(text.replace("Z", "+00:00"))
