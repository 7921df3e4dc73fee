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

"""Shared fixtures for Form Relay tests.

In-memory fakes stand in for the DynamoDB tables, the SES channel and the
wall clock so use cases and handlers can be exercised without AWS.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

from form_relay.config import Settings
from form_relay.core.notifications import EmailTemplate
from form_relay.core.submissions.entities import DuplicateRecord, RateLimitRecord
from form_relay.core.submissions.exceptions import DependencyError, NotificationError
from form_relay.core.submissions.value_objects import (
    ClientAddress,
    DedupePolicy,
    Fingerprint,
    RateLimitPolicy,
)

# 2024-01-01T00:00:00Z, aligned to every window length used in tests.
EPOCH_START = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    """Controllable time source."""

    def __init__(self, start: datetime = EPOCH_START) -> None:
        self._now = start

    def now(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move time forward."""
        self._now = self._now + timedelta(seconds=seconds)

    def set(self, moment: datetime) -> None:
        self._now = moment


class FakeDuplicateRecordRepository:
    """In-memory fake implementation of DuplicateRecordRepository."""

    def __init__(self, clock: FakeClock) -> None:
        """Initialize the fake repository."""
        self._clock = clock
        self.records: Dict[str, DuplicateRecord] = {}

    def find(self, fingerprint: Fingerprint) -> Optional[DuplicateRecord]:
        """Find a live record by fingerprint."""
        record = self.records.get(str(fingerprint))
        if record is None or record.is_expired(self._clock.now()):
            return None
        return record

    def save(self, record: DuplicateRecord) -> None:
        """Save a record."""
        self.records[str(record.fingerprint)] = record

    def update_sighting(self, record: DuplicateRecord) -> None:
        """Overwrite count, last_seen and expiry."""
        self.records[str(record.fingerprint)] = record


class FakeRateLimitRecordRepository:
    """In-memory fake implementation of RateLimitRecordRepository."""

    def __init__(self, clock: FakeClock) -> None:
        """Initialize the fake repository."""
        self._clock = clock
        self.records: Dict[str, RateLimitRecord] = {}
        self.update_calls: List[int] = []

    def find(self, client_address: ClientAddress) -> Optional[RateLimitRecord]:
        """Find a live record by address."""
        record = self.records.get(str(client_address))
        if record is None or self._clock.now() >= record.expires_at:
            return None
        return record

    def save(self, record: RateLimitRecord) -> None:
        """Save a record."""
        self.records[str(record.client_address)] = record

    def update_count(self, client_address: ClientAddress, count: int) -> None:
        """Overwrite the count of an existing record."""
        self.update_calls.append(count)
        existing = self.records[str(client_address)]
        self.records[str(client_address)] = RateLimitRecord(
            client_address=existing.client_address,
            count=count,
            window_start=existing.window_start,
            expires_at=existing.expires_at,
        )


class FailingRepository:
    """Repository whose every call fails like an unreachable table."""

    def __init__(self, resource: str = "unavailable-table") -> None:
        self._resource = resource
        self.calls = 0

    def _fail(self, operation: str):
        self.calls += 1
        raise DependencyError(operation, self._resource, "connection refused")

    def find(self, _key):
        return self._fail("get_item")

    def save(self, _record):
        return self._fail("put_item")

    def update_sighting(self, _record):
        return self._fail("update_item")

    def update_count(self, _key, _count):
        return self._fail("update_item")


class FakeNotifier:
    """Notifier recording every template it is asked to send."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: List[EmailTemplate] = []
        self._fail = fail

    def send(self, template: EmailTemplate) -> None:
        if self._fail:
            raise NotificationError("Failed to send email notification")
        self.sent.append(template)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock frozen at the start of a window."""
    return FakeClock()


@pytest.fixture
def duplicate_repo(fake_clock: FakeClock) -> FakeDuplicateRecordRepository:
    return FakeDuplicateRecordRepository(fake_clock)


@pytest.fixture
def rate_limit_repo(fake_clock: FakeClock) -> FakeRateLimitRecordRepository:
    return FakeRateLimitRecordRepository(fake_clock)


@pytest.fixture
def failing_repo() -> FailingRepository:
    return FailingRepository()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def failing_notifier() -> FakeNotifier:
    return FakeNotifier(fail=True)


@pytest.fixture
def dedupe_policy() -> DedupePolicy:
    """One-hour TTL, blocks on the 4th sighting."""
    return DedupePolicy(ttl_seconds=3600, max_duplicate_count=3)


@pytest.fixture
def rate_limit_policy() -> RateLimitPolicy:
    """Ten requests per hour."""
    return RateLimitPolicy(window_seconds=3600, max_requests=10)


@pytest.fixture
def client_address() -> ClientAddress:
    return ClientAddress("203.0.113.7")


@pytest.fixture
def valid_submission() -> Dict[str, str]:
    """Minimal well-formed contact form."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "message": "Hello, I would like to know more about your services.",
    }


@pytest.fixture
def env_vars() -> Dict[str, str]:
    """Complete environment for Settings.from_env."""
    return {
        "EMAIL_RECIPIENT": "inbox@example.com",
        "EMAIL_SENDER": "noreply@example.com",
        "ALLOWED_ORIGINS": "https://example.com,*.example.org",
        "DEDUPE_TTL": "3600",
        "MAX_DUPLICATE_COUNT": "3",
        "DEDUPE_TABLE_NAME": "form-relay-dedupe",
        "RATE_LIMIT_TABLE_NAME": "form-relay-rate-limit",
    }


@pytest.fixture
def settings(env_vars: Dict[str, str]) -> Settings:
    return Settings.from_env(env_vars)
