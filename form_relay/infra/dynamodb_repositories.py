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

"""DynamoDB implementations of the submission record repositories.

Items carry a numeric ``ttl`` attribute (epoch seconds) for DynamoDB's
time-to-live deletion. Deletion is lazy, so reads treat items whose ``ttl``
has passed as absent.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from form_relay.core.submissions.entities import DuplicateRecord, RateLimitRecord
from form_relay.core.submissions.exceptions import DependencyError
from form_relay.core.submissions.repositories import (
    Clock,
    DuplicateRecordRepository,
    RateLimitRecordRepository,
)
from form_relay.core.submissions.value_objects import (
    ClientAddress,
    Fingerprint,
    parse_iso8601,
    to_iso8601,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _epoch_seconds(moment: datetime) -> int:
    return int(moment.timestamp())


def _from_epoch_seconds(value: Any) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


class _DynamoTableRepository:
    """Shared plumbing for single-table repositories."""

    def __init__(self, table: Any, clock: Clock) -> None:
        """Initialize the repository.

        Args:
            table: boto3 ``dynamodb.Table`` resource.
            clock: Time source used to hide expired items.
        """
        self._table = table
        self._clock = clock

    @property
    def table_name(self) -> str:
        return getattr(self._table, "name", "unknown-table")

    def _call(self, operation: str, func: Callable[..., T], **kwargs: Any) -> T:
        """Run one table call, translating every failure into DependencyError."""
        try:
            return func(**kwargs)
        except (ClientError, BotoCoreError) as exc:
            logger.error("DynamoDB %s on %s failed: %s", operation, self.table_name, exc)
            raise DependencyError(operation, self.table_name, str(exc)) from exc
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error in DynamoDB %s on %s", operation, self.table_name)
            raise DependencyError(
                operation, self.table_name, f"{type(exc).__name__}: {exc}"
            ) from exc

    def _get_live_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        response = self._call("get_item", self._table.get_item, Key=key)
        item = response.get("Item") if isinstance(response, dict) else None
        if item is None:
            return None
        if self._parse(item, self._has_expired):
            return None
        return item

    def _has_expired(self, item: Dict[str, Any]) -> bool:
        if "ttl" not in item:
            return False
        return int(item["ttl"]) <= _epoch_seconds(self._clock.now())

    def _parse(self, item: Dict[str, Any], parser: Callable[[Dict[str, Any]], T]) -> T:
        try:
            return parser(item)
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            logger.error("Malformed item in %s: %s", self.table_name, exc)
            raise DependencyError("get_item", self.table_name, f"malformed item: {exc}") from exc


class DynamoDuplicateRecordRepository(_DynamoTableRepository, DuplicateRecordRepository):
    """Duplicate records keyed by ``hash`` (the fingerprint)."""

    def find(self, fingerprint: Fingerprint) -> Optional[DuplicateRecord]:
        item = self._get_live_item({"hash": str(fingerprint)})
        if item is None:
            return None
        return self._parse(item, self._to_entity)

    def save(self, record: DuplicateRecord) -> None:
        self._call("put_item", self._table.put_item, Item=self._to_item(record))

    def update_sighting(self, record: DuplicateRecord) -> None:
        self._call(
            "update_item",
            self._table.update_item,
            Key={"hash": str(record.fingerprint)},
            UpdateExpression="SET #count = :count, lastSeen = :lastSeen, #ttl = :ttl",
            ExpressionAttributeNames={"#count": "count", "#ttl": "ttl"},
            ExpressionAttributeValues={
                ":count": record.count,
                ":lastSeen": to_iso8601(record.last_seen),
                ":ttl": _epoch_seconds(record.expires_at),
            },
        )

    @staticmethod
    def _to_item(record: DuplicateRecord) -> Dict[str, Any]:
        return {
            "hash": str(record.fingerprint),
            "count": record.count,
            "ttl": _epoch_seconds(record.expires_at),
            "firstSeen": to_iso8601(record.first_seen),
            "lastSeen": to_iso8601(record.last_seen),
        }

    @staticmethod
    def _to_entity(item: Dict[str, Any]) -> DuplicateRecord:
        return DuplicateRecord(
            fingerprint=Fingerprint(item["hash"]),
            count=int(item["count"]),
            first_seen=parse_iso8601(item["firstSeen"]),
            last_seen=parse_iso8601(item["lastSeen"]),
            expires_at=_from_epoch_seconds(item["ttl"]),
        )


class DynamoRateLimitRecordRepository(_DynamoTableRepository, RateLimitRecordRepository):
    """Rate limit records keyed by ``ip`` (the client address)."""

    def find(self, client_address: ClientAddress) -> Optional[RateLimitRecord]:
        item = self._get_live_item({"ip": str(client_address)})
        if item is None:
            return None
        return self._parse(item, self._to_entity)

    def save(self, record: RateLimitRecord) -> None:
        self._call("put_item", self._table.put_item, Item=self._to_item(record))

    def update_count(self, client_address: ClientAddress, count: int) -> None:
        self._call(
            "update_item",
            self._table.update_item,
            Key={"ip": str(client_address)},
            UpdateExpression="SET #count = :count",
            ExpressionAttributeNames={"#count": "count"},
            ExpressionAttributeValues={":count": count},
        )

    @staticmethod
    def _to_item(record: RateLimitRecord) -> Dict[str, Any]:
        return {
            "ip": str(record.client_address),
            "count": record.count,
            "ttl": _epoch_seconds(record.expires_at),
            "windowStart": to_iso8601(record.window_start),
        }

    @staticmethod
    def _to_entity(item: Dict[str, Any]) -> RateLimitRecord:
        return RateLimitRecord(
            client_address=ClientAddress(item["ip"]),
            count=int(item["count"]),
            window_start=parse_iso8601(item["windowStart"]),
            expires_at=_from_epoch_seconds(item["ttl"]),
        )
