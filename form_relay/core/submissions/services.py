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

"""Domain services for the Submissions domain."""

import hashlib
from typing import Any, Dict, Mapping, Tuple

from .value_objects import Fingerprint, canonical_key


class NormalizerService:
    """Domain service for canonicalizing raw submissions."""

    @staticmethod
    def normalize(submission: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a canonical copy of a raw submission.

        Keys are lower-cased and trimmed, string values are trimmed and
        entries whose value is None are dropped. Other values pass through
        unchanged. When two raw keys collapse to the same canonical key the
        later one wins.

        Args:
            submission: Raw field mapping.

        Returns:
            New normalized mapping.

        Example:
            >>> NormalizerService.normalize({" Name ": " Ada ", "Phone": None})
            {'name': 'Ada'}
        """
        normalized: Dict[str, Any] = {}
        for key, value in submission.items():
            if value is None:
                continue
            normalized_key = canonical_key(key)
            if isinstance(value, str):
                normalized[normalized_key] = value.strip()
            else:
                normalized[normalized_key] = value
        return normalized


class FingerprintService:
    """Domain service for computing submission fingerprints.

    Computes deterministic SHA-256 hash of normalized content for
    duplicate detection.
    """

    SEPARATOR = "|"

    @staticmethod
    def compute(normalized: Mapping[str, Any]) -> Fingerprint:
        """Compute SHA-256 fingerprint of a normalized submission.

        Creates a deterministic hash by:
        1. Sorting keys with a case-insensitive collation
        2. Rendering each entry as ``key:value``
        3. Joining entries with ``|`` and UTF-8 encoding
        4. SHA-256 hashing

        Args:
            normalized: Output of NormalizerService.normalize.

        Returns:
            Fingerprint value object.

        Example:
            >>> fp = FingerprintService.compute({"name": "Ada"})
            >>> len(fp.value)
            64
        """
        entries = sorted(normalized.items(), key=lambda item: _collation_key(item[0]))
        content = FingerprintService.SEPARATOR.join(
            f"{key}:{stringify_value(value)}" for key, value in entries
        )
        digest = hashlib.sha256(content.encode('utf-8')).hexdigest()
        return Fingerprint(digest)


def _collation_key(key: str) -> Tuple[str, str]:
    # Case-insensitive primary order, code points break ties.
    return (key.casefold(), key)


def stringify_value(value: Any) -> str:
    """Render a scalar the way browser-side form code prints it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
