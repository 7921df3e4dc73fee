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

"""
Content validation for raw form submissions.
Checks shape limits, field formats and injection indicators, accumulating
every problem found instead of stopping at the first one.
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from .value_objects import KnownField

ROOT_FIELD = "root"

MIN_FIELDS = 1
MAX_FIELDS = 20
MAX_EXTENSION_LENGTH = 1000

SUSPICIOUS_CONTENT_MESSAGE = "Suspicious content detected"

EMAIL_PATTERN = re.compile(
    r"^[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+"
    r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$",
    re.IGNORECASE,
)

SUSPICIOUS_PATTERNS = (
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),  # onclick=, onerror=, etc.
    re.compile(r"eval\s*\(", re.IGNORECASE),
    re.compile(r"document\.", re.IGNORECASE),
    re.compile(r"window\.", re.IGNORECASE),
)


@dataclass(frozen=True)
class FieldError:
    """Single validation problem.

    Attributes:
        field: Offending field name, or ``root`` for whole-submission errors.
        message: Human-readable description.
    """

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult:
    """Validation verdict with the ordered list of errors."""

    valid: bool
    errors: List[FieldError] = field(default_factory=list)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _check_shape(data: Mapping) -> List[FieldError]:
    count = len(data)
    if count > MAX_FIELDS:
        return [FieldError(ROOT_FIELD, f"Submission must not have more than {MAX_FIELDS} fields")]
    if count < MIN_FIELDS:
        return [FieldError(ROOT_FIELD, f"Submission must have at least {MIN_FIELDS} field")]
    return []


def _check_field(key: str, value: Any) -> List[FieldError]:
    """Check type, length and format of one field."""
    if value is None:
        return []

    known = KnownField.lookup(key)
    if known is None:
        if not _is_scalar(value):
            return [FieldError(key, "Must be a string, number or boolean")]
        if isinstance(value, str) and len(value) > MAX_EXTENSION_LENGTH:
            return [FieldError(key, f"Must not be longer than {MAX_EXTENSION_LENGTH} characters")]
        return []

    if not isinstance(value, str):
        return [FieldError(key, "Must be a string")]

    errors = []
    if len(value) > known.max_length:
        errors.append(FieldError(key, f"Must not be longer than {known.max_length} characters"))
    if known is KnownField.EMAIL and not EMAIL_PATTERN.match(value):
        errors.append(FieldError(key, "Must be a valid email address"))
    return errors


def find_suspicious_content(key: str, value: Any) -> List[FieldError]:
    """Return one error per injection pattern the value matches."""
    if not isinstance(value, str):
        return []
    return [
        FieldError(key, SUSPICIOUS_CONTENT_MESSAGE)
        for pattern in SUSPICIOUS_PATTERNS
        if pattern.search(value)
    ]


def validate_submission(data: Any) -> ValidationResult:
    """
    Validate a raw submission.

    Args:
        data: Decoded request body (expected to be a mapping of field name
            to scalar or None)

    Returns:
        ValidationResult; ``valid`` is True only when no errors were found
    """
    if not isinstance(data, Mapping):
        errors = [FieldError(ROOT_FIELD, "Submission must be an object")]
        return ValidationResult(valid=False, errors=errors)

    errors: List[FieldError] = _check_shape(data)

    for key, value in data.items():
        errors.extend(_check_field(str(key), value))

    for key, value in data.items():
        errors.extend(find_suspicious_content(str(key), value))

    return ValidationResult(valid=not errors, errors=errors)
