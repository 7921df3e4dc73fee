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

"""Submission domain module for Form Relay."""

from .entities import DuplicateRecord, RateLimitRecord, ProcessedSubmission
from .exceptions import (
    FormRelayError,
    ConfigurationError,
    DependencyError,
    SubmissionValidationError,
    DuplicateSubmissionError,
    RateLimitExceededError,
    NotificationError,
)
from .repositories import (
    Clock,
    DuplicateRecordRepository,
    RateLimitRecordRepository,
)
from .results import Ok, Err, Result, unwrap_or
from .services import NormalizerService, FingerprintService
from .validation import FieldError, ValidationResult, validate_submission
from .value_objects import (
    Fingerprint,
    ClientAddress,
    KnownField,
    DedupePolicy,
    RateLimitPolicy,
    FixedWindow,
)

__all__ = [
    "DuplicateRecord",
    "RateLimitRecord",
    "ProcessedSubmission",
    "FormRelayError",
    "ConfigurationError",
    "DependencyError",
    "SubmissionValidationError",
    "DuplicateSubmissionError",
    "RateLimitExceededError",
    "NotificationError",
    "Clock",
    "DuplicateRecordRepository",
    "RateLimitRecordRepository",
    "Ok",
    "Err",
    "Result",
    "unwrap_or",
    "NormalizerService",
    "FingerprintService",
    "FieldError",
    "ValidationResult",
    "validate_submission",
    "Fingerprint",
    "ClientAddress",
    "KnownField",
    "DedupePolicy",
    "RateLimitPolicy",
    "FixedWindow",
]
