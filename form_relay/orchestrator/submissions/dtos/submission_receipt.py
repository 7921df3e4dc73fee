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

"""Submission receipt DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionReceipt:
    """Response DTO for an accepted submission.

    Attributes:
        fingerprint: Full content fingerprint.
        submission_id: Short public identifier (fingerprint prefix).
        duplicate_count: Sightings of this content, 0 if unknown.
        rate_limit_remaining: Requests left for the client in this window.
        received_at: Processing timestamp (ISO 8601).
    """

    fingerprint: str
    submission_id: str
    duplicate_count: int
    rate_limit_remaining: int
    received_at: str
