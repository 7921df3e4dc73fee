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

"""Processed submission entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..value_objects import ClientAddress, Fingerprint


@dataclass(frozen=True)
class ProcessedSubmission:
    """Submission that passed every check and is ready for delivery.

    Attributes:
        fingerprint: Content fingerprint.
        client_address: Source address of the request.
        received_at: Processing timestamp.
        normalized: Normalized field mapping.
        user_agent: Optional User-Agent header value.
    """

    fingerprint: Fingerprint
    client_address: ClientAddress
    received_at: datetime
    normalized: Dict[str, Any] = field(default_factory=dict)
    user_agent: Optional[str] = None
