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

"""SubmitForm command DTO."""

from dataclasses import dataclass
from typing import Any, Optional

from form_relay.core.submissions.value_objects import ClientAddress


@dataclass(frozen=True)
class SubmitFormCommand:
    """Command to accept and forward a form submission.

    Immutable command object representing one incoming request.
    All validation is performed in the use case layer.

    Attributes:
        submission: Raw decoded request body.
        client_address: Source address used for rate limiting.
        user_agent: Optional User-Agent header value.
        correlation_id: Optional request identifier for tracing.
    """

    submission: Any
    client_address: ClientAddress
    user_agent: Optional[str] = None
    correlation_id: Optional[str] = None
