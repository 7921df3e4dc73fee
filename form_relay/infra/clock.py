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

"""Infrastructure time source."""

from datetime import datetime, timezone

from form_relay.core.submissions.repositories import Clock


class SystemClock(Clock):
    """Wall-clock time source in UTC."""

    def now(self) -> datetime:
        """Return the current UTC time.

        Returns:
            datetime: Timezone-aware current time.
        """
        return datetime.now(timezone.utc)
