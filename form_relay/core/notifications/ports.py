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

"""Notification port interface."""

from typing import Protocol

from .template import EmailTemplate


class Notifier(Protocol):
    """Delivery channel port for rendered notifications."""

    def send(self, template: EmailTemplate) -> None:
        """Deliver a rendered notification.

        Args:
            template: Rendered email.

        Raises:
            NotificationError: If delivery fails.
        """
        ...
