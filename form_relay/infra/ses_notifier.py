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

"""Amazon SES notification channel."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from form_relay.core.notifications import EmailTemplate, Notifier
from form_relay.core.submissions.exceptions import NotificationError

logger = logging.getLogger(__name__)

CHARSET = "UTF-8"


class SesNotifier(Notifier):
    """Sends rendered submissions through SES ``send_email``."""

    def __init__(self, ses_client: Any, sender: str, recipient: str) -> None:
        """Initialize the notifier.

        Args:
            ses_client: boto3 SES client.
            sender: Verified source address.
            recipient: Destination address.
        """
        self._ses_client = ses_client
        self._sender = sender
        self._recipient = recipient

    def send(self, template: EmailTemplate) -> None:
        """Send the email.

        Args:
            template: Rendered notification.

        Raises:
            NotificationError: If SES rejects the message or cannot be reached.
        """
        try:
            response = self._ses_client.send_email(
                Source=self._sender,
                Destination={"ToAddresses": [self._recipient]},
                Message={
                    "Subject": {"Data": template.subject, "Charset": CHARSET},
                    "Body": {
                        "Html": {"Data": template.html_body, "Charset": CHARSET},
                        "Text": {"Data": template.text_body, "Charset": CHARSET},
                    },
                },
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error("Error sending email: %s", exc, exc_info=True)
            raise NotificationError("Failed to send email notification") from exc

        logger.info("Email sent successfully: %s", response.get("MessageId"))
