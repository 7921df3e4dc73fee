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

"""Environment-based configuration for Form Relay."""

import logging
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from form_relay.core.submissions.exceptions import ConfigurationError
from form_relay.core.submissions.value_objects import DedupePolicy, RateLimitPolicy

logger = logging.getLogger(__name__)

REQUIRED_ENV_VARS = (
    "EMAIL_RECIPIENT",
    "EMAIL_SENDER",
    "ALLOWED_ORIGINS",
    "DEDUPE_TTL",
    "MAX_DUPLICATE_COUNT",
    "DEDUPE_TABLE_NAME",
    "RATE_LIMIT_TABLE_NAME",
)

DEFAULT_RATE_LIMIT_WINDOW = 3600  # 1 hour
DEFAULT_RATE_LIMIT_MAX_REQUESTS = 10
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, loaded once at startup.

    Attributes:
        email_recipient: Address notifications are sent to.
        email_sender: Verified sender address.
        allowed_origins: Origins allowed to post; ``*.domain`` entries match subdomains.
        dedupe_ttl: Duplicate record lifetime in seconds.
        max_duplicate_count: Highest accepted sighting count per fingerprint.
        rate_limit_window: Fixed window length in seconds.
        rate_limit_max_requests: Requests allowed per address per window.
        dedupe_table_name: DynamoDB table holding duplicate records.
        rate_limit_table_name: DynamoDB table holding rate limit records.
        aws_region: Optional region override for AWS clients.
        log_level: Root logging level name.
    """

    email_recipient: str
    email_sender: str
    allowed_origins: List[str]
    dedupe_ttl: int
    max_duplicate_count: int
    rate_limit_window: int
    rate_limit_max_requests: int
    dedupe_table_name: str
    rate_limit_table_name: str
    aws_region: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Fully populated Settings.

        Raises:
            ConfigurationError: If a required variable is missing or a
                numeric variable is malformed.
        """
        env = os.environ if environ is None else environ

        for name in REQUIRED_ENV_VARS:
            if not env.get(name):
                raise ConfigurationError(f"Missing required environment variable: {name}")

        allowed_origins = [
            origin.strip() for origin in env["ALLOWED_ORIGINS"].split(",") if origin.strip()
        ]
        if not allowed_origins:
            raise ConfigurationError("ALLOWED_ORIGINS must list at least one origin")

        settings = cls(
            email_recipient=env["EMAIL_RECIPIENT"],
            email_sender=env["EMAIL_SENDER"],
            allowed_origins=allowed_origins,
            dedupe_ttl=_positive_int(env, "DEDUPE_TTL"),
            max_duplicate_count=_positive_int(env, "MAX_DUPLICATE_COUNT"),
            rate_limit_window=_positive_int(
                env, "RATE_LIMIT_WINDOW", DEFAULT_RATE_LIMIT_WINDOW
            ),
            rate_limit_max_requests=_positive_int(
                env, "RATE_LIMIT_MAX_REQUESTS", DEFAULT_RATE_LIMIT_MAX_REQUESTS
            ),
            dedupe_table_name=env["DEDUPE_TABLE_NAME"],
            rate_limit_table_name=env["RATE_LIMIT_TABLE_NAME"],
            aws_region=env.get("AWS_REGION") or None,
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
        logger.debug("Configuration loaded for %d allowed origin(s)", len(allowed_origins))
        return settings

    @property
    def dedupe_policy(self) -> DedupePolicy:
        return DedupePolicy(
            ttl_seconds=self.dedupe_ttl,
            max_duplicate_count=self.max_duplicate_count,
        )

    @property
    def rate_limit_policy(self) -> RateLimitPolicy:
        return RateLimitPolicy(
            window_seconds=self.rate_limit_window,
            max_requests=self.rate_limit_max_requests,
        )


def _positive_int(env: Mapping[str, str], name: str, default: Optional[int] = None) -> int:
    raw = env.get(name)
    if not raw:
        if default is None:
            raise ConfigurationError(f"Missing required environment variable: {name}")
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
