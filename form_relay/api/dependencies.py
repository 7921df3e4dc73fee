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

"""Composition root: builds the store clients and use cases once per process."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import boto3

from form_relay.config import Settings, configure_logging
from form_relay.core.submissions.repositories import Clock
from form_relay.infra import (
    DynamoDuplicateRecordRepository,
    DynamoRateLimitRecordRepository,
    SesNotifier,
    SystemClock,
)
from form_relay.orchestrator.submissions.use_cases import (
    CheckDuplicateUseCase,
    CheckRateLimitUseCase,
    SubmitFormUseCase,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceContainer:
    """Handles shared by every request served by this process.

    Attributes:
        settings: Loaded configuration.
        submit_form: Fully wired submission pipeline.
    """

    settings: Settings
    submit_form: SubmitFormUseCase


def build_container(
    settings: Settings,
    dynamodb: Optional[Any] = None,
    ses_client: Optional[Any] = None,
    clock: Optional[Clock] = None,
) -> ServiceContainer:
    """Wire repositories, notifier and use cases.

    Args:
        settings: Loaded configuration.
        dynamodb: Optional boto3 DynamoDB resource. Created if not provided.
        ses_client: Optional boto3 SES client. Created if not provided.
        clock: Optional time source. SystemClock if not provided.

    Returns:
        ServiceContainer ready to serve requests.
    """
    clock = clock or SystemClock()
    dynamodb = dynamodb or boto3.resource("dynamodb", region_name=settings.aws_region)
    ses_client = ses_client or boto3.client("ses", region_name=settings.aws_region)

    duplicate_repo = DynamoDuplicateRecordRepository(
        dynamodb.Table(settings.dedupe_table_name), clock
    )
    rate_limit_repo = DynamoRateLimitRecordRepository(
        dynamodb.Table(settings.rate_limit_table_name), clock
    )
    notifier = SesNotifier(
        ses_client,
        sender=settings.email_sender,
        recipient=settings.email_recipient,
    )

    submit_form = SubmitFormUseCase(
        duplicate_check=CheckDuplicateUseCase(duplicate_repo, clock),
        rate_limit_check=CheckRateLimitUseCase(rate_limit_repo, clock),
        notifier=notifier,
        clock=clock,
        dedupe_policy=settings.dedupe_policy,
        rate_limit_policy=settings.rate_limit_policy,
    )
    logger.info(
        "Service container built (dedupe table %s, rate limit table %s)",
        settings.dedupe_table_name,
        settings.rate_limit_table_name,
    )
    return ServiceContainer(settings=settings, submit_form=submit_form)


_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Return the process-wide container, building it on first use.

    Raises:
        ConfigurationError: If the environment is incomplete.
    """
    global _container
    if _container is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        _container = build_container(settings)
    return _container


def set_container(container: Optional[ServiceContainer]) -> None:
    """Replace (or clear, with None) the process-wide container."""
    global _container
    _container = container
