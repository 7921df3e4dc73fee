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

"""Pydantic response schemas for the submission endpoint."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SubmissionAcceptedResponse(BaseModel):
    """Body returned for an accepted submission."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Form submitted successfully"
    submission_id: str = Field(
        ...,
        alias="submissionId",
        description="Short public identifier of the submission",
    )


class FieldErrorDetail(BaseModel):
    """One validation failure."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body returned for every rejected request."""

    model_config = ConfigDict(populate_by_name=True)

    error: str
    message: str
    details: Optional[List[FieldErrorDetail]] = None
    retry_after: Optional[int] = Field(
        default=None,
        alias="retryAfter",
        description="Seconds the client should wait before retrying",
    )
