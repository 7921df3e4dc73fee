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

"""FastAPI application for hosting Form Relay outside of Lambda."""

from fastapi import FastAPI

from form_relay import __version__
from form_relay.api.submissions import router as submissions_router


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    application = FastAPI(
        title="Form Relay",
        description="Validates, deduplicates and rate limits form submissions, then forwards them by email.",
        version=__version__,
    )
    application.include_router(submissions_router)
    return application


app = create_app()
