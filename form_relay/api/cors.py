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

"""CORS origin policy shared by the Lambda handler and the FastAPI app."""

from typing import Dict, Optional, Sequence

ALLOW_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"
ALLOW_METHODS = "POST,OPTIONS"
MAX_AGE_SECONDS = "600"


def is_origin_allowed(origin: Optional[str], allowed_origins: Sequence[str]) -> bool:
    """Check an Origin header against the configured origins.

    Entries of the form ``*.example.com`` match any origin ending with
    ``example.com``; every other entry must match exactly.

    Args:
        origin: Origin header value, if any.
        allowed_origins: Configured origins.

    Returns:
        True if the origin may post submissions.
    """
    if not origin:
        return False

    for allowed in allowed_origins:
        if allowed.startswith("*."):
            if origin.endswith(allowed[2:]):
                return True
        elif origin == allowed:
            return True
    return False


def cors_headers(origin: Optional[str], allowed_origins: Sequence[str]) -> Dict[str, str]:
    """Build response headers, echoing the origin only when it is allowed."""
    if is_origin_allowed(origin, allowed_origins):
        allow_origin = origin
    else:
        allow_origin = allowed_origins[0] if allowed_origins else ""

    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Max-Age": MAX_AGE_SECONDS,
        "Content-Type": "application/json",
    }
