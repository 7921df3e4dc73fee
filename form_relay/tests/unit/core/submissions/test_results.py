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

"""Unit tests for the Ok / Err result type."""

from form_relay.core.submissions.exceptions import DependencyError
from form_relay.core.submissions.results import Err, Ok, unwrap_or


class TestResult:
    """Tests for Ok, Err and unwrap_or."""

    def test_ok_carries_value(self):
        result = Ok(5)
        assert result.is_ok() is True
        assert result.value == 5

    def test_err_carries_error(self):
        error = DependencyError("get_item", "table", "timeout")
        result = Err(error)
        assert result.is_ok() is False
        assert result.error is error

    def test_unwrap_or_returns_value_for_ok(self):
        assert unwrap_or(Ok("value"), "default") == "value"

    def test_unwrap_or_returns_default_for_err(self):
        result = Err(DependencyError("get_item", "table", "timeout"))
        assert unwrap_or(result, "default") == "default"
