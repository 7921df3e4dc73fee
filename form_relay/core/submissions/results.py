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

"""Explicit success/failure result type.

Checks that depend on the backing store return ``Result`` values instead of
raising, so the fail-open policy is applied in one visible place.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the error that caused it."""

    error: E

    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


def unwrap_or(result: "Result[T, E]", default: T) -> T:
    """Return the value of an Ok result, or the default for an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
