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

"""Unit tests for submission content validation."""

import pytest

from form_relay.core.submissions.validation import (
    MAX_EXTENSION_LENGTH,
    ROOT_FIELD,
    SUSPICIOUS_CONTENT_MESSAGE,
    FieldError,
    find_suspicious_content,
    validate_submission,
)


def _messages(result):
    return [(error.field, error.message) for error in result.errors]


class TestValidateSubmissionShape:
    """Tests for whole-submission checks."""

    def test_valid_contact_form_passes(self, valid_submission):
        """A name, email and message triple should pass."""
        result = validate_submission(valid_submission)
        assert result.valid is True
        assert result.errors == []

    def test_non_object_is_rejected(self):
        result = validate_submission(["name", "email"])
        assert result.valid is False
        assert _messages(result) == [(ROOT_FIELD, "Submission must be an object")]

    def test_none_is_rejected(self):
        result = validate_submission(None)
        assert _messages(result) == [(ROOT_FIELD, "Submission must be an object")]

    def test_empty_object_is_rejected(self):
        result = validate_submission({})
        assert result.valid is False
        assert _messages(result) == [(ROOT_FIELD, "Submission must have at least 1 field")]

    def test_too_many_fields_rejected(self):
        """25 fields is over the 20 field limit."""
        submission = {f"field{i}": "value" for i in range(25)}
        result = validate_submission(submission)
        assert result.valid is False
        assert (ROOT_FIELD, "Submission must not have more than 20 fields") in _messages(result)

    def test_twenty_fields_accepted(self):
        submission = {f"field{i}": "value" for i in range(20)}
        assert validate_submission(submission).valid is True


class TestValidateKnownFields:
    """Tests for the well-known field rules."""

    def test_name_over_limit(self):
        result = validate_submission({"name": "a" * 101})
        assert _messages(result) == [("name", "Must not be longer than 100 characters")]

    def test_name_at_limit(self):
        assert validate_submission({"name": "a" * 100}).valid is True

    def test_known_field_must_be_string(self):
        result = validate_submission({"phone": 5551234})
        assert _messages(result) == [("phone", "Must be a string")]

    @pytest.mark.parametrize(
        "email",
        ["not-an-email", "missing@tld", "@example.com", "two@@example.com"],
    )
    def test_invalid_email(self, email):
        result = validate_submission({"email": email})
        assert ("email", "Must be a valid email address") in _messages(result)

    @pytest.mark.parametrize(
        "email",
        ["ada@example.com", "first.last+tag@sub.example.co.uk", "A@EXAMPLE.COM"],
    )
    def test_valid_email(self, email):
        assert validate_submission({"email": email}).valid is True

    def test_uppercase_email_key_gets_email_rules(self):
        """A key that normalizes to 'email' is checked as an email."""
        result = validate_submission({"EMAIL": "not-an-email"})
        assert _messages(result) == [("EMAIL", "Must be a valid email address")]

    def test_padded_name_key_gets_name_limit(self):
        result = validate_submission({" Name ": "a" * 900})
        assert _messages(result) == [(" Name ", "Must not be longer than 100 characters")]

    def test_mixed_case_known_key_must_be_string(self):
        result = validate_submission({"Phone": 5551234})
        assert _messages(result) == [("Phone", "Must be a string")]

    def test_null_value_is_treated_as_absent(self):
        """A None value skips type, length and format checks."""
        result = validate_submission({"name": "Ada", "email": None})
        assert result.valid is True


class TestValidateExtensionFields:
    """Tests for fields outside the well-known set."""

    @pytest.mark.parametrize("value", ["enterprise", 42, 3.5, True, False])
    def test_scalars_accepted(self, value):
        assert validate_submission({"plan": value}).valid is True

    @pytest.mark.parametrize("value", [["a", "b"], {"nested": "x"}])
    def test_non_scalars_rejected(self, value):
        result = validate_submission({"plan": value})
        assert _messages(result) == [("plan", "Must be a string, number or boolean")]

    def test_long_extension_string_rejected(self):
        result = validate_submission({"notes": "x" * (MAX_EXTENSION_LENGTH + 1)})
        assert _messages(result) == [
            ("notes", f"Must not be longer than {MAX_EXTENSION_LENGTH} characters")
        ]


class TestSuspiciousContent:
    """Tests for injection heuristics."""

    def test_script_tag_rejected(self, valid_submission):
        """A message containing <script> should fail validation."""
        valid_submission["message"] = "<script>alert('x')</script>"
        result = validate_submission(valid_submission)
        assert result.valid is False
        assert ("message", SUSPICIOUS_CONTENT_MESSAGE) in _messages(result)

    @pytest.mark.parametrize(
        "value",
        [
            "<SCRIPT src=x>",
            "javascript:alert(1)",
            "<img onerror = steal()>",
            "eval (payload)",
            "document.cookie",
            "window.location",
        ],
    )
    def test_each_pattern_detected(self, value):
        assert find_suspicious_content("company", value) == [
            FieldError("company", SUSPICIOUS_CONTENT_MESSAGE)
        ]

    def test_one_error_per_matching_pattern(self):
        errors = find_suspicious_content("message", "<script>document.write(1)</script>")
        assert len(errors) == 2

    def test_non_string_values_ignored(self):
        assert find_suspicious_content("count", 12) == []

    def test_plain_text_passes(self):
        assert find_suspicious_content("message", "Looking forward to hearing from you") == []

    def test_errors_accumulate_across_fields(self):
        """Format errors come before content errors, nothing short-circuits."""
        result = validate_submission({
            "email": "bad",
            "message": "javascript:void(0)",
        })
        assert _messages(result) == [
            ("email", "Must be a valid email address"),
            ("message", SUSPICIOUS_CONTENT_MESSAGE),
        ]


class TestFieldError:
    """Tests for FieldError serialization."""

    def test_to_dict(self):
        assert FieldError("email", "Must be a string").to_dict() == {
            "field": "email",
            "message": "Must be a string",
        }
