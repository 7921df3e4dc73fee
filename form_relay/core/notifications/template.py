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

"""Email rendering for accepted submissions."""

import html
from dataclasses import dataclass
from datetime import timezone
from typing import Any, List, Tuple

from form_relay.core.submissions.entities import ProcessedSubmission
from form_relay.core.submissions.services import stringify_value
from form_relay.core.submissions.value_objects import to_iso8601

MAX_SUBJECT_LENGTH = 200  # SES subject limit
DEFAULT_SUBJECT = "New form submission"

# Request metadata keys that are shown in the meta block, never as fields.
_META_KEYS = {"timestamp", "ip", "useragent"}


@dataclass(frozen=True)
class EmailTemplate:
    """Rendered notification.

    Attributes:
        subject: Subject line, at most 200 characters.
        html_body: HTML part.
        text_body: Plain text part.
    """

    subject: str
    html_body: str
    text_body: str


def _label(key: str) -> str:
    return key[:1].upper() + key[1:]


def _display_value(value: Any) -> str:
    if value is None:
        return ""
    return stringify_value(value)


def _visible_fields(submission: ProcessedSubmission) -> List[Tuple[str, str]]:
    return [
        (_label(key), _display_value(value))
        for key, value in submission.normalized.items()
        if key not in _META_KEYS
    ]


def build_subject(submission: ProcessedSubmission) -> str:
    """Pick the subject line: explicit subject, then sender name, then default."""
    subject = submission.normalized.get("subject")
    name = submission.normalized.get("name")
    if subject:
        line = stringify_value(subject)
    elif name:
        line = f"Form submission from {stringify_value(name)}"
    else:
        line = DEFAULT_SUBJECT
    return line[:MAX_SUBJECT_LENGTH]


def _render_html(submission: ProcessedSubmission, timestamp: str, received: str) -> str:
    fields_html = "".join(
        f"""
      <div class="field">
        <div class="label">{html.escape(label)}</div>
        <div class="value">{html.escape(value)}</div>
      </div>"""
        for label, value in _visible_fields(submission)
    )
    user_agent_html = ""
    if submission.user_agent:
        user_agent_html = (
            f'<div class="meta-item"><strong>User Agent:</strong> '
            f'{html.escape(submission.user_agent)}</div>'
        )

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Form Submission</title>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ background: #f4f4f4; padding: 20px; border-radius: 5px; margin-bottom: 20px; }}
    .field {{ margin-bottom: 15px; }}
    .label {{ font-weight: bold; color: #555; }}
    .value {{ margin-top: 5px; padding: 10px; background: #f9f9f9; border-radius: 3px; }}
    .meta {{ margin-top: 30px; padding: 15px; background: #e9e9e9; border-radius: 5px; font-size: 0.9em; }}
    .meta-item {{ margin-bottom: 5px; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h2>New Form Submission</h2>
      <p>Received at {received}</p>
    </div>
    <div class="content">{fields_html}
    </div>
    <div class="meta">
      <div class="meta-item"><strong>IP Address:</strong> {html.escape(str(submission.client_address))}</div>
      <div class="meta-item"><strong>Timestamp:</strong> {timestamp}</div>
      {user_agent_html}
    </div>
  </div>
</body>
</html>
"""


def _render_text(submission: ProcessedSubmission, timestamp: str, received: str) -> str:
    lines = [
        "New Form Submission",
        "===================",
        "",
        f"Received at: {received}",
        "",
    ]
    lines.extend(f"{label}: {value}" for label, value in _visible_fields(submission))
    lines.extend([
        "",
        "---",
        f"IP Address: {submission.client_address}",
        f"Timestamp: {timestamp}",
    ])
    if submission.user_agent:
        lines.append(f"User Agent: {submission.user_agent}")
    return "\n".join(lines) + "\n"


def render_email(submission: ProcessedSubmission) -> EmailTemplate:
    """
    Render the notification for an accepted submission.

    Field values are HTML-escaped in the HTML part only; the text part
    carries them verbatim.

    Args:
        submission: Submission that passed validation, dedupe and rate limiting

    Returns:
        EmailTemplate with subject, HTML body and text body
    """
    timestamp = to_iso8601(submission.received_at)
    received = submission.received_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
    return EmailTemplate(
        subject=build_subject(submission),
        html_body=_render_html(submission, timestamp, received),
        text_body=_render_text(submission, timestamp, received),
    )
