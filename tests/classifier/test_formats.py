"""Tests for invalid_format summaries."""

from __future__ import annotations

import pytest

from issue_explainer.classifier import render_classified
from issue_explainer.types import InvalidFormatIssue, MessageBuilderOptions


@pytest.mark.parametrize(
    ("issue", "expected"),
    [
        (InvalidFormatIssue(format="starts_with", prefix="ab"), 'malformed value; expected string to start with "ab"'),
        (InvalidFormatIssue(format="ends_with", suffix="z"), 'malformed value; expected string to end with "z"'),
        (InvalidFormatIssue(format="includes", includes="x"), 'malformed value; expected string to include "x"'),
        (InvalidFormatIssue(format="regex", pattern="^a$"), "malformed value; expected string to match pattern"),
        (InvalidFormatIssue(format="jwt", algorithm="HS256"), "malformed value; expected a jwt token"),
        (InvalidFormatIssue(format="lowercase"), "malformed value; expected lowercase string"),
        (InvalidFormatIssue(format="uuid"), "malformed value; expected a UUID"),
        (InvalidFormatIssue(format="ipv4"), "malformed value; expected an IPv4 address"),
        (InvalidFormatIssue(format="sha256_hex"), "malformed value; expected a SHA256 hex-encoded hash"),
        (InvalidFormatIssue(format="md5_base64"), "malformed value; expected an MD5 base64-encoded hash"),
        (InvalidFormatIssue(format="zipcode"), "malformed value; expected zipcode format"),
    ],
)
def test_format_expectations(issue: InvalidFormatIssue, expected: str, options: MessageBuilderOptions) -> None:
    assert render_classified(issue, options) == expected


def test_email_with_path(options: MessageBuilderOptions) -> None:
    issue = InvalidFormatIssue(format="email", path=("email",))
    assert render_classified(issue, options) == 'malformed value at "email"; expected an email address'


def test_format_details_shown_on_request() -> None:
    options = MessageBuilderOptions(display_invalid_format_details=True)
    assert render_classified(InvalidFormatIssue(format="regex", pattern="^a$"), options) == (
        'malformed value; expected string to match pattern "^a$"'
    )
    assert render_classified(InvalidFormatIssue(format="jwt", algorithm="HS256"), options) == (
        "malformed value; expected a jwt/HS256 token"
    )


def test_format_discloses_input(value_options: MessageBuilderOptions) -> None:
    issue = InvalidFormatIssue(format="email", input="nope")
    assert render_classified(issue, value_options) == 'malformed value; expected an email address, received "nope"'
