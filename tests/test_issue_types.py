"""Tests for the normalized issue variants."""

from __future__ import annotations

import dataclasses

import pytest

from issue_explainer.constants.issues import ISSUE_CODES
from issue_explainer.types import MISSING, UNDEFINED, CustomIssue, InvalidTypeIssue, UnsupportedIssue
from issue_explainer.types.issues import ISSUE_CLASSES, is_issue


def test_known_variants_cover_every_issue_code() -> None:
    codes = {
        cls.__dataclass_fields__["code"].default
        for cls in ISSUE_CLASSES
        if cls is not UnsupportedIssue
    }
    assert codes == ISSUE_CODES


def test_code_is_not_an_init_argument() -> None:
    with pytest.raises(TypeError):
        InvalidTypeIssue(code="custom", expected="string")  # type: ignore[call-arg]


def test_issues_are_frozen() -> None:
    issue = CustomIssue(message="nope")
    with pytest.raises(dataclasses.FrozenInstanceError):
        issue.message = "changed"  # type: ignore[misc]


def test_has_input_distinguishes_missing_from_undefined() -> None:
    assert not CustomIssue().has_input
    assert CustomIssue().input is MISSING
    assert CustomIssue(input=UNDEFINED).has_input
    assert CustomIssue(input=None).has_input


def test_is_issue() -> None:
    assert is_issue(UnsupportedIssue(code="weird"))
    assert not is_issue({"code": "custom"})
