"""Tests for the ValidationError and IssueTree exceptions."""

from __future__ import annotations

import copy
import pickle

import pytest

from issue_explainer.exceptions import ExplainerError, IssueTree, ValidationError
from issue_explainer.types import MISSING, CustomIssue


def test_validation_error_basics() -> None:
    err = ValidationError("Validation error: boom")

    assert str(err) == "Validation error: boom"
    assert err.message == "Validation error: boom"
    assert err.details == ()
    assert err.cause is None
    assert err.name == "IssueValidationError"
    assert ValidationError.name == "IssueValidationError"
    assert isinstance(err, ExplainerError)
    assert isinstance(err, ValueError)


def test_exception_cause_is_chained() -> None:
    cause = RuntimeError("upstream")
    err = ValidationError("wrapped", cause=cause)

    assert err.cause is cause
    assert err.__cause__ is cause


def test_details_come_from_issue_tree_cause() -> None:
    issues = (CustomIssue(message="a"), CustomIssue(message="a"))
    err = ValidationError("msg", cause=IssueTree(issues))

    assert err.details == issues


def test_details_empty_for_non_tree_cause() -> None:
    assert ValidationError("msg", cause={"unrelated": True}).details == ()


def test_explicit_details_win() -> None:
    issue = CustomIssue(message="x")
    err = ValidationError("msg", cause=RuntimeError("r"), details=[issue])
    assert err.details == (issue,)


def test_fields_are_read_only() -> None:
    err = ValidationError("msg")
    with pytest.raises(AttributeError):
        err.message = "changed"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        err.details = ()  # type: ignore[misc]


def test_can_be_raised_and_caught_as_value_error() -> None:
    with pytest.raises(ValueError, match="boom"):
        raise ValidationError("boom")


def test_issue_tree_exposes_name_and_issues() -> None:
    issue = CustomIssue(message="x")
    tree = IssueTree([issue], "tree message")

    assert tree.name == "IssueTree"
    assert tree.issues == (issue,)
    assert tree.message == "tree message"
    assert str(tree) == "tree message"


def test_pickle_keeps_cause_and_details() -> None:
    issue = CustomIssue(message="bad", path=("a",))
    err = ValidationError("Validation error: bad", cause=IssueTree([issue]), details=(issue,))

    restored = pickle.loads(pickle.dumps(err))

    assert type(restored) is ValidationError
    assert restored.message == "Validation error: bad"
    assert restored.details == (issue,)
    assert isinstance(restored.cause, IssueTree)
    assert restored.cause.issues == (issue,)
    assert restored.details[0].input is MISSING


def test_copy_keeps_exception_cause() -> None:
    cause = RuntimeError("upstream")
    err = ValidationError("upstream", cause=cause, details=(CustomIssue(),))

    clone = copy.copy(err)

    assert clone.cause is cause
    assert clone.__cause__ is cause
    assert clone.details == err.details


def test_issue_tree_pickles_with_message() -> None:
    tree = IssueTree([CustomIssue(message="x")], message="boom")
    restored = pickle.loads(pickle.dumps(tree))
    assert restored.issues == tree.issues
    assert restored.message == "boom"
