"""Tests for union and function issue rendering."""

from __future__ import annotations

from issue_explainer.message_builder import build_message, render_issue
from issue_explainer.types import (
    CustomIssue,
    InvalidArgumentsIssue,
    InvalidReturnTypeIssue,
    InvalidTypeIssue,
    InvalidUnionIssue,
    MessageBuilderOptions,
)


def _required(path: tuple) -> CustomIssue:
    return CustomIssue(message="Required", path=path)


def test_identical_branches_render_once() -> None:
    union = InvalidUnionIssue(branches=((_required(("data",)),), (_required(("data",)),)))
    assert build_message([union]) == 'Validation error: Required at "data"'


def test_distinct_branches_join_with_union_separator(options: MessageBuilderOptions) -> None:
    union = InvalidUnionIssue(
        branches=(
            (InvalidTypeIssue(expected="string"),),
            (InvalidTypeIssue(expected="number"),),
        )
    )
    assert render_issue(union, options) == "invalid type; expected string, or invalid type; expected number"


def test_branch_issues_join_with_issue_separator(options: MessageBuilderOptions) -> None:
    union = InvalidUnionIssue(
        branches=(
            (_required(("a",)), _required(("b",))),
            (_required(("c",)),),
        )
    )
    assert render_issue(union, options) == 'Required at "a"; Required at "b", or Required at "c"'


def test_dedup_keeps_first_occurrence_order(options: MessageBuilderOptions) -> None:
    first = (CustomIssue(message="A"),)
    second = (CustomIssue(message="B"),)
    union = InvalidUnionIssue(branches=(first, second, first, second))
    assert render_issue(union, options) == "A, or B"


def test_empty_branches_fall_back_to_union_message(options: MessageBuilderOptions) -> None:
    union = InvalidUnionIssue(branches=((), ()), message="Invalid input", path=("x",))
    assert render_issue(union, options) == 'Invalid input at "x"'
    assert render_issue(InvalidUnionIssue(), options) == "invalid input"


def test_nested_union_is_expanded(options: MessageBuilderOptions) -> None:
    inner = InvalidUnionIssue(branches=((CustomIssue(message="X"),), (CustomIssue(message="Y"),)))
    outer = InvalidUnionIssue(branches=((inner,), (CustomIssue(message="Z"),)))
    assert render_issue(outer, options) == "X, or Y, or Z"


def test_custom_union_separator() -> None:
    union = InvalidUnionIssue(branches=((CustomIssue(message="A"),), (CustomIssue(message="B"),)))
    assert render_issue(union, MessageBuilderOptions(union_separator=" | ")) == "A | B"


def test_invalid_arguments_lists_nested_issues(options: MessageBuilderOptions) -> None:
    issue = InvalidArgumentsIssue(arguments_issues=(InvalidTypeIssue(expected="string", path=(0,)),))
    assert render_issue(issue, options) == 'Invalid function arguments; invalid type at "0"; expected string'


def test_invalid_return_type_uses_own_message_and_path(options: MessageBuilderOptions) -> None:
    issue = InvalidReturnTypeIssue(
        message="Invalid return",
        path=("fn",),
        return_type_issues=(CustomIssue(message="Must be positive"),),
    )
    assert render_issue(issue, options) == 'Invalid return at "fn"; Must be positive'


def test_invalid_return_type_default_message(options: MessageBuilderOptions) -> None:
    assert render_issue(InvalidReturnTypeIssue(), options) == "Invalid function return type"
