"""Tests for process-wide default options."""

from __future__ import annotations

import pytest

from issue_explainer.config import get_default_options, install_default_options, reset_default_options
from issue_explainer.message_builder import build_message
from issue_explainer.types import CustomIssue, MessageBuilderOptions


def test_builtin_defaults() -> None:
    options = get_default_options()

    assert options == MessageBuilderOptions()
    assert options.prefix == "Validation error"
    assert options.prefix_separator == ": "
    assert options.issue_separator == "; "
    assert options.union_separator == ", or "
    assert options.include_path is True
    assert options.max_issues_in_message == 99
    assert options.allowed_values.last_separator == " or "
    assert options.unrecognized_keys.last_separator == " and "
    assert options.allowed_values.max_to_display == 5
    assert options.report_input == "type"


def test_install_returns_previous_and_applies() -> None:
    custom = MessageBuilderOptions(prefix="Input")
    previous = install_default_options(custom)

    assert previous == MessageBuilderOptions()
    assert get_default_options() is custom
    assert build_message([CustomIssue(message="x")]) == "Input: x"


def test_reset_restores_builtin_defaults() -> None:
    install_default_options(MessageBuilderOptions(prefix=None))
    reset_default_options()
    assert get_default_options() == MessageBuilderOptions()


def test_install_rejects_other_types() -> None:
    with pytest.raises(TypeError, match="MessageBuilderOptions"):
        install_default_options({"prefix": None})  # type: ignore[arg-type]
