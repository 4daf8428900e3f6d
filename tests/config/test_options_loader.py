"""Tests for loading message options from YAML."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from issue_explainer.config import load_options
from issue_explainer.exceptions import ConfigError
from issue_explainer.types import MessageBuilderOptions, ValuesDisplayOptions


def test_missing_default_file_yields_defaults(tmp_path: Path) -> None:
    assert load_options(root=tmp_path) == MessageBuilderOptions()


def test_default_file_is_read_from_root(tmp_path: Path) -> None:
    (tmp_path / "issue-explainer.yaml").write_text("prefix: Bad input\n", encoding="utf-8")
    assert load_options(root=tmp_path).prefix == "Bad input"


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_options(tmp_path / "nope.yaml")


def test_invalid_yaml_raises_with_chained_cause(tmp_path: Path) -> None:
    path = tmp_path / "opts.yaml"
    path.write_text("prefix: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML") as excinfo:
        load_options(path)
    assert excinfo.value.__cause__ is not None


def test_invalid_values_raise_formatted_diagnostics(tmp_path: Path) -> None:
    path = tmp_path / "opts.yaml"
    path.write_text("report_input: all\n", encoding="utf-8")

    with pytest.raises(ConfigError, match=r"\[CFG006\]"):
        load_options(path)


def test_empty_file_warns_and_yields_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "opts.yaml"
    path.write_text("", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert load_options(path) == MessageBuilderOptions()
    assert "is empty" in caplog.text


def test_full_options_file(tmp_path: Path) -> None:
    path = tmp_path / "opts.yaml"
    path.write_text(
        "prefix: null\n"
        "prefix_separator: ' - '\n"
        "issue_separator: ' | '\n"
        "union_separator: ' / '\n"
        "include_path: false\n"
        "max_issues_in_message: 3\n"
        "display_invalid_format_details: true\n"
        "report_input: none\n"
        "number_localization: false\n"
        "date_localization: false\n"
        "allowed_values:\n"
        "  separator: '; '\n"
        "  last_separator: null\n"
        "  quote: false\n"
        "  max_to_display: 2\n"
        "unrecognized_keys:\n"
        "  max_to_display: 10\n",
        encoding="utf-8",
    )
    options = load_options(path)

    assert options.prefix is None
    assert options.prefix_separator == " - "
    assert options.issue_separator == " | "
    assert options.union_separator == " / "
    assert options.include_path is False
    assert options.max_issues_in_message == 3
    assert options.display_invalid_format_details is True
    assert options.report_input == "none"
    assert options.number_localization is False
    assert options.date_localization is False
    assert options.allowed_values == ValuesDisplayOptions(separator="; ", last_separator=None, quote=False, max_to_display=2)
    assert options.unrecognized_keys == ValuesDisplayOptions(
        separator=", ", last_separator=" and ", quote=True, max_to_display=10
    )
    assert options.error_map is None
