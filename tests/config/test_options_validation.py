"""Tests for collect-all options file validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from issue_explainer.config import ConfigDiagnostic, format_diagnostics, sort_diagnostics, validate_options_file
from issue_explainer.config.validator import _suggest_key
from issue_explainer.constants.config import (
    ALLOWED_OPTION_KEYS,
    ALL_CFG_CODES,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG009,
)


def _write_options(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "issue-explainer.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def _codes(diagnostics: list[ConfigDiagnostic]) -> list[str]:
    return [d.code for d in diagnostics]


def test_valid_file_has_no_diagnostics(tmp_path: Path) -> None:
    path = _write_options(
        tmp_path,
        "prefix: Input error\n"
        "issue_separator: ' | '\n"
        "include_path: false\n"
        "max_issues_in_message: 10\n"
        "report_input: type_and_value\n"
        "allowed_values:\n"
        "  last_separator: ' or '\n"
        "  max_to_display: 3\n",
    )
    assert validate_options_file(path) == []


def test_missing_file_only_reported_when_explicit(tmp_path: Path) -> None:
    path = tmp_path / "missing.yaml"
    assert validate_options_file(path) == []
    assert _codes(validate_options_file(path, explicit=True)) == [CFG001]


def test_empty_file_is_valid(tmp_path: Path) -> None:
    assert validate_options_file(_write_options(tmp_path, "")) == []


def test_invalid_yaml(tmp_path: Path) -> None:
    assert _codes(validate_options_file(_write_options(tmp_path, "prefix: [unclosed\n"))) == [CFG002]


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    diagnostics = validate_options_file(_write_options(tmp_path, "- a\n- b\n"))
    assert _codes(diagnostics) == [CFG003]
    assert "got list" in diagnostics[0].message


def test_unknown_key_with_suggestion(tmp_path: Path) -> None:
    (diagnostic,) = validate_options_file(_write_options(tmp_path, "prefx: Oops\n"))

    assert diagnostic.code == CFG004
    assert diagnostic.field == "prefx"
    assert diagnostic.hint == "did you mean `prefix`?"


@pytest.mark.parametrize(
    ("content", "field"),
    [
        ("prefix: 3\n", "prefix"),
        ("issue_separator: 1\n", "issue_separator"),
        ("include_path: 'yes'\n", "include_path"),
        ("max_issues_in_message: true\n", "max_issues_in_message"),
        ("max_issues_in_message: '5'\n", "max_issues_in_message"),
        ("allowed_values:\n  quote: 1\n", "allowed_values.quote"),
        ("unrecognized_keys:\n  last_separator: 4\n", "unrecognized_keys.last_separator"),
    ],
)
def test_invalid_types(tmp_path: Path, content: str, field: str) -> None:
    (diagnostic,) = validate_options_file(_write_options(tmp_path, content))

    assert diagnostic.code == CFG005
    assert diagnostic.field == field


def test_null_prefix_is_allowed(tmp_path: Path) -> None:
    assert validate_options_file(_write_options(tmp_path, "prefix: null\n")) == []


def test_invalid_report_input(tmp_path: Path) -> None:
    (diagnostic,) = validate_options_file(_write_options(tmp_path, "report_input: everything\n"))

    assert diagnostic.code == CFG006
    assert "type_and_value" in diagnostic.hint


@pytest.mark.parametrize(
    ("content", "field"),
    [
        ("max_issues_in_message: -1\n", "max_issues_in_message"),
        ("allowed_values:\n  max_to_display: 0\n", "allowed_values.max_to_display"),
    ],
)
def test_out_of_range(tmp_path: Path, content: str, field: str) -> None:
    (diagnostic,) = validate_options_file(_write_options(tmp_path, content))

    assert diagnostic.code == CFG007
    assert diagnostic.field == field


def test_nested_section_must_be_mapping(tmp_path: Path) -> None:
    assert _codes(validate_options_file(_write_options(tmp_path, "allowed_values: 3\n"))) == [CFG009]


def test_unknown_nested_key(tmp_path: Path) -> None:
    (diagnostic,) = validate_options_file(_write_options(tmp_path, "unrecognized_keys:\n  seperator: ', '\n"))

    assert diagnostic.code == CFG004
    assert diagnostic.field == "unrecognized_keys.seperator"
    assert diagnostic.hint == "did you mean `separator`?"


def test_collects_every_problem(tmp_path: Path) -> None:
    path = _write_options(tmp_path, "prefx: a\nreport_input: all\nmax_issues_in_message: -3\n")
    assert sorted(_codes(validate_options_file(path))) == [CFG004, CFG006, CFG007]


def test_suggest_key_without_close_match() -> None:
    assert _suggest_key("zzzz", ALLOWED_OPTION_KEYS) == ""


def test_diagnostic_format_and_ordering() -> None:
    first = ConfigDiagnostic(code=CFG005, path="a.yaml", field="prefix", message="invalid type", hint="expected a string")
    second = ConfigDiagnostic(code=CFG004, path="a.yaml", field="", message="unknown key `x`")

    assert first.format() == "[CFG005] a.yaml prefix invalid type (expected a string)"
    assert second.format() == "[CFG004] a.yaml unknown key `x`"
    assert sort_diagnostics([first, second]) == [second, first]
    assert format_diagnostics([first, second]).splitlines() == [second.format(), first.format()]


def test_diagnostic_codes_are_unique_and_stable() -> None:
    assert len(set(ALL_CFG_CODES)) == len(ALL_CFG_CODES)
    assert all(code.startswith("CFG") and len(code) == 6 for code in ALL_CFG_CODES)
