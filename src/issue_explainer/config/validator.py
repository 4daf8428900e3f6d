"""Collect-all validation of message options files."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from issue_explainer.config.diagnostics import ConfigDiagnostic
from issue_explainer.constants.config import (
    ALLOWED_OPTION_KEYS,
    ALLOWED_VALUES_DISPLAY_KEYS,
    BOOL_OPTION_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG009,
    STRING_OPTION_KEYS,
    VALID_REPORT_INPUT,
    VALUES_DISPLAY_KEYS,
)


def validate_options_file(path: Path, *, explicit: bool = False) -> list[ConfigDiagnostic]:
    """Validate an options file and return every problem found.

    Never raises. A missing file is only reported when *explicit* is set,
    since the default file is optional.
    """
    path_str = str(path)
    if not path.exists():
        if explicit:
            return [
                ConfigDiagnostic(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"options file not found: {path}",
                )
            ]
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return [ConfigDiagnostic(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}")]

    if raw is None:
        return []
    return validate_options_mapping(raw, path_str)


def validate_options_mapping(raw: Any, path_str: str) -> list[ConfigDiagnostic]:
    """Validate already-parsed options data."""
    errors: list[ConfigDiagnostic] = []
    if not isinstance(raw, dict):
        errors.append(
            ConfigDiagnostic(
                code=CFG003,
                path=path_str,
                field="",
                message=f"options must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_OPTION_KEYS:
            errors.append(
                ConfigDiagnostic(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_OPTION_KEYS),
                )
            )

    if "prefix" in raw and raw["prefix"] is not None and not isinstance(raw["prefix"], str):
        errors.append(_invalid_type(path_str, "prefix", "expected a string or null"))

    for key in sorted(STRING_OPTION_KEYS & raw.keys()):
        if not isinstance(raw[key], str):
            errors.append(_invalid_type(path_str, key, "expected a string"))

    for key in sorted(BOOL_OPTION_KEYS & raw.keys()):
        if not isinstance(raw[key], bool):
            errors.append(_invalid_type(path_str, key, "expected a boolean"))

    if "max_issues_in_message" in raw:
        errors.extend(_check_count(raw["max_issues_in_message"], path_str, "max_issues_in_message", minimum=0))

    if "report_input" in raw:
        val = raw["report_input"]
        if not isinstance(val, str) or val not in VALID_REPORT_INPUT:
            errors.append(
                ConfigDiagnostic(
                    code=CFG006,
                    path=path_str,
                    field="report_input",
                    message="invalid value for `report_input`",
                    hint=f"expected one of: {', '.join(sorted(VALID_REPORT_INPUT))}; got: {val!r}",
                )
            )

    for key in sorted(VALUES_DISPLAY_KEYS & raw.keys()):
        errors.extend(_validate_values_display(raw[key], path_str, key))

    return errors


def _validate_values_display(section: Any, path_str: str, key: str) -> list[ConfigDiagnostic]:
    if section is None:
        return []
    if not isinstance(section, dict):
        return [
            ConfigDiagnostic(
                code=CFG009,
                path=path_str,
                field=key,
                message=f"`{key}` must be a mapping",
            )
        ]

    errors: list[ConfigDiagnostic] = []
    for sub_key in sorted(str(k) for k in section):
        if sub_key not in ALLOWED_VALUES_DISPLAY_KEYS:
            errors.append(
                ConfigDiagnostic(
                    code=CFG004,
                    path=path_str,
                    field=f"{key}.{sub_key}",
                    message=f"unknown key `{key}.{sub_key}`",
                    hint=_suggest_key(sub_key, ALLOWED_VALUES_DISPLAY_KEYS),
                )
            )
    if "separator" in section and not isinstance(section["separator"], str):
        errors.append(_invalid_type(path_str, f"{key}.separator", "expected a string"))
    if "last_separator" in section:
        val = section["last_separator"]
        if val is not None and not isinstance(val, str):
            errors.append(_invalid_type(path_str, f"{key}.last_separator", "expected a string or null"))
    if "quote" in section and not isinstance(section["quote"], bool):
        errors.append(_invalid_type(path_str, f"{key}.quote", "expected a boolean"))
    if "max_to_display" in section:
        errors.extend(_check_count(section["max_to_display"], path_str, f"{key}.max_to_display", minimum=1))
    return errors


def _check_count(val: Any, path_str: str, field: str, *, minimum: int) -> list[ConfigDiagnostic]:
    if isinstance(val, bool) or not isinstance(val, int):
        return [_invalid_type(path_str, field, "expected an integer")]
    if val < minimum:
        return [
            ConfigDiagnostic(
                code=CFG007,
                path=path_str,
                field=field,
                message=f"`{field}` must be >= {minimum}, got {val}",
            )
        ]
    return []


def _invalid_type(path_str: str, field: str, hint: str) -> ConfigDiagnostic:
    return ConfigDiagnostic(
        code=CFG005,
        path=path_str,
        field=field,
        message=f"invalid type for `{field}`",
        hint=hint,
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint if a close match exists."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
