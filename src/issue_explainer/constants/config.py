"""Options file name, allowed keys and stable diagnostic codes."""

from __future__ import annotations

CONFIG_FILENAME: str = "issue-explainer.yaml"

CFG001: str = "CFG001"  # options file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG009: str = "CFG009"  # invalid nested mapping

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG009,
)

STRING_OPTION_KEYS: frozenset[str] = frozenset(
    {"prefix_separator", "issue_separator", "union_separator"}
)
BOOL_OPTION_KEYS: frozenset[str] = frozenset(
    {"include_path", "display_invalid_format_details", "number_localization", "date_localization"}
)
VALUES_DISPLAY_KEYS: frozenset[str] = frozenset({"allowed_values", "unrecognized_keys"})

ALLOWED_OPTION_KEYS: frozenset[str] = frozenset(
    {"prefix", "max_issues_in_message", "report_input"}
    | STRING_OPTION_KEYS
    | BOOL_OPTION_KEYS
    | VALUES_DISPLAY_KEYS
)

ALLOWED_VALUES_DISPLAY_KEYS: frozenset[str] = frozenset(
    {"separator", "last_separator", "quote", "max_to_display"}
)

VALID_REPORT_INPUT: frozenset[str] = frozenset({"none", "type", "type_and_value"})
