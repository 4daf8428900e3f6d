"""Defaults for compiled diagnostic messages."""

from __future__ import annotations

DEFAULT_PREFIX: str = "Validation error"
DEFAULT_PREFIX_SEPARATOR: str = ": "
DEFAULT_ISSUE_SEPARATOR: str = "; "
DEFAULT_UNION_SEPARATOR: str = ", or "
DEFAULT_MAX_ISSUES_IN_MESSAGE: int = 99

DEFAULT_VALUES_SEPARATOR: str = ", "
DEFAULT_VALUES_LAST_SEPARATOR: str = " or "
DEFAULT_KEYS_SEPARATOR: str = ", "
DEFAULT_KEYS_LAST_SEPARATOR: str = " and "
DEFAULT_MAX_VALUES_TO_DISPLAY: int = 5

DETAILS_SEPARATOR: str = "; "
FRAGMENT_SEPARATOR: str = ", "

UNKNOWN_ERROR_MESSAGE: str = "Unknown error"

VALIDATION_ERROR_NAME: str = "IssueValidationError"
ISSUE_TREE_NAME: str = "IssueTree"
