"""Typed options controlling how issue messages are compiled."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from issue_explainer.constants.messages import (
    DEFAULT_ISSUE_SEPARATOR,
    DEFAULT_KEYS_LAST_SEPARATOR,
    DEFAULT_KEYS_SEPARATOR,
    DEFAULT_MAX_ISSUES_IN_MESSAGE,
    DEFAULT_MAX_VALUES_TO_DISPLAY,
    DEFAULT_PREFIX,
    DEFAULT_PREFIX_SEPARATOR,
    DEFAULT_UNION_SEPARATOR,
    DEFAULT_VALUES_LAST_SEPARATOR,
    DEFAULT_VALUES_SEPARATOR,
)
from issue_explainer.types.common import ReportInput
from issue_explainer.types.issues import Issue

ErrorMap: TypeAlias = Callable[[Issue], str]


@dataclass(frozen=True)
class ValuesDisplayOptions:
    """How a list of values or keys is joined for display."""

    separator: str = DEFAULT_VALUES_SEPARATOR
    last_separator: str | None = DEFAULT_VALUES_LAST_SEPARATOR
    quote: bool = True
    max_to_display: int = DEFAULT_MAX_VALUES_TO_DISPLAY


def _default_keys_display() -> ValuesDisplayOptions:
    return ValuesDisplayOptions(
        separator=DEFAULT_KEYS_SEPARATOR,
        last_separator=DEFAULT_KEYS_LAST_SEPARATOR,
    )


@dataclass(frozen=True)
class MessageBuilderOptions:
    """Immutable settings for :class:`~issue_explainer.message_builder.MessageBuilder`.

    ``prefix=None`` disables prefixing. ``error_map`` replaces the built-in
    per-issue renderer entirely when set.
    """

    prefix: str | None = DEFAULT_PREFIX
    prefix_separator: str = DEFAULT_PREFIX_SEPARATOR
    issue_separator: str = DEFAULT_ISSUE_SEPARATOR
    union_separator: str = DEFAULT_UNION_SEPARATOR
    include_path: bool = True
    max_issues_in_message: int = DEFAULT_MAX_ISSUES_IN_MESSAGE
    allowed_values: ValuesDisplayOptions = field(default_factory=ValuesDisplayOptions)
    unrecognized_keys: ValuesDisplayOptions = field(default_factory=_default_keys_display)
    display_invalid_format_details: bool = False
    report_input: ReportInput = "type"
    number_localization: bool = True
    date_localization: bool = True
    error_map: ErrorMap | None = None
