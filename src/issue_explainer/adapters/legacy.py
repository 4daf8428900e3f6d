"""Adapter for the legacy (v3) upstream issue shape."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from issue_explainer.adapters.base import IssueSchemaAdapter
from issue_explainer.adapters.current import is_engine_envelope
from issue_explainer.adapters.fields import as_tuple, common_fields, is_sequence, read_field, tree_issues
from issue_explainer.constants.adapters import LEGACY_VALUE_CODES
from issue_explainer.constants.issues import INTERSECTION_MESSAGE
from issue_explainer.types.common import MISSING
from issue_explainer.types.issues import (
    CustomIssue,
    InvalidArgumentsIssue,
    InvalidFormatIssue,
    InvalidReturnTypeIssue,
    InvalidTypeIssue,
    InvalidUnionIssue,
    InvalidValueIssue,
    Issue,
    NotMultipleOfIssue,
    TooBigIssue,
    TooSmallIssue,
    UnrecognizedKeysIssue,
    UnsupportedIssue,
)

logger = logging.getLogger(__name__)

_STRING_VALIDATION_FORMATS: dict[str, str] = {
    "includes": "includes",
    "startsWith": "starts_with",
    "endsWith": "ends_with",
}


class LegacyIssueAdapter(IssueSchemaAdapter):
    """Normalize v3 issues: ``type`` on bounds, nested error trees on unions."""

    name = "legacy"

    def matches(self, tree: object) -> bool:
        return is_engine_envelope(tree)

    def to_issues(self, tree: object) -> tuple[Issue, ...]:
        return _convert_tree(tree)


def _convert_tree(tree: object) -> tuple[Issue, ...]:
    if is_sequence(tree):
        return tuple(convert_legacy_issue(raw) for raw in tree)
    return tuple(convert_legacy_issue(raw) for raw in tree_issues(tree) or ())


def convert_legacy_issue(raw: object) -> Issue:
    """Convert one v3 issue, recursing into union and function error trees."""
    code = read_field(raw, "code")
    base = common_fields(raw)

    if code == "invalid_type":
        return InvalidTypeIssue(
            expected=str(read_field(raw, "expected", "unknown")),
            received=read_field(raw, "received"),
            **base,
        )
    if code in LEGACY_VALUE_CODES:
        if base["input"] is MISSING and code == "invalid_enum_value":
            base["input"] = read_field(raw, "received", MISSING)
        if code == "invalid_literal":
            values: tuple[Any, ...] = (read_field(raw, "expected"),)
        else:
            values = as_tuple(read_field(raw, "options"))
        return InvalidValueIssue(values=values, **base)
    if code == "invalid_string":
        return _convert_string_issue(raw, base)
    if code == "invalid_date":
        return InvalidTypeIssue(expected="date", received="invalid date", **base)
    if code == "not_finite":
        return InvalidTypeIssue(expected="finite number", received="number", **base)
    if code == "invalid_intersection_types":
        base["message"] = base["message"] or INTERSECTION_MESSAGE
        return CustomIssue(**base)
    if code == "too_big":
        return TooBigIssue(
            maximum=read_field(raw, "maximum"),
            origin=read_field(raw, "type") or "number",
            inclusive=bool(read_field(raw, "inclusive", True)),
            exact=bool(read_field(raw, "exact", False)),
            **base,
        )
    if code == "too_small":
        return TooSmallIssue(
            minimum=read_field(raw, "minimum"),
            origin=read_field(raw, "type") or "number",
            inclusive=bool(read_field(raw, "inclusive", True)),
            exact=bool(read_field(raw, "exact", False)),
            **base,
        )
    if code == "not_multiple_of":
        return NotMultipleOfIssue(divisor=read_field(raw, "multipleOf", read_field(raw, "divisor")), **base)
    if code == "unrecognized_keys":
        return UnrecognizedKeysIssue(keys=tuple(str(key) for key in as_tuple(read_field(raw, "keys"))), **base)
    if code == "invalid_union":
        branches = tuple(_convert_tree(branch) for branch in as_tuple(read_field(raw, "unionErrors")))
        return InvalidUnionIssue(branches=branches, **base)
    if code == "invalid_arguments":
        return InvalidArgumentsIssue(arguments_issues=_convert_tree(read_field(raw, "argumentsError")), **base)
    if code == "invalid_return_type":
        return InvalidReturnTypeIssue(return_type_issues=_convert_tree(read_field(raw, "returnTypeError")), **base)
    if code == "custom":
        return CustomIssue(params=read_field(raw, "params"), **base)

    logger.debug("Unsupported issue code %r", code)
    return UnsupportedIssue(code=str(code), **base)


def _convert_string_issue(raw: object, base: dict[str, Any]) -> InvalidFormatIssue:
    validation = read_field(raw, "validation")
    if isinstance(validation, Mapping):
        for key, fmt in _STRING_VALIDATION_FORMATS.items():
            if key in validation:
                value = validation[key]
                return InvalidFormatIssue(
                    format=fmt,
                    prefix=value if fmt == "starts_with" else None,
                    suffix=value if fmt == "ends_with" else None,
                    includes=value if fmt == "includes" else None,
                    **base,
                )
        return InvalidFormatIssue(format="string", **base)
    return InvalidFormatIssue(format=str(validation or "string"), **base)
