"""Adapter for the current (v4) upstream issue shape."""

from __future__ import annotations

import logging
from typing import Any

from issue_explainer.adapters.base import IssueSchemaAdapter
from issue_explainer.adapters.fields import (
    as_tuple,
    common_fields,
    has_field,
    is_sequence,
    read_field,
    tree_issues,
)
from issue_explainer.constants.adapters import CURRENT_ONLY_CODES, CURRENT_ONLY_FIELDS, ENGINE_TREE_NAMES
from issue_explainer.types.issues import (
    CustomIssue,
    InvalidElementIssue,
    InvalidFormatIssue,
    InvalidKeyIssue,
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


def is_engine_envelope(tree: object) -> bool:
    """Return whether *tree* carries an engine error ``name`` and an ``issues`` list."""
    return read_field(tree, "name") in ENGINE_TREE_NAMES and tree_issues(tree) is not None


def has_current_markers(issues: Any) -> bool:
    """Return whether any issue shows a field or code only the v4 shape uses."""
    for raw in issues:
        code = read_field(raw, "code")
        if code in CURRENT_ONLY_CODES or any(has_field(raw, name) for name in CURRENT_ONLY_FIELDS):
            return True
        if code == "invalid_union" and has_field(raw, "errors"):
            return True
    return False


class CurrentIssueAdapter(IssueSchemaAdapter):
    """Normalize v4 issues: ``origin`` on bounds, ``errors`` on unions."""

    name = "current"

    def matches(self, tree: object) -> bool:
        return is_engine_envelope(tree) and has_current_markers(tree_issues(tree) or ())

    def to_issues(self, tree: object) -> tuple[Issue, ...]:
        return tuple(convert_current_issue(raw) for raw in tree_issues(tree) or ())


def convert_current_issue(raw: object) -> Issue:
    """Convert one v4 issue, recursing into union branches."""
    code = read_field(raw, "code")
    base = common_fields(raw)

    if code == "invalid_type":
        return InvalidTypeIssue(
            expected=str(read_field(raw, "expected", "unknown")),
            received=read_field(raw, "received"),
            **base,
        )
    if code == "too_big":
        return TooBigIssue(
            maximum=read_field(raw, "maximum"),
            origin=read_field(raw, "origin") or "number",
            inclusive=bool(read_field(raw, "inclusive", True)),
            exact=bool(read_field(raw, "exact", False)),
            **base,
        )
    if code == "too_small":
        return TooSmallIssue(
            minimum=read_field(raw, "minimum"),
            origin=read_field(raw, "origin") or "number",
            inclusive=bool(read_field(raw, "inclusive", True)),
            exact=bool(read_field(raw, "exact", False)),
            **base,
        )
    if code == "invalid_format":
        return InvalidFormatIssue(
            format=str(read_field(raw, "format", "")),
            prefix=read_field(raw, "prefix"),
            suffix=read_field(raw, "suffix"),
            includes=read_field(raw, "includes"),
            pattern=_pattern_text(read_field(raw, "pattern")),
            algorithm=read_field(raw, "algorithm"),
            **base,
        )
    if code == "invalid_value":
        return InvalidValueIssue(values=as_tuple(read_field(raw, "values")), **base)
    if code == "unrecognized_keys":
        return UnrecognizedKeysIssue(keys=tuple(str(key) for key in as_tuple(read_field(raw, "keys"))), **base)
    if code == "not_multiple_of":
        return NotMultipleOfIssue(divisor=read_field(raw, "divisor"), **base)
    if code == "invalid_element":
        return InvalidElementIssue(origin=read_field(raw, "origin") or "set", **base)
    if code == "invalid_key":
        return InvalidKeyIssue(origin=read_field(raw, "origin") or "record", **base)
    if code == "invalid_union":
        branches = tuple(
            tuple(convert_current_issue(sub) for sub in branch)
            for branch in as_tuple(read_field(raw, "errors"))
            if is_sequence(branch)
        )
        return InvalidUnionIssue(branches=branches, **base)
    if code == "custom":
        return CustomIssue(params=read_field(raw, "params"), **base)

    logger.debug("Unsupported issue code %r", code)
    return UnsupportedIssue(code=str(code), **base)


def _pattern_text(pattern: object) -> str | None:
    if pattern is None:
        return None
    source = getattr(pattern, "pattern", None)
    return source if isinstance(source, str) else str(pattern)
