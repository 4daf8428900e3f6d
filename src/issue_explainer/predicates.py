"""Type predicates for validation errors and issue trees."""

from __future__ import annotations

from issue_explainer.adapters.registry import select_adapter
from issue_explainer.constants.messages import VALIDATION_ERROR_NAME
from issue_explainer.exceptions.validation import ValidationError


def is_validation_error(value: object) -> bool:
    """Return whether *value* is a :class:`ValidationError` of this package."""
    return isinstance(value, ValidationError)


def is_validation_error_like(value: object) -> bool:
    """Return whether *value* is an exception named like a :class:`ValidationError`.

    Matches instances created by another copy or version of this package,
    where ``isinstance`` would fail.
    """
    return isinstance(value, BaseException) and getattr(value, "name", None) == VALIDATION_ERROR_NAME


def is_issue_tree_like(value: object) -> bool:
    """Return whether some adapter recognizes *value* as an issue tree."""
    return select_adapter(value) is not None
