"""Adapter for ``jsonschema`` validation errors.

Each :class:`jsonschema.exceptions.ValidationError` is mapped by its failing
keyword (``error.validator``) using the keyword value, the offending
instance and the absolute instance path.
"""

from __future__ import annotations

import ast
import logging
import re
from collections.abc import Mapping
from typing import Any

from jsonschema.exceptions import ValidationError as SchemaValidationError

from issue_explainer.adapters.base import IssueSchemaAdapter
from issue_explainer.adapters.fields import is_sequence
from issue_explainer.constants.adapters import JSONSCHEMA_FORMAT_NAMES
from issue_explainer.types.common import UNDEFINED
from issue_explainer.types.issues import (
    CustomIssue,
    InvalidFormatIssue,
    InvalidTypeIssue,
    InvalidUnionIssue,
    InvalidValueIssue,
    Issue,
    NotMultipleOfIssue,
    TooBigIssue,
    TooSmallIssue,
    UnrecognizedKeysIssue,
)

logger = logging.getLogger(__name__)

_REQUIRED_SUFFIX: str = " is a required property"

_LOWER_BOUNDS: dict[str, str] = {"minimum": "number", "minLength": "string", "minItems": "array"}
_UPPER_BOUNDS: dict[str, str] = {"maximum": "number", "maxLength": "string", "maxItems": "array"}


class JsonSchemaAdapter(IssueSchemaAdapter):
    """Normalize one ``jsonschema`` error or a non-empty list of them."""

    name = "jsonschema"

    def matches(self, tree: object) -> bool:
        if isinstance(tree, SchemaValidationError):
            return True
        return (
            is_sequence(tree)
            and len(tree) > 0
            and all(isinstance(error, SchemaValidationError) for error in tree)
        )

    def to_issues(self, tree: object) -> tuple[Issue, ...]:
        errors = [tree] if isinstance(tree, SchemaValidationError) else list(tree)
        return tuple(convert_schema_error(error) for error in errors)


def convert_schema_error(error: SchemaValidationError) -> Issue:
    """Convert one ``jsonschema`` error into an issue."""
    keyword = error.validator
    value = error.validator_value
    schema = error.schema if isinstance(error.schema, Mapping) else {}
    base: dict[str, Any] = {
        "path": tuple(error.absolute_path),
        "message": error.message,
        "input": error.instance,
    }

    if keyword == "type":
        return InvalidTypeIssue(expected=_type_text(value), **base)
    if keyword == "required":
        return _required_issue(error, schema, base)
    if keyword == "enum":
        return InvalidValueIssue(values=tuple(value), **base)
    if keyword == "const":
        return InvalidValueIssue(values=(value,), **base)
    if keyword in _LOWER_BOUNDS:
        inclusive = not (keyword == "minimum" and schema.get("exclusiveMinimum") is True)
        return TooSmallIssue(minimum=value, origin=_LOWER_BOUNDS[keyword], inclusive=inclusive, **base)
    if keyword in _UPPER_BOUNDS:
        inclusive = not (keyword == "maximum" and schema.get("exclusiveMaximum") is True)
        return TooBigIssue(maximum=value, origin=_UPPER_BOUNDS[keyword], inclusive=inclusive, **base)
    if keyword == "exclusiveMinimum":
        return TooSmallIssue(minimum=value, origin="number", inclusive=False, **base)
    if keyword == "exclusiveMaximum":
        return TooBigIssue(maximum=value, origin="number", inclusive=False, **base)
    if keyword == "multipleOf":
        return NotMultipleOfIssue(divisor=value, **base)
    if keyword == "pattern":
        return InvalidFormatIssue(format="regex", pattern=value, **base)
    if keyword == "format":
        return InvalidFormatIssue(format=JSONSCHEMA_FORMAT_NAMES.get(value, value), **base)
    if keyword == "additionalProperties" and isinstance(error.instance, Mapping):
        return UnrecognizedKeysIssue(keys=_extra_keys(error.instance, schema), **base)
    if keyword in ("anyOf", "oneOf") and error.context:
        return InvalidUnionIssue(branches=_group_branches(error.context), **base)

    logger.debug("No issue mapping for jsonschema keyword %r", keyword)
    return CustomIssue(params={"validator": keyword}, **base)


def _type_text(value: object) -> str:
    if is_sequence(value):
        return " or ".join(str(item) for item in value)
    return str(value)


def _required_issue(error: SchemaValidationError, schema: Mapping[str, Any], base: dict[str, Any]) -> Issue:
    message = error.message
    if not message.endswith(_REQUIRED_SUFFIX):
        return CustomIssue(params={"validator": "required"}, **base)
    try:
        missing = ast.literal_eval(message[: -len(_REQUIRED_SUFFIX)])
    except (ValueError, SyntaxError):
        return CustomIssue(params={"validator": "required"}, **base)

    properties = schema.get("properties")
    declared = properties.get(missing) if isinstance(properties, Mapping) else None
    expected = declared.get("type") if isinstance(declared, Mapping) else None
    return InvalidTypeIssue(
        expected=_type_text(expected) if expected else "value",
        path=(*base["path"], missing),
        message=message,
        input=UNDEFINED,
    )


def _extra_keys(instance: Mapping[str, Any], schema: Mapping[str, Any]) -> tuple[str, ...]:
    properties = schema.get("properties") or {}
    patterns = list(schema.get("patternProperties") or {})
    return tuple(
        key
        for key in instance
        if key not in properties and not any(re.search(pattern, key) for pattern in patterns)
    )


def _group_branches(context: list[SchemaValidationError]) -> tuple[tuple[Issue, ...], ...]:
    grouped: dict[Any, list[Issue]] = {}
    for sub_error in context:
        branch = sub_error.relative_schema_path[0] if sub_error.relative_schema_path else 0
        grouped.setdefault(branch, []).append(convert_schema_error(sub_error))
    return tuple(tuple(issues) for _, issues in sorted(grouped.items(), key=lambda item: item[0]))
