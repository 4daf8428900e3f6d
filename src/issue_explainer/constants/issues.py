"""Issue codes, origins and fixed fallback texts."""

from __future__ import annotations

ISSUE_CODES: frozenset[str] = frozenset(
    {
        "invalid_type",
        "too_big",
        "too_small",
        "invalid_format",
        "invalid_value",
        "unrecognized_keys",
        "not_multiple_of",
        "invalid_element",
        "invalid_key",
        "invalid_union",
        "invalid_arguments",
        "invalid_return_type",
        "custom",
    }
)

NUMERIC_ORIGINS: frozenset[str] = frozenset({"number", "int", "bigint"})
COLLECTION_ORIGINS: frozenset[str] = frozenset({"array", "set"})

NOT_SUPPORTED_MESSAGE: str = "Not supported issue type"
CUSTOM_ISSUE_CLAIM: str = "invalid input"
INVALID_ARGUMENTS_MESSAGE: str = "Invalid function arguments"
INVALID_RETURN_TYPE_MESSAGE: str = "Invalid function return type"
INTERSECTION_MESSAGE: str = "Intersection results could not be merged"
