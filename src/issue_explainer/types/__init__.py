"""Shared types for issue_explainer."""

from .common import MISSING, UNDEFINED, IssuePath, JsonScalar, JsonValue, PathKey, Primitive, ReportInput, Symbol
from .issues import (
    CustomIssue,
    InvalidArgumentsIssue,
    InvalidElementIssue,
    InvalidFormatIssue,
    InvalidKeyIssue,
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
    is_issue,
)
from .options import ErrorMap, MessageBuilderOptions, ValuesDisplayOptions

__all__ = [
    "MISSING",
    "UNDEFINED",
    "CustomIssue",
    "ErrorMap",
    "InvalidArgumentsIssue",
    "InvalidElementIssue",
    "InvalidFormatIssue",
    "InvalidKeyIssue",
    "InvalidReturnTypeIssue",
    "InvalidTypeIssue",
    "InvalidUnionIssue",
    "InvalidValueIssue",
    "Issue",
    "IssuePath",
    "JsonScalar",
    "JsonValue",
    "MessageBuilderOptions",
    "NotMultipleOfIssue",
    "PathKey",
    "Primitive",
    "ReportInput",
    "Symbol",
    "TooBigIssue",
    "TooSmallIssue",
    "UnrecognizedKeysIssue",
    "UnsupportedIssue",
    "ValuesDisplayOptions",
    "is_issue",
]
