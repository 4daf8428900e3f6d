"""Normalized issue variants consumed by the message compiler.

Every upstream issue shape is converted by an adapter into exactly one of the
frozen dataclasses below. The set is closed: code that dispatches on issues
handles each variant explicitly and routes anything else to the fallback arm.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal, TypeAlias

from issue_explainer.types.common import MISSING, IssuePath, Primitive

Bound: TypeAlias = int | float | date | str


@dataclass(frozen=True, kw_only=True)
class _IssueBase:
    """Fields shared by every issue variant."""

    path: IssuePath = ()
    message: str = ""
    input: Any = MISSING

    @property
    def has_input(self) -> bool:
        """Whether the offending input value is attached to the issue."""
        return self.input is not MISSING


@dataclass(frozen=True, kw_only=True)
class InvalidTypeIssue(_IssueBase):
    """Value has the wrong runtime type."""

    code: Literal["invalid_type"] = field(default="invalid_type", init=False)
    expected: str
    received: str | None = None


@dataclass(frozen=True, kw_only=True)
class TooBigIssue(_IssueBase):
    """Value, length or size exceeds an upper bound."""

    code: Literal["too_big"] = field(default="too_big", init=False)
    maximum: Bound
    origin: str = "number"
    inclusive: bool = True
    exact: bool = False


@dataclass(frozen=True, kw_only=True)
class TooSmallIssue(_IssueBase):
    """Value, length or size is under a lower bound."""

    code: Literal["too_small"] = field(default="too_small", init=False)
    minimum: Bound
    origin: str = "number"
    inclusive: bool = True
    exact: bool = False


@dataclass(frozen=True, kw_only=True)
class InvalidFormatIssue(_IssueBase):
    """String does not satisfy a named format."""

    code: Literal["invalid_format"] = field(default="invalid_format", init=False)
    format: str
    prefix: str | None = None
    suffix: str | None = None
    includes: str | None = None
    pattern: str | None = None
    algorithm: str | None = None


@dataclass(frozen=True, kw_only=True)
class InvalidValueIssue(_IssueBase):
    """Value is not one of the allowed literals."""

    code: Literal["invalid_value"] = field(default="invalid_value", init=False)
    values: tuple[Primitive, ...] = ()


@dataclass(frozen=True, kw_only=True)
class UnrecognizedKeysIssue(_IssueBase):
    """Object carries keys the schema does not declare."""

    code: Literal["unrecognized_keys"] = field(default="unrecognized_keys", init=False)
    keys: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class NotMultipleOfIssue(_IssueBase):
    """Number is not a multiple of the required divisor."""

    code: Literal["not_multiple_of"] = field(default="not_multiple_of", init=False)
    divisor: int | float


@dataclass(frozen=True, kw_only=True)
class InvalidElementIssue(_IssueBase):
    """An element of a map or set failed validation."""

    code: Literal["invalid_element"] = field(default="invalid_element", init=False)
    origin: str = "set"


@dataclass(frozen=True, kw_only=True)
class InvalidKeyIssue(_IssueBase):
    """A key of a map or record failed validation."""

    code: Literal["invalid_key"] = field(default="invalid_key", init=False)
    origin: str = "record"


@dataclass(frozen=True, kw_only=True)
class InvalidUnionIssue(_IssueBase):
    """No alternative of a union matched; one issue group per branch."""

    code: Literal["invalid_union"] = field(default="invalid_union", init=False)
    branches: tuple[tuple[Issue, ...], ...] = ()


@dataclass(frozen=True, kw_only=True)
class InvalidArgumentsIssue(_IssueBase):
    """Function arguments failed validation."""

    code: Literal["invalid_arguments"] = field(default="invalid_arguments", init=False)
    arguments_issues: tuple[Issue, ...] = ()


@dataclass(frozen=True, kw_only=True)
class InvalidReturnTypeIssue(_IssueBase):
    """Function return value failed validation."""

    code: Literal["invalid_return_type"] = field(default="invalid_return_type", init=False)
    return_type_issues: tuple[Issue, ...] = ()


@dataclass(frozen=True, kw_only=True)
class CustomIssue(_IssueBase):
    """Refinement failure carrying only an engine message."""

    code: Literal["custom"] = field(default="custom", init=False)
    params: Mapping[str, Any] | None = None


@dataclass(frozen=True, kw_only=True)
class UnsupportedIssue(_IssueBase):
    """Issue whose code is outside the known set."""

    code: str


Issue: TypeAlias = (
    InvalidTypeIssue
    | TooBigIssue
    | TooSmallIssue
    | InvalidFormatIssue
    | InvalidValueIssue
    | UnrecognizedKeysIssue
    | NotMultipleOfIssue
    | InvalidElementIssue
    | InvalidKeyIssue
    | InvalidUnionIssue
    | InvalidArgumentsIssue
    | InvalidReturnTypeIssue
    | CustomIssue
    | UnsupportedIssue
)

ISSUE_CLASSES: tuple[type[_IssueBase], ...] = (
    InvalidTypeIssue,
    TooBigIssue,
    TooSmallIssue,
    InvalidFormatIssue,
    InvalidValueIssue,
    UnrecognizedKeysIssue,
    NotMultipleOfIssue,
    InvalidElementIssue,
    InvalidKeyIssue,
    InvalidUnionIssue,
    InvalidArgumentsIssue,
    InvalidReturnTypeIssue,
    CustomIssue,
    UnsupportedIssue,
)


def is_issue(value: object) -> bool:
    """Return whether *value* is one of the normalized issue variants."""
    return isinstance(value, ISSUE_CLASSES)
