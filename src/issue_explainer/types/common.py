"""Cross-module type aliases and sentinel values."""

from __future__ import annotations

from typing import Final, Literal, TypeAlias


class Symbol:
    """Opaque property key with an optional description.

    Mirrors the symbol keys some validation engines place in issue paths.
    Two symbols are equal only when they are the same object.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description!r})" if self.description is not None else "Symbol()"


class _Sentinel:
    """Named singleton marker."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return self._name


MISSING: Final = _Sentinel("MISSING")
"""The issue producer did not attach the offending input."""

UNDEFINED: Final = _Sentinel("UNDEFINED")
"""The offending input was absent (for example a missing object property)."""

PathKey: TypeAlias = str | int | Symbol
IssuePath: TypeAlias = tuple[PathKey, ...]
Primitive: TypeAlias = str | int | float | bool | None | Symbol | _Sentinel

ReportInput: TypeAlias = Literal["none", "type", "type_and_value"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
