"""Field access shared by the upstream issue adapters.

Upstream trees arrive either as live objects (attributes) or as decoded JSON
(mappings); every read goes through :func:`read_field` so both work.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from issue_explainer.types.common import MISSING, IssuePath, PathKey, Symbol

_ABSENT = object()


def read_field(obj: object, name: str, default: Any = None) -> Any:
    """Read *name* from a mapping key or an attribute."""
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def has_field(obj: object, name: str) -> bool:
    return read_field(obj, name, _ABSENT) is not _ABSENT


def is_sequence(value: object) -> bool:
    """Return whether *value* is a list-like container (strings excluded)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def tree_issues(tree: object) -> Sequence[Any] | None:
    """Return the ``issues`` list of an error envelope, or ``None``."""
    issues = read_field(tree, "issues")
    return issues if is_sequence(issues) else None


def to_path(raw: object) -> IssuePath:
    if not is_sequence(raw):
        return ()
    return tuple(_to_path_key(key) for key in raw)


def _to_path_key(key: object) -> PathKey:
    if isinstance(key, (str, Symbol)):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    return str(key)


def common_fields(raw: object) -> dict[str, Any]:
    """Extract ``path``, ``message`` and ``input`` from an upstream issue."""
    message = read_field(raw, "message")
    return {
        "path": to_path(read_field(raw, "path")),
        "message": message if isinstance(message, str) else "",
        "input": read_field(raw, "input", MISSING),
    }


def as_tuple(value: object) -> tuple[Any, ...]:
    return tuple(value) if is_sequence(value) else ()
