"""Render issue paths as unambiguous display strings."""

from __future__ import annotations

from issue_explainer.types.common import IssuePath, PathKey, Symbol

_JOINERS: tuple[str, ...] = ("\u200c", "\u200d")


def is_identifier(key: str) -> bool:
    """Return whether *key* can be written as a bare ``.key`` segment.

    Accepts a first character that is XID_Start, ``_`` or ``$`` followed by
    XID_Continue, ``$``, ZWNJ or ZWJ characters.
    """
    if not key:
        return False
    head, tail = key[0], key[1:]
    head = head.replace("$", "_")
    for char in ("$", *_JOINERS):
        tail = tail.replace(char, "_")
    return (head + tail).isidentifier()


def symbol_text(key: Symbol) -> str:
    return key.description or ""


def join_path(path: IssuePath) -> str:
    """Join *path* into a string such as ``a[0].b["./*"]``.

    A single-element path renders the key alone; the empty string renders as
    ``""`` so that it stays visible.
    """
    if not path:
        return ""
    if len(path) == 1:
        return _render_single(path[0])

    rendered = ""
    for key in path:
        rendered = _append_segment(rendered, key)
    return rendered


def _render_single(key: PathKey) -> str:
    if isinstance(key, Symbol):
        return symbol_text(key)
    if isinstance(key, int):
        return str(key)
    return key if key else '""'


def _append_segment(rendered: str, key: PathKey) -> str:
    if isinstance(key, int) and not isinstance(key, bool):
        return f"{rendered}[{key}]"
    text = symbol_text(key) if isinstance(key, Symbol) else str(key)
    if '"' in text or not is_identifier(text):
        escaped = text.replace('"', '\\"')
        return f'{rendered}["{escaped}"]'
    if not rendered:
        return text
    return f"{rendered}.{text}"
