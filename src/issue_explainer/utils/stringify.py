"""Stringify primitive values and join value lists for display."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, time

from issue_explainer.types.common import Primitive, Symbol, _Sentinel


def stringify_primitive(value: object, *, quote: bool = False, localize: bool = True) -> str:
    """Render a single primitive the way a reader expects to see it.

    Strings are returned verbatim unless *quote* is set. Numbers use ``,``
    grouping and dates use ``M/D/YYYY, h:mm:ss AM`` when *localize* is set.
    """
    if isinstance(value, str):
        return f'"{value}"' if quote else value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, _Sentinel):
        return "undefined"
    if isinstance(value, Symbol):
        return value.description or ""
    if isinstance(value, int):
        return f"{value:,}" if localize else str(value)
    if isinstance(value, float):
        return _stringify_float(value, localize=localize)
    if isinstance(value, (date, datetime)):
        return stringify_date(value, localize=localize)
    return str(value)


def _stringify_float(value: float, *, localize: bool) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if localize:
        text = f"{value:,.3f}".rstrip("0").rstrip(".")
        return "0" if text == "-0" else text
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def stringify_date(value: date, *, localize: bool = True) -> str:
    """Render a date or datetime as ``M/D/YYYY, h:mm:ss AM`` or ISO 8601."""
    if not localize:
        return value.isoformat()
    moment = value if isinstance(value, datetime) else datetime.combine(value, time())
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )


def get_type_name(value: object) -> str:
    """Classify *value* into the runtime type vocabulary used in messages."""
    if value is None:
        return "null"
    if isinstance(value, _Sentinel):
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, date):
        return "date"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, (set, frozenset)):
        return "set"
    if isinstance(value, BaseException):
        return "error"
    if callable(value):
        return "function"
    return "object"


def is_primitive(value: object) -> bool:
    """Return whether *value* is a scalar that can be shown inline."""
    return value is None or isinstance(value, (str, bool, int, float, Symbol, _Sentinel))


def join_strings(strings: Sequence[str], *, separator: str, last_separator: str | None = None) -> str:
    """Join *strings*, using *last_separator* before the final element."""
    if not strings:
        return ""
    if not last_separator or len(strings) == 1:
        return separator.join(strings)
    return separator.join(strings[:-1]) + last_separator + strings[-1]


def join_values(
    values: Iterable[Primitive],
    *,
    separator: str,
    last_separator: str | None = None,
    quote: bool = False,
    max_to_display: int | None = None,
    localize: bool = True,
) -> str:
    """Join primitive *values* for display, truncating after *max_to_display*.

    Truncation appends a synthetic ``"<k> more value(s)"`` element, which is
    joined under the same last-separator rule as a real value.
    """
    items = list(values)
    shown = items if max_to_display is None else items[: max(max_to_display, 0)]
    parts = [stringify_primitive(value, quote=quote, localize=localize) for value in shown]
    hidden = len(items) - len(shown)
    if hidden > 0:
        parts.append(f"{hidden} more value(s)")
    return join_strings(parts, separator=separator, last_separator=last_separator)
