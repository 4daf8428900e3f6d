"""Summaries for too_big and too_small issues."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime

from issue_explainer.classifier.summary import IssueSummary, pluralize
from issue_explainer.constants.issues import COLLECTION_ORIGINS, NUMERIC_ORIGINS
from issue_explainer.types.issues import Bound, TooBigIssue, TooSmallIssue
from issue_explainer.types.options import MessageBuilderOptions
from issue_explainer.utils.stringify import stringify_date, stringify_primitive


def summarize_too_big(issue: TooBigIssue, options: MessageBuilderOptions) -> IssueSummary:
    return _summarize_bound(issue, issue.maximum, upper=True, options=options)


def summarize_too_small(issue: TooSmallIssue, options: MessageBuilderOptions) -> IssueSummary:
    return _summarize_bound(issue, issue.minimum, upper=False, options=options)


def _summarize_bound(
    issue: TooBigIssue | TooSmallIssue,
    bound: Bound,
    *,
    upper: bool,
    options: MessageBuilderOptions,
) -> IssueSummary:
    origin = issue.origin
    if origin == "date":
        return IssueSummary(
            claim="date too late" if upper else "date too early",
            path=issue.path,
            expectation=_date_expectation(bound, upper=upper, inclusive=issue.inclusive, options=options),
            realization=_date_realization(issue, options),
        )

    limit = stringify_primitive(bound, localize=options.number_localization)
    comparison = _comparison(upper=upper, inclusive=issue.inclusive, exact=issue.exact)

    if origin == "string":
        claim = "string contains too many characters" if upper else "string contains too few characters"
        unit = "character"
        measured = len(issue.input) if isinstance(issue.input, str) else None
    elif origin in COLLECTION_ORIGINS:
        claim = f"{origin} contains too many items" if upper else f"{origin} contains too few items"
        unit = "item"
        measured = len(issue.input) if isinstance(issue.input, (list, tuple, set, frozenset)) else None
    elif origin == "file":
        claim = "file too large" if upper else "file too small"
        unit = "byte"
        measured = _file_size(issue.input)
    else:
        kind = "number" if origin in NUMERIC_ORIGINS else "value"
        claim = f"{kind} too big" if upper else f"{kind} too small"
        return IssueSummary(
            claim=claim,
            path=issue.path,
            expectation=f"expected {comparison} {limit}",
            realization=_numeric_realization(issue, options),
        )

    realization = None
    if measured is not None and options.report_input != "none":
        count = stringify_primitive(measured, localize=options.number_localization)
        realization = f"received {count} {pluralize(measured, unit)}"
    return IssueSummary(
        claim=claim,
        path=issue.path,
        expectation=f"expected {comparison} {limit} {pluralize(_as_count(bound), unit)}",
        realization=realization,
    )


def _comparison(*, upper: bool, inclusive: bool, exact: bool) -> str:
    if exact:
        return "exactly"
    if upper:
        return "<=" if inclusive else "<"
    return ">=" if inclusive else ">"


def _as_count(bound: Bound) -> int | float:
    return bound if isinstance(bound, (int, float)) else 0


def _numeric_realization(issue: TooBigIssue | TooSmallIssue, options: MessageBuilderOptions) -> str | None:
    value = issue.input
    if options.report_input != "type_and_value":
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return f"received {stringify_primitive(value, localize=options.number_localization)}"


def _file_size(value: object) -> int | None:
    if isinstance(value, (bytes, bytearray)):
        return len(value)
    size = getattr(value, "size", None)
    if isinstance(size, int) and not isinstance(size, bool):
        return size
    return None


def to_datetime(bound: Bound) -> date | None:
    """Interpret a date bound.

    Numbers are epoch milliseconds in UTC and strings are ISO 8601, as found
    in serialized engine errors. Returns ``None`` when *bound* is neither.
    """
    if isinstance(bound, date):
        return bound
    if isinstance(bound, str):
        try:
            return datetime.fromisoformat(bound)
        except ValueError:
            return None
    if isinstance(bound, bool) or not isinstance(bound, (int, float)) or not math.isfinite(bound):
        return None
    try:
        return datetime.fromtimestamp(bound / 1000, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def _date_expectation(bound: Bound, *, upper: bool, inclusive: bool, options: MessageBuilderOptions) -> str:
    moment = to_datetime(bound)
    if moment is None:
        text = stringify_primitive(bound, localize=options.number_localization)
    else:
        text = stringify_date(moment, localize=options.date_localization)
    if upper:
        relation = "prior or equal to" if inclusive else "prior to"
    else:
        relation = "later or equal to" if inclusive else "later than"
    return f'expected {relation} "{text}"'


def _date_realization(issue: TooBigIssue | TooSmallIssue, options: MessageBuilderOptions) -> str | None:
    if options.report_input != "type_and_value" or not isinstance(issue.input, date):
        return None
    return f'received "{stringify_date(issue.input, localize=options.date_localization)}"'
