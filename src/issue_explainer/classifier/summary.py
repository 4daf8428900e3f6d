"""Structured summary of one issue and its rendering."""

from __future__ import annotations

from dataclasses import dataclass

from issue_explainer.constants.messages import DETAILS_SEPARATOR, FRAGMENT_SEPARATOR
from issue_explainer.types.common import IssuePath
from issue_explainer.types.options import MessageBuilderOptions
from issue_explainer.utils.path import join_path


@dataclass(frozen=True)
class IssueSummary:
    """What went wrong (claim), where (path), what was wanted and what was seen."""

    claim: str
    path: IssuePath = ()
    expectation: str | None = None
    realization: str | None = None


def render_summary(summary: IssueSummary, options: MessageBuilderOptions) -> str:
    """Compose ``claim[ at "path"][; expectation[, realization]]``."""
    text = summary.claim
    if options.include_path and summary.path:
        text = f'{text} at "{join_path(summary.path)}"'
    details = [fragment for fragment in (summary.expectation, summary.realization) if fragment]
    if details:
        text = f"{text}{DETAILS_SEPARATOR}{FRAGMENT_SEPARATOR.join(details)}"
    return text


def pluralize(count: int | float, unit: str) -> str:
    """Return ``unit`` or its plural depending on *count*."""
    return unit if count == 1 else f"{unit}s"
