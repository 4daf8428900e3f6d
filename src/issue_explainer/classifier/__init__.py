"""Issue classification: map each issue variant to a renderable summary."""

from __future__ import annotations

from issue_explainer.classifier.dispatch import classify_issue, render_classified
from issue_explainer.classifier.summary import IssueSummary, render_summary

__all__ = [
    "IssueSummary",
    "classify_issue",
    "render_classified",
    "render_summary",
]
