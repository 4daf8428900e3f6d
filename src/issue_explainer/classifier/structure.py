"""Summaries for invalid_type, invalid_element and invalid_key issues."""

from __future__ import annotations

from issue_explainer.classifier.summary import IssueSummary
from issue_explainer.types.common import _Sentinel
from issue_explainer.types.issues import InvalidElementIssue, InvalidKeyIssue, InvalidTypeIssue
from issue_explainer.types.options import MessageBuilderOptions
from issue_explainer.utils.stringify import get_type_name, is_primitive, stringify_primitive


def summarize_invalid_type(issue: InvalidTypeIssue, options: MessageBuilderOptions) -> IssueSummary:
    return IssueSummary(
        claim="invalid type",
        path=issue.path,
        expectation=f"expected {issue.expected}",
        realization=_type_realization(issue, options),
    )


def _type_realization(issue: InvalidTypeIssue, options: MessageBuilderOptions) -> str | None:
    if options.report_input == "none":
        return None
    if not issue.has_input:
        return f"received {issue.received}" if issue.received else None

    value = issue.input
    realization = f"received {get_type_name(value)}"
    if (
        options.report_input == "type_and_value"
        and value is not None
        and not isinstance(value, _Sentinel)
        and is_primitive(value)
    ):
        realization = f"{realization} ({stringify_primitive(value, quote=True, localize=options.number_localization)})"
    return realization


def summarize_invalid_element(issue: InvalidElementIssue, options: MessageBuilderOptions) -> IssueSummary:
    return IssueSummary(claim=f"invalid element in {issue.origin}", path=issue.path)


def summarize_invalid_key(issue: InvalidKeyIssue, options: MessageBuilderOptions) -> IssueSummary:
    return IssueSummary(claim=f"invalid key in {issue.origin}", path=issue.path)
