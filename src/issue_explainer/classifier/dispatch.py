"""Exhaustive dispatch from issue variants to summaries."""

from __future__ import annotations

import logging

from issue_explainer.classifier.bounds import summarize_too_big, summarize_too_small
from issue_explainer.classifier.formats import summarize_invalid_format
from issue_explainer.classifier.structure import (
    summarize_invalid_element,
    summarize_invalid_key,
    summarize_invalid_type,
)
from issue_explainer.classifier.summary import IssueSummary, render_summary
from issue_explainer.classifier.values import (
    summarize_invalid_value,
    summarize_not_multiple_of,
    summarize_unrecognized_keys,
)
from issue_explainer.constants.issues import (
    CUSTOM_ISSUE_CLAIM,
    INVALID_ARGUMENTS_MESSAGE,
    INVALID_RETURN_TYPE_MESSAGE,
    NOT_SUPPORTED_MESSAGE,
)
from issue_explainer.types.issues import (
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
)
from issue_explainer.types.options import MessageBuilderOptions

logger = logging.getLogger(__name__)


def classify_issue(issue: Issue, options: MessageBuilderOptions) -> IssueSummary:
    """Map *issue* to its claim, path, expectation and realization.

    Nested variants (unions and function issues) get a flat summary here;
    :mod:`issue_explainer.union` renders their sub-issues.
    """
    if isinstance(issue, InvalidTypeIssue):
        return summarize_invalid_type(issue, options)
    if isinstance(issue, TooBigIssue):
        return summarize_too_big(issue, options)
    if isinstance(issue, TooSmallIssue):
        return summarize_too_small(issue, options)
    if isinstance(issue, InvalidFormatIssue):
        return summarize_invalid_format(issue, options)
    if isinstance(issue, InvalidValueIssue):
        return summarize_invalid_value(issue, options)
    if isinstance(issue, UnrecognizedKeysIssue):
        return summarize_unrecognized_keys(issue, options)
    if isinstance(issue, NotMultipleOfIssue):
        return summarize_not_multiple_of(issue, options)
    if isinstance(issue, InvalidElementIssue):
        return summarize_invalid_element(issue, options)
    if isinstance(issue, InvalidKeyIssue):
        return summarize_invalid_key(issue, options)
    if isinstance(issue, InvalidUnionIssue):
        return IssueSummary(claim=issue.message or CUSTOM_ISSUE_CLAIM, path=issue.path)
    if isinstance(issue, InvalidArgumentsIssue):
        return IssueSummary(claim=issue.message or INVALID_ARGUMENTS_MESSAGE, path=issue.path)
    if isinstance(issue, InvalidReturnTypeIssue):
        return IssueSummary(claim=issue.message or INVALID_RETURN_TYPE_MESSAGE, path=issue.path)
    if isinstance(issue, CustomIssue):
        return IssueSummary(claim=issue.message or CUSTOM_ISSUE_CLAIM, path=issue.path)

    code = getattr(issue, "code", None)
    logger.debug("No summary for issue code %r; using engine message", code)
    return IssueSummary(
        claim=getattr(issue, "message", "") or NOT_SUPPORTED_MESSAGE,
        path=tuple(getattr(issue, "path", ())),
    )


def render_classified(issue: Issue, options: MessageBuilderOptions) -> str:
    """Classify *issue* and render its summary in one step."""
    return render_summary(classify_issue(issue, options), options)
