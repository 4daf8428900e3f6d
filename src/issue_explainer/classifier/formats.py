"""Summaries for invalid_format issues."""

from __future__ import annotations

from issue_explainer.classifier.summary import IssueSummary
from issue_explainer.constants.formats import CASE_FORMATS, FORMAT_LABELS, HASH_FORMAT_PATTERN
from issue_explainer.types.issues import InvalidFormatIssue
from issue_explainer.types.options import MessageBuilderOptions


def summarize_invalid_format(issue: InvalidFormatIssue, options: MessageBuilderOptions) -> IssueSummary:
    realization = None
    if options.report_input == "type_and_value" and isinstance(issue.input, str):
        realization = f'received "{issue.input}"'
    return IssueSummary(
        claim="malformed value",
        path=issue.path,
        expectation=format_expectation(issue, options),
        realization=realization,
    )


def format_expectation(issue: InvalidFormatIssue, options: MessageBuilderOptions) -> str:
    """Describe the format the value was expected to satisfy."""
    fmt = issue.format
    details = options.display_invalid_format_details

    if fmt == "starts_with":
        return f'expected string to start with "{issue.prefix or ""}"'
    if fmt == "ends_with":
        return f'expected string to end with "{issue.suffix or ""}"'
    if fmt == "includes":
        return f'expected string to include "{issue.includes or ""}"'
    if fmt == "regex":
        if details and issue.pattern:
            return f'expected string to match pattern "{issue.pattern}"'
        return "expected string to match pattern"
    if fmt == "jwt":
        if details and issue.algorithm:
            return f"expected a jwt/{issue.algorithm} token"
        return "expected a jwt token"
    if fmt in CASE_FORMATS:
        return f"expected {fmt} string"
    if fmt in FORMAT_LABELS:
        return f"expected {FORMAT_LABELS[fmt]}"

    match = HASH_FORMAT_PATTERN.match(fmt)
    if match:
        algorithm = match.group("algorithm").upper()
        article = "an" if algorithm == "MD5" else "a"
        return f"expected {article} {algorithm} {match.group('encoding')}-encoded hash"
    return f"expected {fmt} format"
