"""Summaries for invalid_value, unrecognized_keys and not_multiple_of issues."""

from __future__ import annotations

from issue_explainer.classifier.summary import IssueSummary
from issue_explainer.types.common import MISSING
from issue_explainer.types.issues import InvalidValueIssue, NotMultipleOfIssue, UnrecognizedKeysIssue
from issue_explainer.types.options import MessageBuilderOptions
from issue_explainer.utils.stringify import is_primitive, join_values, stringify_primitive


def summarize_invalid_value(issue: InvalidValueIssue, options: MessageBuilderOptions) -> IssueSummary:
    display = options.allowed_values
    localize = options.number_localization
    expectation = None
    if len(issue.values) == 1:
        expectation = f"expected {stringify_primitive(issue.values[0], quote=display.quote, localize=localize)}"
    elif issue.values:
        joined = join_values(
            issue.values,
            separator=display.separator,
            last_separator=display.last_separator,
            quote=display.quote,
            max_to_display=display.max_to_display,
            localize=localize,
        )
        expectation = f"expected one of {joined}"
    return IssueSummary(
        claim="invalid value",
        path=issue.path,
        expectation=expectation,
        realization=_value_realization(issue.input, options),
    )


def summarize_unrecognized_keys(issue: UnrecognizedKeysIssue, options: MessageBuilderOptions) -> IssueSummary:
    display = options.unrecognized_keys
    joined = join_values(
        issue.keys,
        separator=display.separator,
        last_separator=display.last_separator,
        quote=display.quote,
        max_to_display=display.max_to_display,
    )
    return IssueSummary(claim=f"unrecognized key(s) {joined} in object", path=issue.path)


def summarize_not_multiple_of(issue: NotMultipleOfIssue, options: MessageBuilderOptions) -> IssueSummary:
    divisor = stringify_primitive(issue.divisor, localize=options.number_localization)
    return IssueSummary(
        claim="invalid value",
        path=issue.path,
        expectation=f"expected multiple of {divisor}",
        realization=_value_realization(issue.input, options),
    )


def _value_realization(value: object, options: MessageBuilderOptions) -> str | None:
    if options.report_input != "type_and_value" or value is MISSING or not is_primitive(value):
        return None
    return f"received {stringify_primitive(value, quote=True, localize=options.number_localization)}"
