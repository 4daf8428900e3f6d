"""Compile a sequence of issues into one diagnostic message."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from typing import Any

from issue_explainer.classifier import render_classified
from issue_explainer.config.defaults import get_default_options
from issue_explainer.constants.messages import DEFAULT_PREFIX
from issue_explainer.types.issues import InvalidArgumentsIssue, InvalidReturnTypeIssue, InvalidUnionIssue, Issue
from issue_explainer.types.options import MessageBuilderOptions
from issue_explainer.union import render_function_issue, render_union_issue

logger = logging.getLogger(__name__)


def render_issue(issue: Issue, options: MessageBuilderOptions | None = None) -> str:
    """Render one issue, expanding nested unions and function issues."""
    resolved = options if options is not None else get_default_options()
    if isinstance(issue, InvalidUnionIssue):
        return render_union_issue(issue, resolved, render_issue)
    if isinstance(issue, (InvalidArgumentsIssue, InvalidReturnTypeIssue)):
        return render_function_issue(issue, resolved, render_issue)
    return render_classified(issue, resolved)


def engine_message(issue: Issue) -> str:
    """Error map that keeps the engine-supplied message of each issue."""
    return issue.message


def prefix_message(message: str, options: MessageBuilderOptions) -> str:
    """Apply the prefix rule; the result is never empty."""
    if options.prefix is not None:
        if message:
            return f"{options.prefix}{options.prefix_separator}{message}"
        return options.prefix
    if message:
        return message
    return DEFAULT_PREFIX


class MessageBuilder:
    """Truncate, render, join and prefix issues.

    Options left as ``None`` resolve to the process defaults at build time,
    so a builder created before :func:`install_default_options` picks up the
    installed values.
    """

    def __init__(self, options: MessageBuilderOptions | None = None) -> None:
        self._options = options

    @property
    def options(self) -> MessageBuilderOptions:
        return self._options if self._options is not None else get_default_options()

    def build(self, issues: Sequence[Issue]) -> str:
        options = self.options
        limit = max(options.max_issues_in_message, 0)
        items = list(issues)
        shown = items[:limit]
        if len(items) > limit:
            logger.debug("Truncated %d issue(s) to %d for the message", len(items), limit)

        if options.error_map is not None:
            rendered = [options.error_map(issue) for issue in shown]
        else:
            rendered = [render_issue(issue, options) for issue in shown]
        return prefix_message(options.issue_separator.join(rendered), options)

    def __call__(self, issues: Sequence[Issue]) -> str:
        return self.build(issues)


def build_message(issues: Sequence[Issue], options: MessageBuilderOptions | None = None) -> str:
    """Compile *issues* into a message using *options* or the process defaults."""
    return MessageBuilder(options).build(issues)


def create_message_builder(options: MessageBuilderOptions | None = None, **overrides: Any) -> MessageBuilder:
    """Return a builder whose options are *options* (or the defaults) with *overrides* applied."""
    base = options if options is not None else get_default_options()
    if overrides:
        base = dataclasses.replace(base, **overrides)
    return MessageBuilder(base)
