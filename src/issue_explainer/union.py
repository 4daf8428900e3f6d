"""Rendering of issues that nest other issues.

Union branches and function argument or return-type failures are rendered by
recursing into the top-level issue renderer handed in by the caller, so a
nested union inside a branch is expanded the same way as a top-level one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from issue_explainer.classifier import render_classified
from issue_explainer.types.issues import InvalidArgumentsIssue, InvalidReturnTypeIssue, InvalidUnionIssue, Issue
from issue_explainer.types.options import MessageBuilderOptions

IssueRenderer: TypeAlias = Callable[[Issue, MessageBuilderOptions], str]


def render_union_issue(issue: InvalidUnionIssue, options: MessageBuilderOptions, render: IssueRenderer) -> str:
    """Render every branch once, in first-occurrence order.

    Branches are compared by their rendered text. When no branch produces any
    text the union is rendered from its own engine message.
    """
    collected: list[str] = []
    for branch in issue.branches:
        text = options.issue_separator.join(render(sub_issue, options) for sub_issue in branch)
        if text and text not in collected:
            collected.append(text)
    if not collected:
        return render_classified(issue, options)
    return options.union_separator.join(collected)


def render_function_issue(
    issue: InvalidArgumentsIssue | InvalidReturnTypeIssue,
    options: MessageBuilderOptions,
    render: IssueRenderer,
) -> str:
    """Render the function-level message followed by each nested issue."""
    if isinstance(issue, InvalidArgumentsIssue):
        nested = issue.arguments_issues
    else:
        nested = issue.return_type_issues
    parts = [render_classified(issue, options)]
    parts.extend(render(sub_issue, options) for sub_issue in nested)
    return options.issue_separator.join(parts)
