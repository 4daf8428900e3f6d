"""Adapter for trees that already hold normalized issues."""

from __future__ import annotations

from issue_explainer.adapters.base import IssueSchemaAdapter
from issue_explainer.adapters.fields import read_field, tree_issues
from issue_explainer.constants.adapters import ENGINE_TREE_NAMES
from issue_explainer.constants.messages import ISSUE_TREE_NAME
from issue_explainer.types.issues import Issue, is_issue


class NativeAdapter(IssueSchemaAdapter):
    """Pass through ``IssueTree`` and engine envelopes of native issues."""

    name = "native"

    def matches(self, tree: object) -> bool:
        if read_field(tree, "name") not in ENGINE_TREE_NAMES | {ISSUE_TREE_NAME}:
            return False
        issues = tree_issues(tree)
        return issues is not None and all(is_issue(issue) for issue in issues)

    def to_issues(self, tree: object) -> tuple[Issue, ...]:
        return tuple(tree_issues(tree) or ())
