"""Ordered adapter registry and selection."""

from __future__ import annotations

import logging

from issue_explainer.adapters.base import IssueSchemaAdapter
from issue_explainer.adapters.current import CurrentIssueAdapter
from issue_explainer.adapters.json_schema import JsonSchemaAdapter
from issue_explainer.adapters.legacy import LegacyIssueAdapter
from issue_explainer.adapters.native import NativeAdapter

logger = logging.getLogger(__name__)

ADAPTERS: tuple[IssueSchemaAdapter, ...] = (
    NativeAdapter(),
    JsonSchemaAdapter(),
    CurrentIssueAdapter(),
    LegacyIssueAdapter(),
)


def select_adapter(tree: object) -> IssueSchemaAdapter | None:
    """Return the first adapter that recognizes *tree*, or ``None``."""
    for adapter in ADAPTERS:
        if adapter.matches(tree):
            logger.debug("Selected %s adapter for %s", adapter.name, type(tree).__name__)
            return adapter
    return None
