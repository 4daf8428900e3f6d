"""Recognize upstream issue trees and normalize them to issues."""

from __future__ import annotations

from issue_explainer.adapters.base import IssueSchemaAdapter
from issue_explainer.adapters.current import CurrentIssueAdapter
from issue_explainer.adapters.json_schema import JsonSchemaAdapter
from issue_explainer.adapters.legacy import LegacyIssueAdapter
from issue_explainer.adapters.native import NativeAdapter
from issue_explainer.adapters.registry import ADAPTERS, select_adapter

__all__ = [
    "ADAPTERS",
    "CurrentIssueAdapter",
    "IssueSchemaAdapter",
    "JsonSchemaAdapter",
    "LegacyIssueAdapter",
    "NativeAdapter",
    "select_adapter",
]
