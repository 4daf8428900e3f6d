"""Shared exception hierarchy for issue_explainer."""

from __future__ import annotations

from .base import ExplainerError
from .config import ConfigError
from .validation import IssueTree, ValidationError

__all__ = [
    "ConfigError",
    "ExplainerError",
    "IssueTree",
    "ValidationError",
]
