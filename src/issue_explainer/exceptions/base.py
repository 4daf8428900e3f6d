"""Root of the issue_explainer exception hierarchy."""

from __future__ import annotations


class ExplainerError(Exception):
    """Base class for every error raised by issue_explainer."""
