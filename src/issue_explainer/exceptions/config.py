"""Configuration-related exceptions."""

from __future__ import annotations

from issue_explainer.exceptions.base import ExplainerError


class ConfigError(ExplainerError, ValueError):
    """Raised when a message options file is missing or invalid."""
