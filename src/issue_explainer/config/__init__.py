"""Message options: process defaults, file loading and validation."""

from __future__ import annotations

from issue_explainer.config.defaults import get_default_options, install_default_options, reset_default_options
from issue_explainer.config.diagnostics import ConfigDiagnostic, format_diagnostics, sort_diagnostics
from issue_explainer.config.loader import load_options, options_from_mapping
from issue_explainer.config.validator import validate_options_file, validate_options_mapping

__all__ = [
    "ConfigDiagnostic",
    "format_diagnostics",
    "get_default_options",
    "install_default_options",
    "load_options",
    "options_from_mapping",
    "reset_default_options",
    "sort_diagnostics",
    "validate_options_file",
    "validate_options_mapping",
]
