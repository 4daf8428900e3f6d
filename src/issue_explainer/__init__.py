"""Compile validation issue trees into readable error messages."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from issue_explainer.config import get_default_options, install_default_options, reset_default_options
from issue_explainer.conversion import from_error, from_issue, from_issue_tree, to_validation_error
from issue_explainer.exceptions import ConfigError, ExplainerError, IssueTree, ValidationError
from issue_explainer.message_builder import (
    MessageBuilder,
    build_message,
    create_message_builder,
    engine_message,
    render_issue,
)
from issue_explainer.predicates import is_issue_tree_like, is_validation_error, is_validation_error_like
from issue_explainer.types import MessageBuilderOptions, ValuesDisplayOptions

__all__ = [
    "ConfigError",
    "ExplainerError",
    "IssueTree",
    "MessageBuilder",
    "MessageBuilderOptions",
    "ValidationError",
    "ValuesDisplayOptions",
    "__version__",
    "build_message",
    "create_message_builder",
    "engine_message",
    "from_error",
    "from_issue",
    "from_issue_tree",
    "get_default_options",
    "install_default_options",
    "is_issue_tree_like",
    "is_validation_error",
    "is_validation_error_like",
    "render_issue",
    "reset_default_options",
    "to_validation_error",
]

try:
    __version__ = version("issue-explainer")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
