"""Process-wide default message options.

The defaults are one immutable value replaced by reference assignment, so
readers never observe a partially updated configuration.
"""

from __future__ import annotations

import logging

from issue_explainer.types.options import MessageBuilderOptions

logger = logging.getLogger(__name__)

_default_options: MessageBuilderOptions = MessageBuilderOptions()


def get_default_options() -> MessageBuilderOptions:
    """Return the options used when a call site passes ``options=None``."""
    return _default_options


def install_default_options(options: MessageBuilderOptions) -> MessageBuilderOptions:
    """Install *options* as the process defaults and return the previous value."""
    global _default_options
    if not isinstance(options, MessageBuilderOptions):
        raise TypeError(f"expected MessageBuilderOptions, got {type(options).__name__}")
    previous = _default_options
    _default_options = options
    logger.debug("Installed default message options: %r", options)
    return previous


def reset_default_options() -> None:
    """Restore the built-in defaults."""
    install_default_options(MessageBuilderOptions())
