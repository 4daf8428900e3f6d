"""Shared pytest fixtures for issue_explainer tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from issue_explainer.config import reset_default_options
from issue_explainer.types import MessageBuilderOptions


@pytest.fixture(autouse=True)
def _restore_default_options() -> Iterator[None]:
    """Reset process-wide default options after every test."""
    yield
    reset_default_options()


@pytest.fixture
def options() -> MessageBuilderOptions:
    """Return the built-in default options."""
    return MessageBuilderOptions()


@pytest.fixture
def value_options() -> MessageBuilderOptions:
    """Return options that disclose input values in messages."""
    return MessageBuilderOptions(report_input="type_and_value")
