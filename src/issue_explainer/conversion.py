"""Entry points converting upstream errors into :class:`ValidationError`."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from issue_explainer.adapters.fields import read_field
from issue_explainer.adapters.registry import select_adapter
from issue_explainer.constants.messages import UNKNOWN_ERROR_MESSAGE
from issue_explainer.exceptions.validation import IssueTree, ValidationError
from issue_explainer.message_builder import MessageBuilder
from issue_explainer.types.issues import Issue, is_issue
from issue_explainer.types.options import MessageBuilderOptions

logger = logging.getLogger(__name__)

MessageBuilderFn: TypeAlias = Callable[[Sequence[Issue]], str]

_NOT_A_TREE_MESSAGE: str = (
    "Invalid issue tree; expected an object exposing `name` and `issues`. "
    'Did you mean to use the "from_error" function instead?'
)


def _resolve_builder(
    options: MessageBuilderOptions | None,
    message_builder: MessageBuilderFn | None,
) -> MessageBuilderFn:
    if message_builder is not None:
        return message_builder
    return MessageBuilder(options).build


def from_issue_tree(
    tree: object,
    options: MessageBuilderOptions | None = None,
    *,
    message_builder: MessageBuilderFn | None = None,
) -> ValidationError:
    """Convert a recognized issue tree into a :class:`ValidationError`.

    Raises:
        TypeError: If no adapter recognizes *tree*.
    """
    adapter = select_adapter(tree)
    if adapter is None:
        raise TypeError(_NOT_A_TREE_MESSAGE)

    issues = adapter.to_issues(tree)
    build = _resolve_builder(options, message_builder)
    if issues:
        message = build(issues)
    else:
        own_message = read_field(tree, "message")
        message = own_message if isinstance(own_message, str) and own_message else build(())
    return ValidationError(message, cause=tree, details=issues)


def from_issue(
    issue: Issue,
    options: MessageBuilderOptions | None = None,
    *,
    message_builder: MessageBuilderFn | None = None,
) -> ValidationError:
    """Convert a single issue; the cause is a one-issue :class:`IssueTree`."""
    if not is_issue(issue):
        raise TypeError(f"expected an issue, got {type(issue).__name__}")
    build = _resolve_builder(options, message_builder)
    return ValidationError(build((issue,)), cause=IssueTree((issue,)), details=(issue,))


def from_error(
    err: object,
    options: MessageBuilderOptions | None = None,
    *,
    message_builder: MessageBuilderFn | None = None,
) -> ValidationError:
    """Convert anything into a :class:`ValidationError` without raising.

    Issue trees are formatted, other exceptions keep their message, and any
    other value yields ``"Unknown error"``.
    """
    if select_adapter(err) is not None:
        return from_issue_tree(err, options, message_builder=message_builder)
    if isinstance(err, BaseException):
        logger.debug("Wrapping %s without issue formatting", type(err).__name__)
        return ValidationError(str(err) or UNKNOWN_ERROR_MESSAGE, cause=err)
    logger.debug("Cannot convert %s; using generic message", type(err).__name__)
    return ValidationError(UNKNOWN_ERROR_MESSAGE, cause=err)


def to_validation_error(
    options: MessageBuilderOptions | None = None,
    *,
    message_builder: MessageBuilderFn | None = None,
) -> Callable[[object], ValidationError]:
    """Return a one-argument converter bound to *options*."""

    def convert(err: object) -> ValidationError:
        return from_error(err, options, message_builder=message_builder)

    return convert
