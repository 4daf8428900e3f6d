"""Error values produced from compiled issue messages."""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from issue_explainer.adapters.registry import select_adapter
from issue_explainer.constants.messages import ISSUE_TREE_NAME, VALIDATION_ERROR_NAME
from issue_explainer.exceptions.base import ExplainerError
from issue_explainer.types.issues import Issue


class IssueTree(ExplainerError):
    """Native issue tree: an error wrapping already-normalized issues.

    Shares the ``name`` plus ``issues`` envelope of upstream engine errors so
    that every conversion entry point accepts it.
    """

    name: ClassVar[str] = ISSUE_TREE_NAME

    def __init__(self, issues: Iterable[Issue], message: str = "") -> None:
        super().__init__(message)
        self._issues = tuple(issues)
        self._message = message

    @property
    def issues(self) -> tuple[Issue, ...]:
        return self._issues

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __reduce__(self) -> tuple[object, ...]:
        return (type(self), (self._issues, self._message))

    def __repr__(self) -> str:
        return f"IssueTree({list(self._issues)!r})"


class ValidationError(ExplainerError, ValueError):
    """Validation failure carrying a readable message and the original issues.

    ``details`` holds the normalized issues of ``cause`` when the cause is a
    recognized issue tree, and is empty otherwise. Exception causes are also
    chained through ``__cause__``.
    """

    name: ClassVar[str] = VALIDATION_ERROR_NAME

    def __init__(
        self,
        message: str,
        *,
        cause: object = None,
        details: Iterable[Issue] | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._cause = cause
        if details is not None:
            self._details = tuple(details)
        else:
            self._details = _details_from_cause(cause)
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def details(self) -> tuple[Issue, ...]:
        return self._details

    @property
    def cause(self) -> object:
        return self._cause

    def __str__(self) -> str:
        return self._message

    def __reduce__(self) -> tuple[object, ...]:
        return (_restore_validation_error, (type(self), self._message, self._cause, self._details))

    def __repr__(self) -> str:
        return f"ValidationError({self._message!r})"


def _details_from_cause(cause: object) -> tuple[Issue, ...]:
    if cause is None:
        return ()
    adapter = select_adapter(cause)
    if adapter is None:
        return ()
    return adapter.to_issues(cause)


def _restore_validation_error(
    cls: type[ValidationError],
    message: str,
    cause: object,
    details: tuple[Issue, ...],
) -> ValidationError:
    return cls(message, cause=cause, details=details)
