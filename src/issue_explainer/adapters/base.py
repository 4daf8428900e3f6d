"""Adapter interface for upstream issue tree shapes."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import ClassVar

from issue_explainer.types.issues import Issue


class IssueSchemaAdapter(ABC):
    """Recognize one upstream issue tree shape and normalize it to issues."""

    name: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Require concrete adapters to define a non-empty `name`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return
        name = getattr(cls, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `name`")

    @abstractmethod
    def matches(self, tree: object) -> bool:
        """Return whether *tree* has the shape this adapter understands."""

    @abstractmethod
    def to_issues(self, tree: object) -> tuple[Issue, ...]:
        """Convert a matching *tree* into normalized issues."""
