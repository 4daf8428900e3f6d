"""Structured diagnostics reported by options file validation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigDiagnostic:
    """A single options file problem with a stable code and location."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.code}]", self.path]
        if self.field:
            parts.append(self.field)
        parts.append(self.message)
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_diagnostics(diagnostics: list[ConfigDiagnostic]) -> list[ConfigDiagnostic]:
    """Sort diagnostics deterministically by code, path, field."""
    return sorted(diagnostics, key=lambda d: (d.code, d.path, d.field))


def format_diagnostics(diagnostics: list[ConfigDiagnostic]) -> str:
    """Format diagnostics as a multi-line string."""
    return "\n".join(d.format() for d in sort_diagnostics(diagnostics))
