"""Load message options from ``issue-explainer.yaml``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from issue_explainer.config.diagnostics import format_diagnostics
from issue_explainer.config.validator import validate_options_mapping
from issue_explainer.constants.config import CONFIG_FILENAME
from issue_explainer.exceptions import ConfigError
from issue_explainer.types.options import MessageBuilderOptions, ValuesDisplayOptions

logger = logging.getLogger(__name__)


def load_options(path: Path | None = None, *, root: Path | None = None) -> MessageBuilderOptions:
    """Load options from *path*, or from ``issue-explainer.yaml`` under *root*.

    A missing default file yields the built-in defaults; a missing explicit
    file, invalid YAML or invalid values raise :class:`ConfigError`.
    """
    explicit = path is not None
    resolved = path if path is not None else (root or Path.cwd()) / CONFIG_FILENAME
    if not resolved.exists():
        if explicit:
            raise ConfigError(f"Options file not found: {resolved}")
        logger.debug("No options file at %s; using defaults", resolved)
        return MessageBuilderOptions()

    try:
        raw = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML options file at {resolved}: {exc}") from exc

    if raw is None:
        logger.warning("Options file %s is empty; using defaults", resolved)
        return MessageBuilderOptions()

    errors = validate_options_mapping(raw, str(resolved))
    if errors:
        raise ConfigError(format_diagnostics(errors))

    logger.debug("Loaded message options from %s", resolved)
    return options_from_mapping(raw)


def options_from_mapping(raw: dict[str, Any]) -> MessageBuilderOptions:
    """Build options from a validated mapping, defaulting absent keys."""
    defaults = MessageBuilderOptions()
    return MessageBuilderOptions(
        prefix=raw.get("prefix", defaults.prefix),
        prefix_separator=raw.get("prefix_separator", defaults.prefix_separator),
        issue_separator=raw.get("issue_separator", defaults.issue_separator),
        union_separator=raw.get("union_separator", defaults.union_separator),
        include_path=raw.get("include_path", defaults.include_path),
        max_issues_in_message=raw.get("max_issues_in_message", defaults.max_issues_in_message),
        allowed_values=_values_display(raw.get("allowed_values"), defaults.allowed_values),
        unrecognized_keys=_values_display(raw.get("unrecognized_keys"), defaults.unrecognized_keys),
        display_invalid_format_details=raw.get(
            "display_invalid_format_details", defaults.display_invalid_format_details
        ),
        report_input=raw.get("report_input", defaults.report_input),
        number_localization=raw.get("number_localization", defaults.number_localization),
        date_localization=raw.get("date_localization", defaults.date_localization),
    )


def _values_display(section: dict[str, Any] | None, default: ValuesDisplayOptions) -> ValuesDisplayOptions:
    if not section:
        return default
    return ValuesDisplayOptions(
        separator=section.get("separator", default.separator),
        last_separator=section.get("last_separator", default.last_separator),
        quote=section.get("quote", default.quote),
        max_to_display=section.get("max_to_display", default.max_to_display),
    )
