"""CLI entrypoint for issue-explainer."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from issue_explainer import __version__
from issue_explainer.config import format_diagnostics, load_options, validate_options_file
from issue_explainer.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from issue_explainer.conversion import from_issue_tree
from issue_explainer.exceptions import ConfigError
from issue_explainer.types.common import JsonValue
from issue_explainer.types.options import MessageBuilderOptions
from issue_explainer.utils.path import join_path

logger = logging.getLogger(__name__)

_YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    explain = subparsers.add_parser("explain", help="Print the message for an issue tree file")
    explain.add_argument("file", type=Path, help="JSON or YAML file holding an issue tree")
    explain.add_argument("-c", "--config", type=Path, help="Explicit options file")
    explain.add_argument("--no-prefix", action="store_true", help="Omit the message prefix")
    explain.add_argument("--max-issues", type=int, default=None, help="Maximum number of issues in the message")
    explain.add_argument("--show-details", action="store_true", help="List each issue code and path after the message")
    explain.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    validate = subparsers.add_parser("validate-config", help="Validate an options file")
    validate.add_argument("-c", "--config", type=Path, required=True, help="Options file to validate")
    validate.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)
    if args.command != "explain":
        parser.error(f"Unsupported command: {args.command}")

    if args.max_issues is not None and args.max_issues < 0:
        print("Configuration error: --max-issues must be >= 0", file=sys.stderr)
        return 2

    try:
        options = _resolve_options(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        tree = _read_tree(args.file)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Input error: cannot read {args.file}: {exc}", file=sys.stderr)
        return 2

    try:
        error = from_issue_tree(tree, options)
    except TypeError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2

    print(error.message)
    if args.show_details:
        for issue in error.details:
            location = join_path(issue.path) or "(root)"
            print(f"  {issue.code} at {location}")
    return 0


def _resolve_options(args: argparse.Namespace) -> MessageBuilderOptions:
    options = load_options(args.config)
    overrides: dict[str, Any] = {}
    if args.no_prefix:
        overrides["prefix"] = None
    if args.max_issues is not None:
        overrides["max_issues_in_message"] = args.max_issues
    return dataclasses.replace(options, **overrides) if overrides else options


def _read_tree(path: Path) -> JsonValue:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run options file validation and report results."""
    errors = validate_options_file(args.config, explicit=True)
    if errors:
        print(format_diagnostics(errors), file=sys.stderr)
        return 2

    logger.debug("Options file %s passed validation", args.config)
    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
