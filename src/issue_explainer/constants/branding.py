"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "issue-explainer"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: turn validation issue trees into readable messages"
