"""Typed module-level constants shared across issue_explainer."""
