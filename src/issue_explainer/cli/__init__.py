"""Command-line interface for issue_explainer."""
