"""Path rendering and value stringification helpers."""
