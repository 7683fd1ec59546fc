"""Path features."""
