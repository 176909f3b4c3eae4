"""Lambda-facing API modules."""
