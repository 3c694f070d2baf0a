"""nanolint - eslint diagnostics and fix-on-save for editors."""

__version__ = "0.1.0"
