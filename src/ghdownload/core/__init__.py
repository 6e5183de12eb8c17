"""Core functionality for gh-download."""
