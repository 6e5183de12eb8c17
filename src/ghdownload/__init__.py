"""gh-download - download files from GitHub releases."""

__version__ = "0.1.0"
