"""Data models for gh-download."""

from ghdownload.models.release import Release, Asset

__all__ = ["Release", "Asset"]
