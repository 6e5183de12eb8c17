"""Configuration for gh-download."""

import os
from dataclasses import dataclass

from ghdownload.core.errors import ConfigError

GITHUB_API_BASE = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0

ARCHIVE_FORMATS = ("zip", "tar.gz")


@dataclass(frozen=True)
class DownloadConfig:
    """What to fetch and where to put it, built once per invocation."""

    repository: str
    tag: str | None = None
    pattern: str = "*"
    directory: str = "."
    archive: str = ""
    list_assets: bool = False
    list_releases: bool = False

    def require_repository(self) -> None:
        """Raise ConfigError unless a repository was given."""
        if not self.repository.strip():
            raise ConfigError("repository is required")


def check_archive_format(archive_format: str) -> None:
    """Raise ConfigError unless the archive format is supported."""
    if archive_format not in ARCHIVE_FORMATS:
        raise ConfigError("archive format must be 'zip' or 'tar.gz'")


@dataclass
class ApiSettings:
    """Connection settings for the GitHub REST API."""

    api_url: str = GITHUB_API_BASE
    token: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Create settings from the environment.

        GH_TOKEN (or GITHUB_TOKEN) authenticates requests, GH_HOST selects a
        GitHub Enterprise host and GH_DOWNLOAD_TIMEOUT overrides the request
        timeout in seconds.
        """
        token = os.environ.get("GH_TOKEN") or os.environ.get("GITHUB_TOKEN") or None

        host = os.environ.get("GH_HOST", "").strip().rstrip("/")
        if host.startswith(("http://", "https://")):
            host = host.split("://", 1)[1]
        if not host or host == "github.com":
            api_url = GITHUB_API_BASE
        else:
            api_url = f"https://{host}/api/v3"

        raw_timeout = os.environ.get("GH_DOWNLOAD_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(
                    f"GH_DOWNLOAD_TIMEOUT must be a number of seconds, got '{raw_timeout}'"
                ) from None
            if timeout <= 0:
                raise ConfigError("GH_DOWNLOAD_TIMEOUT must be positive")

        return cls(api_url=api_url, token=token, timeout=timeout)
