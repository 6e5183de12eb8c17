"""GitHub API client for fetching releases and streaming downloads."""

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from urllib.parse import quote

import httpx

from ghdownload import __version__
from ghdownload.core.config import ApiSettings
from ghdownload.core.errors import ApiError, ConfigError
from ghdownload.models.release import Asset, Release

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
OCTET_STREAM = "application/octet-stream"

# Archive format -> REST endpoint segment
ARCHIVE_ENDPOINTS = {
    "zip": "zipball",
    "tar.gz": "tarball",
}


def parse_repo_spec(spec: str) -> str:
    """Normalize a repo spec to ``owner/repo``.

    Accepts:
    - owner/repo
    - https://github.com/owner/repo
    - github.com/owner/repo
    """
    spec = spec.strip()

    # Handle full URLs
    url_pattern = r"(?:https?://)?github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$"
    match = re.match(url_pattern, spec)
    if match:
        return f"{match.group(1)}/{match.group(2)}"

    parts = spec.split("/")
    if len(parts) == 2 and all(parts):
        return spec

    raise ConfigError(f"invalid repository '{spec}': use 'owner/repo' or a GitHub URL")


def _describe(error: httpx.HTTPError) -> str:
    return str(error) or error.__class__.__name__


def _api_error(response: httpx.Response) -> ApiError:
    """Build an ApiError from a non-success response."""
    message = response.reason_phrase or "request failed"
    try:
        response.read()
        payload = response.json()
    except (httpx.HTTPError, ValueError):
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        message = payload["message"]

    return ApiError(
        f"HTTP {response.status_code}: {message} ({response.request.url})",
        status_code=response.status_code,
    )


class GitHubClient:
    """Client for interacting with GitHub API.

    An ``httpx.Client`` can be passed in to replace the network; otherwise
    one is built from ``settings`` (read from the environment by default)
    and closed together with this client.
    """

    def __init__(
        self,
        settings: ApiSettings | None = None,
        http: httpx.Client | None = None,
    ):
        self._owns_client = http is None
        if http is None:
            settings = settings or ApiSettings.from_env()
            headers = {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": f"gh-download/{__version__}",
            }
            if settings.token:
                headers["Authorization"] = f"Bearer {settings.token}"
            http = httpx.Client(
                base_url=settings.api_url,
                headers=headers,
                timeout=settings.timeout,
                follow_redirects=True,
            )
        self.client = http

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def _get_json(self, path: str):
        logger.debug("GET %s", path)
        try:
            response = self.client.get(path)
        except httpx.HTTPError as e:
            raise ApiError(_describe(e)) from e

        if not response.is_success:
            raise _api_error(response)

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"invalid JSON in response from {response.request.url}") from e

    def get_release(self, repo: str, tag: str | None = None) -> Release:
        """Get a release by tag, or the latest release when no tag is given.

        Exactly one request is made; a missing tag is not retried as latest.
        """
        if tag:
            path = f"/repos/{repo}/releases/tags/{quote(tag, safe='')}"
        else:
            path = f"/repos/{repo}/releases/latest"

        return Release.from_api_response(self._get_json(path))

    def list_releases(self, repo: str) -> list[Release]:
        """Get releases for a repository.

        Only the first page the API returns is read.
        """
        data = self._get_json(f"/repos/{repo}/releases")
        return [Release.from_api_response(item) for item in data]

    @contextmanager
    def _stream(self, url: str, headers: dict | None = None) -> Iterator[httpx.Response]:
        logger.debug("GET %s (streaming)", url)
        request = self.client.build_request("GET", url, headers=headers)
        try:
            response = self.client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise ApiError(_describe(e)) from e

        try:
            if not response.is_success:
                raise _api_error(response)
            yield response
        finally:
            try:
                response.close()
            except httpx.HTTPError as e:
                logger.warning("Failed to close response body: %s", e)

    def open_archive(self, repo: str, ref: str, archive_format: str):
        """Stream the source archive of ``repo`` at ``ref``."""
        endpoint = ARCHIVE_ENDPOINTS[archive_format]
        return self._stream(f"/repos/{repo}/{endpoint}/{quote(ref, safe='')}")

    def open_asset(self, asset: Asset):
        """Stream the raw bytes of a release asset."""
        url = asset.url or asset.browser_download_url
        return self._stream(url, headers={"Accept": OCTET_STREAM})
