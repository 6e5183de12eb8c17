"""Configuration for pytest fixtures used in gh-download tests."""

from __future__ import annotations

import io

import httpx
import pytest
from rich.console import Console

from ghdownload.core.github import GitHubClient

API = "https://api.github.com"


def asset_json(asset_id: int, name: str, size: int = 10, content_type: str = "application/zip") -> dict:
    """Asset record shaped like the GitHub API returns it."""
    return {
        "id": asset_id,
        "name": name,
        "content_type": content_type,
        "size": size,
        "browser_download_url": f"https://github.com/owner/repo/releases/download/v1.0.0/{name}",
        "url": f"{API}/repos/owner/repo/releases/assets/{asset_id}",
    }


def release_json(
    tag: str = "v1.0.0",
    name: str | None = None,
    assets: list[dict] | None = None,
    draft: bool = False,
    prerelease: bool = False,
    published_at: str = "2023-12-01T10:30:00Z",
) -> dict:
    """Release record shaped like the GitHub API returns it."""
    return {
        "id": 1,
        "tag_name": tag,
        "name": tag if name is None else name,
        "body": "Release notes",
        "draft": draft,
        "prerelease": prerelease,
        "created_at": "2023-11-30T08:00:00Z",
        "published_at": published_at,
        "assets": assets or [],
    }


class FakeGitHub:
    """Answers requests by URL path and records every request it sees.

    Unknown paths get a GitHub-style 404.
    """

    def __init__(self) -> None:
        self.routes: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, status_code: int = 200, **response_kwargs) -> None:
        self.routes[path] = {"status_code": status_code, **response_kwargs}

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        kwargs = self.routes.get(request.url.path)
        if kwargs is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return httpx.Response(**kwargs)


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def http(fake_github: FakeGitHub):
    client = httpx.Client(
        base_url=API,
        transport=httpx.MockTransport(fake_github),
        follow_redirects=True,
    )
    yield client
    client.close()


@pytest.fixture
def client(http: httpx.Client) -> GitHubClient:
    return GitHubClient(http=http)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(file=output, width=200)
