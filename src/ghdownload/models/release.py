"""GitHub release data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Asset:
    """Represents a GitHub release asset."""

    id: int
    name: str
    content_type: str
    size: int
    browser_download_url: str
    url: str  # API download URL, needs Accept: application/octet-stream

    @classmethod
    def from_api_response(cls, data: dict) -> "Asset":
        """Create Asset from GitHub API response."""
        return cls(
            id=data.get("id", 0),
            name=data["name"],
            content_type=data.get("content_type") or "",
            size=data.get("size", 0),
            browser_download_url=data.get("browser_download_url", ""),
            url=data.get("url", ""),
        )


@dataclass(frozen=True)
class Release:
    """Represents a GitHub release."""

    id: int
    tag_name: str
    name: str
    body: str = ""
    draft: bool = False
    prerelease: bool = False
    created_at: str = ""
    published_at: str = ""
    assets: list[Asset] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "Release":
        """Create Release from GitHub API response."""
        assets = [Asset.from_api_response(a) for a in data.get("assets") or []]
        return cls(
            id=data.get("id", 0),
            tag_name=data.get("tag_name") or "",
            name=data.get("name") or "",
            body=data.get("body") or "",
            draft=data.get("draft", False),
            prerelease=data.get("prerelease", False),
            created_at=data.get("created_at") or "",
            published_at=data.get("published_at") or "",
            assets=assets,
        )

    @property
    def status(self) -> list[str]:
        """Status labels in display order."""
        labels = []
        if self.draft:
            labels.append("draft")
        if self.prerelease:
            labels.append("prerelease")
        return labels
