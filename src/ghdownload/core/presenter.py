"""Text formatting for release and asset listings.

Functions here only build lines; printing is left to the caller.
"""

from collections.abc import Sequence

from ghdownload.core.errors import InvalidPatternError
from ghdownload.core.patterns import filter_assets
from ghdownload.models.release import Asset, Release


def format_date(value: str) -> str:
    """Reduce an ISO 8601 timestamp to its ``YYYY-MM-DD`` prefix."""
    if len(value) >= 10:
        return value[:10]
    return value


def format_release_header(release: Release, repo: str, tag: str | None) -> str:
    """One-line summary of the resolved release."""
    where = f"(tag: {tag})" if tag else "(latest)"
    return f"Release: {release.name} {where} from {repo}"


def format_assets(assets: Sequence[Asset], pattern: str) -> list[str]:
    """Numbered listing of the assets matching ``pattern``.

    No match is not an error here, just a message.
    """
    try:
        matching = filter_assets(assets, pattern)
    except InvalidPatternError as e:
        raise InvalidPatternError.wrap("failed to filter assets", e) from e

    if not matching:
        return [f"No assets found matching pattern '{pattern}'"]

    lines = ["", f"Assets matching pattern '{pattern}':"]
    for i, asset in enumerate(matching, start=1):
        if i > 1:
            lines.append("")
        lines.append(f"{i}. {asset.name}")
        lines.append(f"   Size: {asset.size} bytes")
        lines.append(f"   Content-Type: {asset.content_type}")

    lines += ["", f"Total: {len(matching)} assets"]
    return lines


def format_release_title(release: Release) -> str:
    """Display name, tag when it differs from the name, and status labels."""
    title = release.name
    if release.tag_name and release.tag_name != release.name:
        title += f" ({release.tag_name})"
    if release.status:
        title += f" [{', '.join(release.status)}]"
    return title


def format_releases(releases: Sequence[Release], repo: str) -> list[str]:
    """Numbered listing of releases in the order given."""
    if not releases:
        return [f"No releases found for {repo}"]

    lines = [f"Releases for {repo}:", ""]
    for i, release in enumerate(releases, start=1):
        if i > 1:
            lines.append("")
        lines.append(f"{i}. {format_release_title(release)}")
        if release.published_at:
            lines.append(f"   Published: {format_date(release.published_at)}")
        lines.append(f"   Assets: {len(release.assets)}")

    lines += ["", f"Total: {len(releases)} releases"]
    return lines
