"""Tests for release and asset listing output."""

import pytest

from ghdownload.core.errors import InvalidPatternError
from ghdownload.core.presenter import (
    format_assets,
    format_date,
    format_release_header,
    format_release_title,
    format_releases,
)
from ghdownload.models.release import Release

from conftest import asset_json, release_json


def make_release(**kwargs) -> Release:
    return Release.from_api_response(release_json(**kwargs))


class TestFormatAssets:
    def test_numbered_listing(self):
        release = make_release(
            assets=[
                asset_json(1, "a.zip", size=100, content_type="application/zip"),
                asset_json(2, "b.tar.gz", size=200, content_type="application/gzip"),
            ]
        )

        assert format_assets(release.assets, "*") == [
            "",
            "Assets matching pattern '*':",
            "1. a.zip",
            "   Size: 100 bytes",
            "   Content-Type: application/zip",
            "",
            "2. b.tar.gz",
            "   Size: 200 bytes",
            "   Content-Type: application/gzip",
            "",
            "Total: 2 assets",
        ]

    def test_pattern_is_applied(self):
        release = make_release(assets=[asset_json(1, "a.zip"), asset_json(2, "b.tar.gz")])
        lines = format_assets(release.assets, "*.tar.gz")
        assert "1. b.tar.gz" in lines
        assert "Total: 1 assets" in lines
        assert not any("a.zip" in line for line in lines)

    @pytest.mark.parametrize("pattern", ["*", "*.deb", "a?c"])
    def test_empty_listing_is_a_message(self, pattern):
        assert format_assets([], pattern) == [f"No assets found matching pattern '{pattern}'"]

    def test_malformed_pattern_without_assets_is_a_message(self):
        assert format_assets([], "[") == ["No assets found matching pattern '['"]

    def test_invalid_pattern_is_wrapped(self):
        release = make_release(assets=[asset_json(1, "a.zip")])
        with pytest.raises(InvalidPatternError) as exc_info:
            format_assets(release.assets, "[")
        assert str(exc_info.value).startswith("failed to filter assets: invalid pattern '['")


class TestFormatReleases:
    def test_tag_hidden_when_equal_to_name(self):
        assert format_release_title(make_release(tag="v1.0.0", name="v1.0.0")) == "v1.0.0"

    def test_tag_shown_when_different_from_name(self):
        title = format_release_title(make_release(tag="v1.0.0", name="First release"))
        assert title == "First release (v1.0.0)"

    def test_tag_comparison_is_exact(self):
        title = format_release_title(make_release(tag="V1.0.0", name="v1.0.0"))
        assert title == "v1.0.0 (V1.0.0)"

    @pytest.mark.parametrize(
        "draft, prerelease, suffix",
        [
            (True, False, " [draft]"),
            (False, True, " [prerelease]"),
            (True, True, " [draft, prerelease]"),
            (False, False, ""),
        ],
    )
    def test_status_suffix(self, draft, prerelease, suffix):
        release = make_release(tag="v1", name="v1", draft=draft, prerelease=prerelease)
        assert format_release_title(release) == f"v1{suffix}"

    def test_full_listing(self):
        releases = [
            make_release(tag="v2.0.0", name="Two", assets=[asset_json(1, "a"), asset_json(2, "b")]),
            make_release(tag="v1.0.0", prerelease=True, published_at=""),
        ]

        assert format_releases(releases, "owner/repo") == [
            "Releases for owner/repo:",
            "",
            "1. Two (v2.0.0)",
            "   Published: 2023-12-01",
            "   Assets: 2",
            "",
            "2. v1.0.0 [prerelease]",
            "   Assets: 0",
            "",
            "Total: 2 releases",
        ]

    def test_no_releases(self):
        assert format_releases([], "owner/repo") == ["No releases found for owner/repo"]


def test_format_date_keeps_short_values():
    assert format_date("2023-12-01T10:30:00Z") == "2023-12-01"
    assert format_date("2023") == "2023"
    assert format_date("") == ""


def test_release_header():
    release = make_release(tag="v1.0.0", name="First")
    assert format_release_header(release, "owner/repo", "v1.0.0") == (
        "Release: First (tag: v1.0.0) from owner/repo"
    )
    assert format_release_header(release, "owner/repo", None) == (
        "Release: First (latest) from owner/repo"
    )
