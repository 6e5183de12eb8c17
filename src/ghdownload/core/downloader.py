"""Release downloads with progress reporting."""

import logging
from pathlib import Path

import httpx
from rich.console import Console
from rich.progress import (
    Progress,
    BarColumn,
    DownloadColumn,
    TransferSpeedColumn,
    TimeRemainingColumn,
)

from ghdownload.core import presenter
from ghdownload.core.config import DownloadConfig, check_archive_format
from ghdownload.core.errors import ApiError, DownloadError, InvalidPatternError, NoMatchError
from ghdownload.core.github import GitHubClient, parse_repo_spec
from ghdownload.core.patterns import filter_assets
from ghdownload.models.release import Asset

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192

# Ref used for source archives when no tag is given: tip of the default branch
DEFAULT_REF = "HEAD"


def archive_filename(repo: str, ref: str, archive_format: str) -> str:
    """File name for a source archive, e.g. ``owner-repo-v1.0.zip``."""
    return f"{repo.replace('/', '-')}-{ref}.{archive_format}"


def _ensure_dir(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DownloadError.wrap("failed to create directory", e) from e


def _content_length(response: httpx.Response) -> int:
    value = response.headers.get("content-length", "")
    return int(value) if value.isdigit() else 0


class ReleaseDownloader:
    """Resolves a release and lists or downloads what it holds."""

    def __init__(self, client: GitHubClient, console: Console | None = None):
        self.client = client
        self.console = console or Console()

    def _print(self, *lines: str, end: str = "\n") -> None:
        for line in lines:
            self.console.print(line, markup=False, highlight=False, soft_wrap=True, end=end)

    def run(self, config: DownloadConfig) -> list[Path]:
        """Execute one invocation of the tool.

        Exactly one of these happens, first match wins: list releases,
        list assets, download the source archive, download matching assets.

        Returns:
            Paths of the files written (empty when only listing)
        """
        config.require_repository()
        repo = parse_repo_spec(config.repository)

        if config.list_releases:
            try:
                releases = self.client.list_releases(repo)
            except ApiError as e:
                raise ApiError.wrap("failed to get releases", e) from e
            self._print(*presenter.format_releases(releases, repo))
            return []

        try:
            release = self.client.get_release(repo, config.tag)
        except ApiError as e:
            raise ApiError.wrap("failed to get release", e) from e

        self._print(presenter.format_release_header(release, repo, config.tag))

        if config.list_assets:
            self._print(*presenter.format_assets(release.assets, config.pattern))
            return []

        if config.archive:
            return [self.download_archive(repo, config.tag, config.archive, config.directory)]

        try:
            matching = filter_assets(release.assets, config.pattern)
        except InvalidPatternError as e:
            raise InvalidPatternError.wrap("failed to filter assets", e) from e

        if not matching:
            raise NoMatchError(f"no assets found matching pattern '{config.pattern}'")

        self._print(f"Found {len(matching)} matching assets to download to {config.directory}:")
        for asset in matching:
            self._print(f"  - {asset.name} ({asset.size} bytes)")

        return self.download_assets(matching, config.directory)

    def download_archive(
        self, repo: str, tag: str | None, archive_format: str, directory: str
    ) -> Path:
        """Download the source archive of ``repo`` at ``tag`` (default branch if unset)."""
        check_archive_format(archive_format)

        ref = tag or DEFAULT_REF
        dest = Path(directory)
        file_path = dest / archive_filename(repo, ref, archive_format)

        try:
            with self.client.open_archive(repo, ref, archive_format) as response:
                _ensure_dir(dest)
                self._write(response, file_path, show_progress=self.console.is_terminal)
        except ApiError as e:
            raise ApiError.wrap("failed to download archive", e) from e

        self._print(f"Downloaded archive: {file_path}")
        return file_path

    def download_assets(self, assets: list[Asset], directory: str) -> list[Path]:
        """Download assets one after another.

        The first failure stops the loop; files already written stay on disk.
        Existing files with the same name are overwritten.
        """
        dest = Path(directory)
        _ensure_dir(dest)

        show_progress = self.console.is_terminal
        written_paths = []
        for asset in assets:
            file_path = dest / asset.name
            if not show_progress:
                self._print(f"Downloading {asset.name}... ", end="")

            try:
                with self.client.open_asset(asset) as response:
                    written = self._write(response, file_path, show_progress=show_progress)
            except ApiError as e:
                raise ApiError.wrap(f"failed to download {asset.name}", e) from e

            if show_progress:
                self._print(f"Downloaded {asset.name} ({written} bytes)")
            else:
                self._print(f"done ({written} bytes)")
            written_paths.append(file_path)

        self._print(f"Successfully downloaded {len(assets)} assets to {directory}")
        return written_paths

    def _write(self, response: httpx.Response, file_path: Path, show_progress: bool) -> int:
        """Stream the response body into ``file_path``, returning bytes written."""
        try:
            f = open(file_path, "wb")
        except OSError as e:
            raise DownloadError.wrap(f"failed to create file {file_path}", e) from e

        written = 0
        try:
            total = _content_length(response)
            if show_progress and total > 0:
                with Progress(
                    "[progress.description]{task.description}",
                    BarColumn(),
                    DownloadColumn(),
                    TransferSpeedColumn(),
                    TimeRemainingColumn(),
                    console=self.console,
                    transient=True,
                ) as progress:
                    task = progress.add_task(f"Downloading {file_path.name}", total=total)
                    for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
                        written += len(chunk)
                        progress.update(task, advance=len(chunk))
            else:
                for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
                    written += len(chunk)
        except httpx.HTTPError as e:
            raise ApiError(f"failed to read response: {e}") from e
        except OSError as e:
            raise DownloadError.wrap(f"failed to write {file_path}", e) from e
        finally:
            try:
                f.close()
            except OSError as e:
                logger.warning("Failed to close file %s: %s", file_path, e)

        logger.debug("Wrote %d bytes to %s", written, file_path)
        return written
