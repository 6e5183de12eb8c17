"""CLI entry point for gh-download."""

import click
from rich.console import Console

from ghdownload import __version__
from ghdownload.core.config import DownloadConfig
from ghdownload.core.downloader import ReleaseDownloader
from ghdownload.core.errors import GhDownloadError
from ghdownload.core.github import GitHubClient
from ghdownload.core.log_utils import setup_logging

console = Console()
err_console = Console(stderr=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("repository", required=False)
@click.argument("positional_tag", metavar="[TAG]", required=False)
@click.option("--repo", "-R", "repo", help="Repository in format owner/repo")
@click.option("--tag", "-t", "tag", help="Release tag (defaults to latest)")
@click.option(
    "--pattern", "-p", default="*", show_default=True, help="Glob pattern to match asset names"
)
@click.option(
    "--dir", "-d", "directory", default=".", show_default=True, help="Directory to download files to"
)
@click.option("--archive", help="Download source archive (zip or tar.gz)")
@click.option("--list", "-l", "list_assets", is_flag=True, help="List release assets without downloading")
@click.option("--releases", "-r", "list_releases", is_flag=True, help="List all releases")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.version_option(version=__version__, prog_name="gh-download")
def main(
    repository: str | None,
    positional_tag: str | None,
    repo: str | None,
    tag: str | None,
    pattern: str,
    directory: str,
    archive: str | None,
    list_assets: bool,
    list_releases: bool,
    verbose: bool,
):
    """gh-download - Download files from GitHub releases.

    REPOSITORY is owner/repo (or a GitHub URL); TAG defaults to the latest
    release. Both can also be given with --repo and --tag.

    Examples:

    \b
        gh-download owner/repo                       # all assets of the latest release
        gh-download owner/repo v1.0.0                # all assets of v1.0.0
        gh-download -R owner/repo -p "*.tar.gz"      # only .tar.gz files
        gh-download --repo owner/repo --archive zip  # source code as zip
        gh-download --repo owner/repo --list         # list assets without downloading
        gh-download --repo owner/repo --releases     # list all releases
    """
    setup_logging(verbose)

    # Positional arguments only fill what the flags left unset
    if not repo:
        repo = repository
    if not tag:
        tag = positional_tag

    config = DownloadConfig(
        repository=repo or "",
        tag=tag or None,
        pattern=pattern,
        directory=directory,
        archive=archive or "",
        list_assets=list_assets,
        list_releases=list_releases,
    )

    try:
        config.require_repository()
        with GitHubClient() as client:
            ReleaseDownloader(client, console).run(config)
    except GhDownloadError as e:
        err_console.print(
            f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
