"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import httpx
import typer
from dotenv import load_dotenv
from githubkit.exception import GitHubException
from typer import Argument, Option
from typing_extensions import Annotated

from yousync.configuration.driver import get_sync_config
from yousync.synchronize.driver import run_sync_workflow
from yousync.synchronize.exceptions import YouSyncError
from yousync.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(
    name="yousync",
    help="A tool for synchronisation between GitHub and YouTrack.",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


@typer_app.command(name="sync")
def sync_cli(
    owner: Annotated[str, Argument(help="Owner of the repository.")],
    repo: Annotated[str, Argument(help="Name of the repository.")],
    youtrack: Annotated[str, Argument(help="YouTrack host URL.")],
    project: Annotated[str, Argument(help="YouTrack project name (query); the first match is used.")],
    github_token: Annotated[
        str | None, Option(envvar="YOUSYNC_GITHUB_TOKEN", help="GitHub token. Prompted for when unset.", show_default=False)
    ] = None,
    youtrack_token: Annotated[
        str | None, Option(envvar="YOUSYNC_YOUTRACK_TOKEN", help="YouTrack permanent token. Prompted for when unset.", show_default=False)
    ] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    poll_interval: Annotated[float | None, Option(envvar="POLL_INTERVAL", help="Seconds to wait between two polls of the event feed.")] = None,
    dedup_capacity: Annotated[int | None, Option(envvar="DEDUP_CAPACITY", help="Number of recent event ids remembered.")] = None,
    request_timeout: Annotated[
        float | None, Option(envvar="REQUEST_TIMEOUT", help="Timeout in seconds for YouTrack requests (0 disables it).")
    ] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Import every issue of a GitHub repository into YouTrack, then keep YouTrack in sync with the issue event feed.

    Runs until interrupted or until an error occurs. Mappings are kept in
    memory only, so every run starts with a fresh import.
    """
    try:
        config = get_sync_config(
            owner=owner,
            repo=repo,
            youtrack_url=youtrack,
            project=project,
            github_token=github_token,
            youtrack_token=youtrack_token,
            github_api_url=github_api_url,
            poll_interval=poll_interval,
            dedup_capacity=dedup_capacity,
            request_timeout=request_timeout,
            debug=debug,
        )
        configure_logging(debug=config.debug)
        asyncio.run(run_sync_workflow(config))
    except (YouSyncError, GitHubException, httpx.HTTPError, RuntimeError, ValueError) as e:
        typer.echo(f"Error occurred: {e}", err=True)
        raise typer.Exit(1) from e
    except KeyboardInterrupt:
        typer.echo("Interrupted", err=True)
        raise typer.Exit(130) from None


if __name__ == "__main__":
    typer_app()
