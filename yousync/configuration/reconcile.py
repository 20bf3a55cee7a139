"""Reconciles configuration between CLI arguments, environment variables and interactive prompts."""

from typing import Callable
from urllib.parse import urlparse

import structlog
import typer

from yousync.configuration.env import settings
from yousync.configuration.exceptions import (
    CredentialsUndefinedError,
    InvalidConfigurationElementError,
    RequiredConfigurationElementError,
)
from yousync.configuration.models import SyncConfig

logger = structlog.get_logger(__name__)

SecretPrompt = Callable[[str], str]


def prompt_for_secret(label: str) -> str:
    """Ask for a secret on the terminal without echoing it."""
    return typer.prompt(label, hide_input=True)


async def resolve_token(cli_value: str | None, env_value: str | None, name: str, env_name: str, prompt: SecretPrompt) -> str:
    """Return a token from the CLI, the environment or, failing both, an interactive prompt.

    Raises:
        CredentialsUndefinedError: If the prompt yields an empty token.
    """
    token = cli_value or env_value
    if token:
        return token
    logger.info("Token not set in the environment, prompting", credential=name, env_name=env_name)
    token = prompt(name)
    if not token:
        raise CredentialsUndefinedError(name, env_name)
    return token


async def validate_youtrack_url(youtrack_url: str) -> str:
    """Check that the YouTrack URL is absolute and make it end with a slash.

    Relative API paths are joined onto this URL, so a missing trailing slash
    would drop the last path segment of instances served under a prefix.
    """
    parsed = urlparse(youtrack_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidConfigurationElementError("YouTrack URL", youtrack_url, "expected an absolute http(s) URL")
    return youtrack_url if youtrack_url.endswith("/") else f"{youtrack_url}/"


async def reconcile_sync_configuration(
    cli_owner: str | None,
    cli_repo: str | None,
    cli_youtrack_url: str | None,
    cli_project: str | None,
    cli_github_token: str | None = None,
    cli_youtrack_token: str | None = None,
    cli_github_api_url: str | None = None,
    cli_poll_interval: float | None = None,
    cli_dedup_capacity: int | None = None,
    cli_request_timeout: float | None = None,
    cli_debug: bool = False,
    prompt: SecretPrompt = prompt_for_secret,
) -> SyncConfig:
    """Reconcile the sync configuration.

    CLI values win over environment settings. The project query may be empty
    (it then matches every project) but must be given.

    Raises:
        RequiredConfigurationElementError: If owner, repo, YouTrack URL or project query is missing.
        InvalidConfigurationElementError: If a value is out of range or malformed.
        CredentialsUndefinedError: If a token cannot be obtained.
    """
    if not cli_owner:
        raise RequiredConfigurationElementError("repository owner", "owner")
    if not cli_repo:
        raise RequiredConfigurationElementError("repository name", "repo")
    if not cli_youtrack_url:
        raise RequiredConfigurationElementError("YouTrack URL", "youtrack")
    if cli_project is None:
        raise RequiredConfigurationElementError("project query", "project")

    poll_interval = cli_poll_interval if cli_poll_interval is not None else settings.POLL_INTERVAL
    if poll_interval < 0:
        raise InvalidConfigurationElementError("poll interval", poll_interval, "must not be negative")
    dedup_capacity = cli_dedup_capacity if cli_dedup_capacity is not None else settings.DEDUP_CAPACITY
    if dedup_capacity < 1:
        raise InvalidConfigurationElementError("dedup capacity", dedup_capacity, "must be at least 1")
    request_timeout = cli_request_timeout if cli_request_timeout is not None else settings.REQUEST_TIMEOUT

    youtrack_url = await validate_youtrack_url(cli_youtrack_url)

    github_token = await resolve_token(cli_github_token, settings.YOUSYNC_GITHUB_TOKEN, "GitHub Token", "YOUSYNC_GITHUB_TOKEN", prompt)
    youtrack_token = await resolve_token(cli_youtrack_token, settings.YOUSYNC_YOUTRACK_TOKEN, "YouTrack Token", "YOUSYNC_YOUTRACK_TOKEN", prompt)

    return SyncConfig(
        owner=cli_owner,
        repo=cli_repo,
        youtrack_url=youtrack_url,
        project_query=cli_project,
        github_token=github_token,
        youtrack_token=youtrack_token,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        poll_interval=poll_interval,
        dedup_capacity=dedup_capacity,
        request_timeout=request_timeout if request_timeout and request_timeout > 0 else None,
        debug=cli_debug or settings.DEBUG,
    )
