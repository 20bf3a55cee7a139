"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio

from yousync.configuration import reconcile
from yousync.configuration.models import SyncConfig


def get_sync_config(
    owner: str | None,
    repo: str | None,
    youtrack_url: str | None,
    project: str | None,
    github_token: str | None = None,
    youtrack_token: str | None = None,
    github_api_url: str | None = None,
    poll_interval: float | None = None,
    dedup_capacity: int | None = None,
    request_timeout: float | None = None,
    debug: bool = False,
) -> SyncConfig:
    """Synchronously get the reconciled sync configuration."""
    return asyncio.run(
        reconcile.reconcile_sync_configuration(
            cli_owner=owner,
            cli_repo=repo,
            cli_youtrack_url=youtrack_url,
            cli_project=project,
            cli_github_token=github_token,
            cli_youtrack_token=youtrack_token,
            cli_github_api_url=github_api_url,
            cli_poll_interval=poll_interval,
            cli_dedup_capacity=dedup_capacity,
            cli_request_timeout=request_timeout,
            cli_debug=debug,
        )
    )
