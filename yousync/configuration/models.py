"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field

from yousync.utils.constants import (
    DEFAULT_DEDUP_CAPACITY,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
)


@dataclass
class SyncConfig:
    """Configuration of a synchronization run."""

    owner: str
    repo: str
    youtrack_url: str
    project_query: str
    github_token: str = field(repr=False)
    youtrack_token: str = field(repr=False)
    github_api_url: str = DEFAULT_GITHUB_API_URL
    poll_interval: float = DEFAULT_POLL_INTERVAL
    dedup_capacity: int = DEFAULT_DEDUP_CAPACITY
    request_timeout: float | None = DEFAULT_REQUEST_TIMEOUT
    debug: bool = False
