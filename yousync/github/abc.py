"""Base ABC for source tracker clients."""

from abc import ABC, abstractmethod

from yousync.synchronize.models import FeedPage, SourceIssue


class SourceTrackerClientBase(ABC):
    """Base ABC for source tracker clients."""

    @abstractmethod
    async def list_all_issues(self) -> list[SourceIssue]:
        """List every issue of the repository, all pages merged, pull requests excluded."""
        pass

    @abstractmethod
    async def poll_events(self, token: str | None = None) -> FeedPage:
        """Conditionally fetch the latest page of the issue event feed."""
        pass
