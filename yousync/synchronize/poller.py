"""Conditional polling of the GitHub issue event feed."""

import structlog

from yousync.github.abc import SourceTrackerClientBase
from yousync.synchronize.models import FeedStatus, PollResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class EventPoller:
    """Polls the source event feed, holding the conditional-fetch token between calls.

    A not-modified answer leaves the token alone. Any other answer replaces
    it outright, even with None when the response carried no ETag.
    """

    def __init__(self, source: SourceTrackerClientBase, token: str | None = None) -> None:
        """Initialize the poller with a source client and an optional starting token."""
        self.source = source
        self.token = token

    async def prime(self) -> None:
        """Fetch the feed once to obtain a starting token, discarding its events."""
        page = await self.source.poll_events(None)
        self.token = page.token
        logger.info("Primed event feed", etag=self.token, discarded_event_count=len(page.events))

    async def poll(self) -> PollResult:
        """Fetch the feed, returning either an unchanged result or the events in feed order."""
        page = await self.source.poll_events(self.token)
        if page.status is FeedStatus.UNCHANGED:
            return PollResult.unchanged()
        self.token = page.token
        return PollResult(modified=True, events=list(page.events))
