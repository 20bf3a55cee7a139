"""Contains unit tests for the conditional polling of the event feed."""

import pytest

from tests.unit.utils import FakeSourceClient, make_event, make_issue
from yousync.synchronize.models import FeedPage, FeedStatus
from yousync.synchronize.poller import EventPoller


@pytest.mark.asyncio
async def test_unchanged_keeps_token() -> None:
    """Test that a not-modified answer returns unchanged and leaves the token alone."""
    source = FakeSourceClient(pages=[FeedPage(status=FeedStatus.UNCHANGED, token=None)])
    poller = EventPoller(source, token="T0")

    result = await poller.poll()

    assert result.modified is False
    assert result.events == []
    assert poller.token == "T0"
    assert source.tokens_seen == ["T0"]


@pytest.mark.asyncio
async def test_modified_replaces_token_and_keeps_feed_order() -> None:
    """Test that a modified answer returns the events in feed order and stores the new token."""
    issue = make_issue()
    events = [make_event(3, "renamed", issue), make_event(1, "closed", issue), make_event(2, "reopened", issue)]
    source = FakeSourceClient(pages=[FeedPage(status=FeedStatus.MODIFIED, token="T1", events=events)])
    poller = EventPoller(source, token="T0")

    result = await poller.poll()

    assert result.modified is True
    assert [event.id for event in result.events] == [3, 1, 2]
    assert poller.token == "T1"


@pytest.mark.asyncio
async def test_modified_without_token_drops_previous_token() -> None:
    """Test that a modified answer without a token clears the previous one."""
    source = FakeSourceClient(pages=[FeedPage(status=FeedStatus.MODIFIED, token=None, events=[])])
    poller = EventPoller(source, token="T0")

    await poller.poll()

    assert poller.token is None


@pytest.mark.asyncio
async def test_token_is_sent_on_next_poll() -> None:
    """Test that the token of one answer is submitted with the following poll."""
    source = FakeSourceClient(
        pages=[
            FeedPage(status=FeedStatus.MODIFIED, token="T1"),
            FeedPage(status=FeedStatus.UNCHANGED, token="T1"),
            FeedPage(status=FeedStatus.MODIFIED, token="T2"),
        ]
    )
    poller = EventPoller(source)

    await poller.poll()
    await poller.poll()
    await poller.poll()

    assert source.tokens_seen == [None, "T1", "T1"]
    assert poller.token == "T2"


@pytest.mark.asyncio
async def test_prime_discards_events() -> None:
    """Test that priming stores the token without surfacing the events."""
    issue = make_issue()
    source = FakeSourceClient(pages=[FeedPage(status=FeedStatus.MODIFIED, token="T0", events=[make_event(1, "closed", issue)])])
    poller = EventPoller(source)

    await poller.prime()

    assert poller.token == "T0"
    assert source.tokens_seen == [None]
