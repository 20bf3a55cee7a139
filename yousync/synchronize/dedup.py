"""Bounded window of recently seen event ids."""

from collections import deque
from collections.abc import Hashable, Iterator

from yousync.utils.constants import DEFAULT_DEDUP_CAPACITY


class DedupWindow:
    """Bounded FIFO set of event ids.

    The event feed returns a sliding page of the latest events, so successive
    polls overlap. Remembering the last few ids is enough to avoid
    dispatching an event twice without keeping a persistent cursor.

    The window does not deduplicate within itself: callers check
    ``contains`` before ``insert``.
    """

    def __init__(self, capacity: int = DEFAULT_DEDUP_CAPACITY) -> None:
        """Initialize an empty window holding at most ``capacity`` ids."""
        if capacity < 1:
            raise ValueError(f"Dedup window capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: deque[Hashable] = deque()

    def contains(self, event_id: Hashable) -> bool:
        """Return True if the id is currently held."""
        return event_id in self._entries

    def insert(self, event_id: Hashable) -> None:
        """Record the id as the newest entry, evicting the oldest when full."""
        if len(self._entries) == self.capacity:
            self._entries.popleft()
        self._entries.append(event_id)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"DedupWindow(capacity={self.capacity}, entries={list(self._entries)!r})"
