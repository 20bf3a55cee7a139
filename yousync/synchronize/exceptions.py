"""Custom exceptions for the synchronize module."""


class YouSyncError(Exception):
    """Base class for errors that end a synchronization run."""

    pass


class ProjectNotFoundError(YouSyncError):
    """Raised when no YouTrack project matches the project query."""

    def __init__(self, query: str) -> None:
        """Initializes the exception with the query that matched nothing."""
        super().__init__(f"Project not found: {query!r}")
        self.query = query


class BootstrapError(YouSyncError):
    """Raised when the initial import fails to create a YouTrack issue."""

    def __init__(self, source_issue_id: int, created: int) -> None:
        """Initializes the exception with the failing source issue."""
        super().__init__(f"Failed to create an issue for source issue {source_issue_id} after creating {created} issue(s)")
        self.source_issue_id = source_issue_id
        self.created = created


class FeedError(YouSyncError):
    """Raised when the issue event feed cannot be fetched or parsed."""

    pass


class DispatchError(YouSyncError):
    """Raised when a change event cannot be applied to YouTrack.

    The event has already been recorded in the dedup window when this is
    raised, so it is not attempted again.
    """

    def __init__(self, event_id: int, source_issue_id: int, action: str) -> None:
        """Initializes the exception with the event that failed."""
        super().__init__(f"Failed to {action} an issue for event {event_id} (source issue {source_issue_id})")
        self.event_id = event_id
        self.source_issue_id = source_issue_id
        self.action = action
