"""Contains results of application execution."""

from yousync.synchronize.models import IssueMapping, SyncDecision


class BootstrapResult:
    """Contains results of the initial issue import."""

    def __init__(self, mapping: IssueMapping, duplicate_issue_ids: list[int] | None = None) -> None:
        """Initialize the result with the mapping and the source ids listed more than once."""
        self.mapping = mapping
        self.duplicate_issue_ids = duplicate_issue_ids or []


class SyncCycleResult:
    """Contains results of one poll and dispatch cycle."""

    def __init__(self, modified: bool, decisions: list[SyncDecision] | None = None) -> None:
        """Initialize the result with whether the feed changed and one decision per event."""
        self.modified = modified
        self.decisions = decisions or []

    def count(self, decision: SyncDecision) -> int:
        """Number of events that ended with the given decision."""
        return sum(1 for d in self.decisions if d == decision)
