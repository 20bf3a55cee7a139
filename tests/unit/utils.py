"""Test doubles and builders shared by the unit tests."""

from typing import Any

from yousync.github.abc import SourceTrackerClientBase
from yousync.synchronize.models import (
    ChangeEvent,
    FeedPage,
    FeedStatus,
    IssueState,
    IssueStateReason,
    Project,
    SourceIssue,
    TargetIssueData,
)
from yousync.youtrack.abc import TargetTrackerClientBase

PROJECT = Project(id="0-1", name="Demo")


def make_issue(
    issue_id: int = 1,
    title: str = "Bug",
    body: str | None = None,
    state: IssueState | str = IssueState.OPEN,
    state_reason: IssueStateReason | None = None,
) -> SourceIssue:
    """Build a source issue snapshot."""
    return SourceIssue(id=issue_id, title=title, body=body, state=state, state_reason=state_reason)


def make_event(event_id: int, kind: str, issue: SourceIssue) -> ChangeEvent:
    """Build a change event."""
    return ChangeEvent(id=event_id, kind=kind, issue=issue)


class FakeSourceClient(SourceTrackerClientBase):
    """Source client serving a fixed issue list and a scripted sequence of feed pages."""

    def __init__(self, issues: list[SourceIssue] | None = None, pages: list[FeedPage] | None = None) -> None:
        """Initialize the fake with issues and feed pages to serve."""
        self.issues = issues or []
        self.pages = list(pages or [])
        self.tokens_seen: list[str | None] = []

    async def list_all_issues(self) -> list[SourceIssue]:
        """Return the configured issues."""
        return list(self.issues)

    async def poll_events(self, token: str | None = None) -> FeedPage:
        """Return the next scripted page, or an unchanged page once the script is exhausted."""
        self.tokens_seen.append(token)
        if not self.pages:
            return FeedPage(status=FeedStatus.UNCHANGED, token=token)
        return self.pages.pop(0)


class FakeTargetClient(TargetTrackerClientBase):
    """Target client keeping issues in memory and recording every call."""

    def __init__(self, projects: list[Project] | None = None, fail_on: set[str] | None = None) -> None:
        """Initialize the fake with the projects it knows and the operations that should fail."""
        self.projects = [PROJECT] if projects is None else projects
        self.fail_on = fail_on or set()
        self.issues: dict[str, TargetIssueData] = {}
        self.calls: list[tuple[str, Any, TargetIssueData]] = []
        self._next_id = 1

    async def find_project(self, query: str) -> list[Project]:
        """Return every known project."""
        return list(self.projects)

    async def create_issue(self, project_id: str, data: TargetIssueData) -> str:
        """Store the issue and return a sequential id."""
        self.calls.append(("create", project_id, data))
        if "create" in self.fail_on:
            raise RuntimeError("create failed")
        issue_id = f"T{self._next_id}"
        self._next_id += 1
        self.issues[issue_id] = data
        return issue_id

    async def update_issue(self, issue_id: str, data: TargetIssueData) -> None:
        """Overwrite the stored issue."""
        self.calls.append(("update", issue_id, data))
        if "update" in self.fail_on:
            raise RuntimeError("update failed")
        self.issues[issue_id] = data

    def calls_of(self, kind: str) -> list[tuple[str, Any, TargetIssueData]]:
        """Return the recorded calls of one kind."""
        return [call for call in self.calls if call[0] == kind]
