"""Base ABC for target tracker clients."""

from abc import ABC, abstractmethod

from yousync.synchronize.models import Project, TargetIssueData


class TargetTrackerClientBase(ABC):
    """Base ABC for target tracker clients."""

    @abstractmethod
    async def find_project(self, query: str) -> list[Project]:
        """Return the first page of projects matching a query."""
        pass

    @abstractmethod
    async def create_issue(self, project_id: str, data: TargetIssueData) -> str:
        """Create an issue in a project and return its id."""
        pass

    @abstractmethod
    async def update_issue(self, issue_id: str, data: TargetIssueData) -> None:
        """Overwrite an existing issue with the given data."""
        pass
