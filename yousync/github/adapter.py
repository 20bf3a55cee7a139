"""GitHub client adapter for the githubkit library."""

from typing import Any, Literal, Self

import httpx
import structlog
from githubkit import Response
from githubkit.exception import GitHubException
from githubkit.versions.latest.models import Issue
from pydantic import ValidationError

from yousync.synchronize.exceptions import FeedError
from yousync.synchronize.models import ChangeEvent, FeedPage, FeedStatus, SourceIssue
from yousync.utils.constants import DEFAULT_GITHUB_API_URL, EVENTS_PAGE_SIZE, ISSUES_PAGE_SIZE
from yousync.utils.github import is_pull_request, issue_events_path
from yousync.utils.retry import retry_on_rate_limit

from .abc import SourceTrackerClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)


def source_issue_from_github(issue: Issue) -> SourceIssue:
    """Convert a githubkit issue model into a source issue snapshot."""
    return SourceIssue(
        id=issue.id,
        title=issue.title,
        body=issue.body or None,
        state=issue.state,
        state_reason=issue.state_reason or None,
    )


class GitHubKitAdapter(SourceTrackerClientBase):
    """Source tracker client backed by a GitHub repository."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str, events_page_size: int = EVENTS_PAGE_SIZE) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self.events_page_size = events_page_size

    @classmethod
    async def create(
        cls,
        owner: str,
        repo_name: str,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Owner of the repository
            repo_name: Name of the repository
            github_token: Personal access token
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    @retry_on_rate_limit()
    async def list_issues(self, state: Literal["open", "closed", "all"] = "all", per_page: int = ISSUES_PAGE_SIZE, **kwargs: Any) -> list[Issue]:
        """List all issues for a repository, handling pagination."""
        all_issues: list[Issue] = []
        page: int = 1
        while True:
            response: Response[list[Issue]] = await self.client.rest.issues.async_list_for_repo(
                owner=self.owner,
                repo=self.repo_name,
                state=state,
                per_page=per_page,
                page=page,
                **kwargs,
            )
            issues: list[Issue] = response.parsed_data
            if not issues:
                break
            all_issues.extend(issues)
            if len(issues) < per_page:
                break
            page += 1
        return all_issues

    async def list_all_issues(self) -> list[SourceIssue]:
        """List every open and closed issue of the repository, pull requests excluded."""
        logger.info("Fetching issues from the repository", owner=self.owner, repo_name=self.repo_name)
        github_issues = await self.list_issues(state="all")
        issues = [source_issue_from_github(issue) for issue in github_issues if not is_pull_request(issue)]
        logger.info("Found issues", issue_count=len(issues), pull_request_count=len(github_issues) - len(issues))
        return issues

    @retry_on_rate_limit()
    async def _get_events(self, token: str | None) -> Response[list[dict[str, Any]]]:
        """Issue the conditional GET against the issue event feed."""
        headers = {"If-None-Match": token} if token else {}
        return await self.client.arequest(
            "GET",
            issue_events_path(self.owner, self.repo_name),
            params={"per_page": self.events_page_size},
            headers=headers,
            response_model=list[dict[str, Any]],
        )

    async def poll_events(self, token: str | None = None) -> FeedPage:
        """Conditionally fetch the latest page of the issue event feed.

        A 304 answer yields an unchanged page. Any other answer is parsed in
        the order GitHub returned it and carries the response's ETag (or None
        when the header is missing) as the new token.
        """
        try:
            response = await self._get_events(token)
        except (GitHubException, httpx.HTTPError) as e:
            raise FeedError(f"Failed to fetch events with etag: {e}") from e

        if response.status_code == httpx.codes.NOT_MODIFIED:
            logger.debug("Event feed not modified", etag=token)
            return FeedPage(status=FeedStatus.UNCHANGED, token=token)

        new_token = response.headers.get("ETag")
        try:
            raw_events = response.parsed_data
            events = self._parse_events(raw_events)
        except (ValidationError, ValueError, TypeError, AttributeError) as e:
            raise FeedError(f"Failed to parse response: {e}") from e
        logger.debug("Event feed modified", etag=new_token, event_count=len(events))
        return FeedPage(status=FeedStatus.MODIFIED, token=new_token, events=events)

    def _parse_events(self, raw_events: list[dict[str, Any]]) -> list[ChangeEvent]:
        """Parse raw feed entries, dropping entries that do not concern an issue."""
        events: list[ChangeEvent] = []
        for raw_event in raw_events:
            issue = raw_event.get("issue")
            if not issue:
                logger.debug("Skipping event without an issue", event_id=raw_event.get("id"), event_kind=raw_event.get("event"))
                continue
            if is_pull_request(issue):
                logger.debug("Skipping pull request event", event_id=raw_event.get("id"), event_kind=raw_event.get("event"))
                continue
            events.append(ChangeEvent.model_validate(raw_event))
        return events
