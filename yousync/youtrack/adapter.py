"""YouTrack client adapter for the httpx library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import httpx
import structlog

from yousync.synchronize.models import Project, TargetIssueData
from yousync.utils.constants import DEFAULT_REQUEST_TIMEOUT

from .abc import TargetTrackerClientBase
from .client import get_youtrack_client
from .exceptions import YouTrackRequestError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_youtrack_errors(func: F) -> F:
    """Decorator turning YouTrack HTTP error answers into YouTrackRequestError, logging the details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except httpx.HTTPStatusError as exc:
            response = exc.response
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            message = error_data.get("error_description") or error_data.get("error") or response.reason_phrase
            logger.error(
                "YouTrack request failed",
                function=func.__name__,
                status_code=response.status_code,
                message=message,
                url=str(response.request.url),
            )
            raise YouTrackRequestError(response.status_code, message, str(response.request.url)) from exc

    return wrapper  # type: ignore


class YouTrackAdapter(TargetTrackerClientBase):
    """Target tracker client backed by a YouTrack instance."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the YouTrack adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, youtrack_url: str, youtrack_token: str, timeout: float | None = DEFAULT_REQUEST_TIMEOUT) -> Self:
        """Create a new YouTrack adapter for the instance at ``youtrack_url``."""
        logger.info("Creating client for YouTrack instance", youtrack_url=youtrack_url, timeout=timeout)
        return cls(get_youtrack_client(youtrack_url=youtrack_url, youtrack_token=youtrack_token, timeout=timeout))

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    @handle_youtrack_errors
    async def find_project(self, query: str) -> list[Project]:
        """Return the first page of projects matching ``query`` (every project when empty)."""
        params = {"fields": "id,name"}
        if query:
            params["query"] = query
        response = await self.client.get("api/admin/projects", params=params)
        response.raise_for_status()
        return [Project.model_validate(item) for item in response.json()]

    @handle_youtrack_errors
    async def create_issue(self, project_id: str, data: TargetIssueData) -> str:
        """Create an issue in the project and return the new issue id."""
        payload = {"project": {"id": project_id}, **data.to_payload()}
        response = await self.client.post("api/issues", params={"fields": "id"}, json=payload)
        response.raise_for_status()
        issue_id: str = response.json()["id"]
        logger.debug("Created YouTrack issue", issue_id=issue_id, project_id=project_id, summary=data.summary)
        return issue_id

    @handle_youtrack_errors
    async def update_issue(self, issue_id: str, data: TargetIssueData) -> None:
        """Overwrite the summary, description and state of an existing issue."""
        response = await self.client.post(f"api/issues/{issue_id}", json=data.to_payload())
        response.raise_for_status()
        logger.debug("Updated YouTrack issue", issue_id=issue_id, summary=data.summary, state=data.state)
