"""Internal data models shared by the synchronization engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SyncDecision(Enum):
    """Enum for sync decisions."""

    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"
    SEEN = "seen"


class IssueState(str, Enum):
    """Lifecycle states reported by the source tracker."""

    OPEN = "open"
    CLOSED = "closed"


class IssueStateReason(str, Enum):
    """Reasons the source tracker attaches to a closed issue."""

    COMPLETED = "completed"
    NOT_PLANNED = "not_planned"
    REOPENED = "reopened"
    DUPLICATE = "duplicate"
    OTHER = "other"


class SourceIssue(BaseModel):
    """Snapshot of a source issue at the time it was fetched."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    title: str
    body: str | None = None
    state: IssueState | str
    state_reason: IssueStateReason | None = None

    @field_validator("state", mode="after")
    @classmethod
    def normalize_state(cls, value: IssueState | str) -> IssueState | str:
        """Keep known states as enum members and anything else verbatim."""
        try:
            return IssueState(value)
        except ValueError:
            return value

    @field_validator("state_reason", mode="before")
    @classmethod
    def coerce_unknown_reason(cls, value: Any) -> Any:
        """Map reasons this tool does not know about onto OTHER."""
        if value is None or isinstance(value, IssueStateReason):
            return value
        try:
            return IssueStateReason(value)
        except ValueError:
            return IssueStateReason.OTHER


class ChangeEvent(BaseModel):
    """A single entry of the source issue event feed."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int
    kind: str = Field(alias="event")
    issue: SourceIssue


class StateBundleElement(BaseModel):
    """Value of a YouTrack state custom field."""

    name: str


class CustomField(BaseModel):
    """A YouTrack issue custom field."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type_: str = Field(alias="$type")
    value: StateBundleElement


class TargetIssueData(BaseModel):
    """Payload sent to YouTrack to create or update an issue."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    description: str | None = None
    custom_fields: list[CustomField] = Field(default_factory=list, alias="customFields")

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body YouTrack expects."""
        return self.model_dump(mode="json", by_alias=True)

    @property
    def state(self) -> str | None:
        """Name of the state custom field, if one is set."""
        for custom_field in self.custom_fields:
            if custom_field.name == "State":
                return custom_field.value.name
        return None


class Project(BaseModel):
    """A YouTrack project."""

    id: str
    name: str


class FeedStatus(Enum):
    """Outcome of a conditional fetch against the event feed."""

    UNCHANGED = "unchanged"
    MODIFIED = "modified"


@dataclass
class FeedPage:
    """Raw answer of the source client to a conditional feed fetch."""

    status: FeedStatus
    token: str | None = None
    events: list[ChangeEvent] = field(default_factory=list)


@dataclass
class PollResult:
    """Answer of the event poller: either unchanged or a batch of events."""

    modified: bool
    events: list[ChangeEvent] = field(default_factory=list)

    @classmethod
    def unchanged(cls) -> "PollResult":
        """Result used when the feed reported no modification."""
        return cls(modified=False)


IssueMapping = dict[int, str]
"""Source issue id to YouTrack issue id."""
