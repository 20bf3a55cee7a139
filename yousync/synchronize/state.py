"""Translates source issue status into YouTrack status vocabulary."""

from yousync.synchronize.models import (
    CustomField,
    IssueState,
    IssueStateReason,
    SourceIssue,
    StateBundleElement,
    TargetIssueData,
)
from yousync.utils.constants import YOUTRACK_STATE_FIELD_NAME, YOUTRACK_STATE_FIELD_TYPE

OPEN = "Open"
WONT_FIX = "Won't fix"
REOPENED = "Reopened"
DUPLICATE = "Duplicate"
FIXED = "Fixed"
SUBMITTED = "Submitted"

STATUS_LABELS = frozenset({OPEN, WONT_FIX, REOPENED, DUPLICATE, FIXED, SUBMITTED})

_CLOSED_REASON_LABELS = {
    IssueStateReason.NOT_PLANNED: WONT_FIX,
    IssueStateReason.REOPENED: REOPENED,
    IssueStateReason.DUPLICATE: DUPLICATE,
}


def map_status(state: IssueState | str, reason: IssueStateReason | None) -> str:
    """Return the YouTrack state name for a source state and closure reason.

    Every combination maps to exactly one label. Closed issues without a
    recognized reason count as fixed; states other than open and closed are
    reported as submitted.
    """
    if state == IssueState.OPEN:
        return OPEN
    if state == IssueState.CLOSED:
        if reason is None:
            return FIXED
        return _CLOSED_REASON_LABELS.get(reason, FIXED)
    return SUBMITTED


def build_issue_data(issue: SourceIssue) -> TargetIssueData:
    """Build a fresh YouTrack payload from a source issue snapshot."""
    return TargetIssueData(
        summary=issue.title,
        description=issue.body,
        custom_fields=[
            CustomField(
                name=YOUTRACK_STATE_FIELD_NAME,
                type_=YOUTRACK_STATE_FIELD_TYPE,
                value=StateBundleElement(name=map_status(issue.state, issue.state_reason)),
            )
        ],
    )
