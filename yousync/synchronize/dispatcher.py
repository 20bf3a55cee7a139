"""Contains the dispatch of feed events to YouTrack creates and updates."""

from typing import Iterable

import structlog

from yousync.synchronize.dedup import DedupWindow
from yousync.synchronize.exceptions import DispatchError
from yousync.synchronize.models import ChangeEvent, IssueMapping, Project, SyncDecision
from yousync.synchronize.state import build_issue_data
from yousync.utils.constants import UPDATE_EVENT_KINDS
from yousync.youtrack.abc import TargetTrackerClientBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def decide_event_sync_action(event: ChangeEvent, mapping: IssueMapping) -> SyncDecision:
    """Decide whether an unseen event creates, updates or leaves alone a YouTrack issue.

    Key is the source issue id. An unmapped issue is created whatever the
    event kind.
    """
    if event.issue.id not in mapping:
        return SyncDecision.CREATE
    if event.kind in UPDATE_EVENT_KINDS:
        return SyncDecision.UPDATE
    return SyncDecision.NOOP


async def dispatch_event(
    event: ChangeEvent,
    mapping: IssueMapping,
    dedup_window: DedupWindow,
    target: TargetTrackerClientBase,
    project: Project,
) -> SyncDecision:
    """Apply a single feed event to YouTrack.

    The event id is recorded in the dedup window before anything is sent, so
    an event whose create or update fails is not attempted again: delivery is
    at most one attempt per event, not at least once. Failures are raised as
    DispatchError and not retried here.
    """
    if dedup_window.contains(event.id):
        logger.debug("Event already processed", event_id=event.id)
        return SyncDecision.SEEN
    dedup_window.insert(event.id)

    decision = await decide_event_sync_action(event, mapping)
    logger.info("Event", event_id=event.id, event_kind=event.kind, issue_id=event.issue.id, decision=decision.value)

    if decision == SyncDecision.UPDATE:
        target_id = mapping[event.issue.id]
        try:
            await target.update_issue(target_id, build_issue_data(event.issue))
        except Exception as e:
            raise DispatchError(event.id, event.issue.id, "update") from e
    elif decision == SyncDecision.CREATE:
        try:
            target_id = await target.create_issue(project.id, build_issue_data(event.issue))
        except Exception as e:
            raise DispatchError(event.id, event.issue.id, "create") from e
        mapping[event.issue.id] = target_id
        logger.info("Created issue from event", event_id=event.id, issue_id=event.issue.id, target_issue_id=target_id)
    return decision


async def dispatch_events(
    events: Iterable[ChangeEvent],
    mapping: IssueMapping,
    dedup_window: DedupWindow,
    target: TargetTrackerClientBase,
    project: Project,
) -> list[SyncDecision]:
    """Dispatch a batch of events strictly in order, stopping at the first failure."""
    return [await dispatch_event(event, mapping, dedup_window, target, project) for event in events]
