"""Orchestrates the synchronization of GitHub issues into YouTrack."""

import asyncio
from dataclasses import dataclass, field

import structlog

from yousync.configuration.models import SyncConfig
from yousync.github.abc import SourceTrackerClientBase
from yousync.github.adapter import GitHubKitAdapter
from yousync.synchronize.bootstrap import bootstrap_issue_mapping
from yousync.synchronize.dedup import DedupWindow
from yousync.synchronize.dispatcher import dispatch_events
from yousync.synchronize.exceptions import ProjectNotFoundError
from yousync.synchronize.models import IssueMapping, Project, SyncDecision
from yousync.synchronize.poller import EventPoller
from yousync.synchronize.results import SyncCycleResult
from yousync.utils.constants import DEFAULT_POLL_INTERVAL
from yousync.youtrack.abc import TargetTrackerClientBase
from yousync.youtrack.adapter import YouTrackAdapter

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass
class SyncContext:
    """Long-lived state of one synchronization run.

    The mapping, the dedup window and the poller's token are only ever
    touched from the single sync loop, one event at a time.
    """

    source: SourceTrackerClientBase
    target: TargetTrackerClientBase
    project: Project
    poller: EventPoller
    dedup_window: DedupWindow
    mapping: IssueMapping = field(default_factory=dict)
    poll_interval: float = DEFAULT_POLL_INTERVAL


async def resolve_project(target: TargetTrackerClientBase, query: str) -> Project:
    """Return the first project matching the query, failing when there is none."""
    projects = await target.find_project(query)
    if not projects:
        raise ProjectNotFoundError(query)
    project = projects[0]
    logger.info("Project found", project=project.name, project_id=project.id, candidates=len(projects))
    return project


async def start_sync_context(
    source: SourceTrackerClientBase,
    target: TargetTrackerClientBase,
    project_query: str,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    dedup_capacity: int | None = None,
) -> SyncContext:
    """Prime the event feed, import every issue and return a context ready to poll.

    The feed token is taken before the import so that changes made while
    importing show up on the first poll.
    """
    poller = EventPoller(source)
    await poller.prime()
    project = await resolve_project(target, project_query)
    bootstrap_result = await bootstrap_issue_mapping(source, target, project)
    dedup_window = DedupWindow() if dedup_capacity is None else DedupWindow(dedup_capacity)
    return SyncContext(
        source=source,
        target=target,
        project=project,
        poller=poller,
        dedup_window=dedup_window,
        mapping=bootstrap_result.mapping,
        poll_interval=poll_interval,
    )


async def run_sync_cycle(context: SyncContext) -> SyncCycleResult:
    """Poll the feed once and dispatch every event it returned."""
    poll_result = await context.poller.poll()
    if not poll_result.modified:
        return SyncCycleResult(modified=False)
    decisions = await dispatch_events(poll_result.events, context.mapping, context.dedup_window, context.target, context.project)
    result = SyncCycleResult(modified=True, decisions=decisions)
    logger.debug(
        "Processed event feed",
        event_count=len(decisions),
        created=result.count(SyncDecision.CREATE),
        updated=result.count(SyncDecision.UPDATE),
        already_seen=result.count(SyncDecision.SEEN),
    )
    return result


async def run_sync_loop(context: SyncContext, max_cycles: int | None = None) -> int:
    """Run poll and dispatch cycles until an error propagates or ``max_cycles`` is reached.

    The poll interval is slept after every cycle, whether or not the feed
    changed. Returns the number of cycles run.
    """
    logger.info("Sync active", poll_interval=context.poll_interval, mapped_issues=len(context.mapping))
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        await run_sync_cycle(context)
        cycles += 1
        await asyncio.sleep(context.poll_interval)
    return cycles


async def run_sync_workflow(config: SyncConfig, max_cycles: int | None = None) -> None:
    """Run the full workflow described by ``config``: connect, import, then keep polling."""
    source = await GitHubKitAdapter.create(
        owner=config.owner,
        repo_name=config.repo,
        github_token=config.github_token,
        github_api_url=config.github_api_url,
    )
    target = await YouTrackAdapter.create(
        youtrack_url=config.youtrack_url,
        youtrack_token=config.youtrack_token,
        timeout=config.request_timeout,
    )
    try:
        context = await start_sync_context(
            source,
            target,
            config.project_query,
            poll_interval=config.poll_interval,
            dedup_capacity=config.dedup_capacity,
        )
        await run_sync_loop(context, max_cycles=max_cycles)
    finally:
        await target.aclose()
