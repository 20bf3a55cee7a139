"""Contains the initial import of GitHub issues into YouTrack."""

import time

import structlog

from yousync.github.abc import SourceTrackerClientBase
from yousync.synchronize.exceptions import BootstrapError
from yousync.synchronize.models import IssueMapping, Project
from yousync.synchronize.results import BootstrapResult
from yousync.synchronize.state import build_issue_data
from yousync.youtrack.abc import TargetTrackerClientBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def bootstrap_issue_mapping(
    source: SourceTrackerClientBase,
    target: TargetTrackerClientBase,
    project: Project,
) -> BootstrapResult:
    """Create one YouTrack issue per source issue and return the resulting mapping.

    Issues are created in the order the source lists them. A source id seen
    twice is only created once. The first failed create aborts the whole
    import: the partial mapping is discarded and BootstrapError is raised.
    """
    start_time = time.time()
    source_issues = await source.list_all_issues()
    logger.info("Importing issues into YouTrack", issue_count=len(source_issues), project=project.name)

    mapping: IssueMapping = {}
    duplicates: list[int] = []
    for issue in source_issues:
        if issue.id in mapping:
            logger.warning("Source issue listed more than once, skipping", issue_id=issue.id, target_issue_id=mapping[issue.id])
            duplicates.append(issue.id)
            continue
        try:
            target_id = await target.create_issue(project.id, build_issue_data(issue))
        except Exception as e:
            logger.error("Failed to create an issue during import", issue_id=issue.id, created=len(mapping), error=str(e))
            raise BootstrapError(issue.id, len(mapping)) from e
        mapping[issue.id] = target_id
        logger.debug("Imported issue", issue_id=issue.id, target_issue_id=target_id, title=issue.title)

    duration = round(time.time() - start_time, 2)
    logger.info("Imported issues", created=len(mapping), duplicates=len(duplicates), duration=duration)
    return BootstrapResult(mapping=mapping, duplicate_issue_ids=duplicates)
