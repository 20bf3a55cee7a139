"""Contains utility functions for GitHub interactions."""


def issue_events_path(owner: str, repo: str) -> str:
    """Path of the issue event feed of a repository."""
    return f"/repos/{owner}/{repo}/issues/events"


def is_pull_request(issue: object) -> bool:
    """Check whether an issue returned by the issues API is actually a pull request.

    Works on githubkit models (where an absent field is UNSET, which is falsy)
    as well as on raw JSON dicts.
    """
    if isinstance(issue, dict):
        return bool(issue.get("pull_request"))
    return bool(getattr(issue, "pull_request", None))
