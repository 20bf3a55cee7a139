"""Contains unit tests for the utils.github module."""

from types import SimpleNamespace

import pytest

from yousync.utils.github import is_pull_request, issue_events_path


def test_issue_events_path() -> None:
    """Test the path of a repository's issue event feed."""
    assert issue_events_path("octocat", "Hello-World") == "/repos/octocat/Hello-World/issues/events"


@pytest.mark.parametrize(
    "issue, expected",
    [
        pytest.param({"id": 1}, False, id="dict without pull_request"),
        pytest.param({"id": 1, "pull_request": None}, False, id="dict with null pull_request"),
        pytest.param({"id": 1, "pull_request": {"url": "https://api.github.com/pulls/1"}}, True, id="dict with pull_request"),
        pytest.param(SimpleNamespace(id=1), False, id="object without pull_request"),
        pytest.param(SimpleNamespace(id=1, pull_request=SimpleNamespace(url="x")), True, id="object with pull_request"),
    ],
)
def test_is_pull_request(issue: object, expected: bool) -> None:
    """Test that pull requests are recognised on raw dicts and on model objects."""
    assert is_pull_request(issue) is expected
