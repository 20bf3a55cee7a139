"""Unit tests for the command line entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

from typer.testing import CliRunner

from yousync.configuration.cli import typer_app
from yousync.configuration.exceptions import CredentialsUndefinedError
from yousync.configuration.models import SyncConfig
from yousync.synchronize.exceptions import ProjectNotFoundError

runner = CliRunner()

ARGS = ["octocat", "Hello-World", "https://yt.example.com", "Demo"]


def make_config(**overrides: object) -> SyncConfig:
    """Build a reconciled configuration for the CLI to run with."""
    values: dict[str, object] = {
        "owner": "octocat",
        "repo": "Hello-World",
        "youtrack_url": "https://yt.example.com/",
        "project_query": "Demo",
        "github_token": "gh",
        "youtrack_token": "yt",
    }
    values.update(overrides)
    return SyncConfig(**values)  # type: ignore[arg-type]


def test_sync_runs_workflow_with_reconciled_config() -> None:
    """Test that the CLI reconciles the configuration and runs the workflow with it."""
    config = make_config(debug=True)
    with (
        patch("yousync.configuration.cli.get_sync_config", new=MagicMock(return_value=config)) as mock_config,
        patch("yousync.configuration.cli.run_sync_workflow", new=AsyncMock()) as mock_workflow,
        patch("yousync.configuration.cli.configure_logging") as mock_logging,
    ):
        result = runner.invoke(typer_app, [*ARGS, "--poll-interval", "2.5", "--dedup-capacity", "40"], env={"YOUSYNC_GITHUB_TOKEN": "gh"})

    assert result.exit_code == 0, result.output
    kwargs = mock_config.call_args.kwargs
    assert kwargs["owner"] == "octocat"
    assert kwargs["repo"] == "Hello-World"
    assert kwargs["youtrack_url"] == "https://yt.example.com"
    assert kwargs["project"] == "Demo"
    assert kwargs["github_token"] == "gh"
    assert kwargs["poll_interval"] == 2.5
    assert kwargs["dedup_capacity"] == 40
    mock_logging.assert_called_once_with(debug=True)
    mock_workflow.assert_awaited_once_with(config)


def test_sync_requires_positional_arguments() -> None:
    """Test that the CLI refuses to start without all four positional arguments."""
    result = runner.invoke(typer_app, ARGS[:3])
    assert result.exit_code == 2


def test_sync_reports_configuration_errors() -> None:
    """Test that a configuration failure is printed and exits with status 1."""
    with patch(
        "yousync.configuration.cli.get_sync_config",
        new=MagicMock(side_effect=CredentialsUndefinedError("GitHub Token", "YOUSYNC_GITHUB_TOKEN")),
    ):
        result = runner.invoke(typer_app, ARGS)

    assert result.exit_code == 1
    assert "Error occurred: No GitHub Token provided" in result.output


def test_sync_reports_workflow_errors() -> None:
    """Test that a failure while syncing is printed and exits with status 1."""
    with (
        patch("yousync.configuration.cli.get_sync_config", new=MagicMock(return_value=make_config())),
        patch("yousync.configuration.cli.run_sync_workflow", new=AsyncMock(side_effect=ProjectNotFoundError("Demo"))),
        patch("yousync.configuration.cli.configure_logging"),
    ):
        result = runner.invoke(typer_app, ARGS)

    assert result.exit_code == 1
    assert "Error occurred:" in result.output
    assert "Demo" in result.output
