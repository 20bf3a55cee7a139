"""Allows running the CLI with ``python -m yousync``."""

from yousync.configuration.cli import typer_app

typer_app()
