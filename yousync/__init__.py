"""Keeps YouTrack issues in sync with the issues of a GitHub repository."""

__version__ = "0.1.0"
