"""Shared constants used across the application."""

# This file is intended to hold shared constants.

# GitHub Constants
# ----------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API URL."""

ISSUES_PAGE_SIZE = 100
"""Page size used when listing every issue of the repository."""

EVENTS_PAGE_SIZE = 10
"""Page size of the issue event feed polled for changes."""

# YouTrack Constants
# ------------------

YOUTRACK_STATE_FIELD_NAME = "State"
"""Name of the YouTrack custom field holding the issue state."""

YOUTRACK_STATE_FIELD_TYPE = "StateIssueCustomField"
"""YouTrack `$type` of the state custom field."""

DEFAULT_REQUEST_TIMEOUT = 30.0
"""Timeout in seconds applied to each YouTrack request."""

# Synchronization Constants
# -------------------------

DEFAULT_POLL_INTERVAL = 1.0
"""Delay in seconds between two polls of the event feed."""

DEFAULT_DEDUP_CAPACITY = 20
"""Number of recently seen event ids remembered by the dedup window."""

UPDATE_EVENT_KINDS = frozenset({"closed", "reopened", "renamed"})
"""Event kinds that trigger an update of an already mapped issue."""
