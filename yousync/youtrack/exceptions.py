"""Contains exceptions raised by the YouTrack adapter."""

from yousync.synchronize.exceptions import YouSyncError


class YouTrackRequestError(YouSyncError):
    """Raised when YouTrack answers a request with an error status."""

    def __init__(self, status_code: int, message: str, url: str) -> None:
        """Initializes the exception with the failing status and URL."""
        super().__init__(f"YouTrack {status_code} error: {message} | url: {url}")
        self.status_code = status_code
        self.message = message
        self.url = url
