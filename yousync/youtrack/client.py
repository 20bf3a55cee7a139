# This file is intended to hold the setup for the authenticated YouTrack HTTP client.

"""Sets up the authenticated httpx client used to talk to YouTrack."""

import httpx

from yousync.utils.constants import DEFAULT_REQUEST_TIMEOUT


def get_youtrack_client(
    youtrack_url: str,
    youtrack_token: str,
    timeout: float | None = DEFAULT_REQUEST_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Returns an async HTTP client authenticated against a YouTrack instance.

    Relative request paths such as ``api/issues`` resolve against the
    instance URL, including any path prefix it carries.
    """
    if not youtrack_token:
        raise RuntimeError("YouTrack authentication requires a token.")
    return httpx.AsyncClient(
        base_url=youtrack_url,
        headers={
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {youtrack_token}",
        },
        timeout=timeout,
        transport=transport,
    )
