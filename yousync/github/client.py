# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


async def get_github_client(github_token: str, github_api_url: str) -> GitHubClient:
    """Returns a GitHub client authenticated with a personal access token.

    HTTP caching is disabled: the event feed is polled with explicit
    conditional requests and every answer must reach the poller unaltered.
    """
    if not github_token:
        raise RuntimeError("GitHub authentication requires a token.")
    return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
