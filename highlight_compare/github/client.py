"""
GitHub Markdown rendering client.

Sends the combined Markdown document to ``POST /markdown`` and returns the
rendered HTML. Failures are classified so the caller can tell a rate limit
or a bad token apart from any other error. No retries are attempted.
"""

import logging
from typing import Optional

import requests

from highlight_compare.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from highlight_compare.exceptions import AuthenticationError, RateLimitError, RenderError

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
USER_AGENT = "gfm-highlight-compare"


class MarkdownRenderClient:
    """Thin wrapper around the GitHub Markdown API."""

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            token: Optional GitHub token; anonymous requests are heavily rate limited
            api_url: API base URL
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> dict:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def render(self, markdown: str) -> str:
        """
        Render Markdown to HTML.

        Args:
            markdown: Markdown source

        Returns:
            Rendered HTML

        Raises:
            RateLimitError: 403 with no remaining rate limit
            AuthenticationError: 401
            RenderError: any other failure
        """
        logger.info(f"Sending markdown ({len(markdown)} chars) to {self.api_url}/markdown")
        try:
            response = self.session.post(
                f"{self.api_url}/markdown",
                json={"text": markdown, "mode": "markdown"},
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RenderError(f"Rendering request failed: {e}") from e

        if response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0":
            raise RateLimitError()
        if response.status_code == 401:
            raise AuthenticationError()
        if not response.ok:
            raise RenderError(
                f"Rendering failed with HTTP {response.status_code}. "
                "You might have hit the GitHub API rate limit.",
                status_code=response.status_code,
            )

        logger.debug(f"Received {len(response.text)} chars of HTML")
        return response.text
