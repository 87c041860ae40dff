"""Errors raised by the network-facing collaborators."""

from typing import Optional

TOKEN_URL = (
    "https://github.com/settings/personal-access-tokens/new"
    "?name=gfm-highlight-compare&expires_in=none"
)


class HighlightCompareError(Exception):
    """Base class for all highlight-compare errors."""


class LanguageCatalogError(HighlightCompareError):
    """The Linguist language list could not be loaded."""


class RenderError(HighlightCompareError):
    """The Markdown rendering request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(RenderError):
    """Unauthenticated (or token) rate limit exhausted."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or f"API rate limit exceeded. Generate a personal access token at {TOKEN_URL}",
            status_code=403,
        )
        self.token_url = TOKEN_URL


class AuthenticationError(RenderError):
    """The supplied token was rejected."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or f"Invalid token. Check your GitHub token or generate a new one at {TOKEN_URL}",
            status_code=401,
        )
        self.token_url = TOKEN_URL
