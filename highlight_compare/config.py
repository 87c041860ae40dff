"""
Runtime settings.

Values come from the environment; a ``.env`` file anywhere up the directory
tree is loaded first. Explicit arguments (CLI options) win over both.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from highlight_compare.exceptions import HighlightCompareError

load_dotenv(find_dotenv())

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_LANGUAGES_URL = (
    "https://raw.githubusercontent.com/github-linguist/linguist/"
    "refs/heads/main/lib/linguist/languages.yml"
)
DEFAULT_TIMEOUT = 30.0


class Settings(BaseModel):
    """Connection settings for the rendering service and language catalog."""
    github_token: Optional[str] = Field(None, description="Token for the GitHub Markdown API")
    api_url: str = Field(DEFAULT_API_URL, description="GitHub API base URL")
    languages_url: str = Field(DEFAULT_LANGUAGES_URL, description="Linguist languages.yml URL")
    timeout: float = Field(DEFAULT_TIMEOUT, description="HTTP timeout in seconds")

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            **overrides: Explicit values; ``None`` entries are ignored

        Returns:
            Settings instance

        Raises:
            HighlightCompareError: A value fails validation
        """
        values = {
            "github_token": os.getenv("GITHUB_TOKEN") or None,
            "api_url": os.getenv("HIGHLIGHT_COMPARE_API_URL", DEFAULT_API_URL),
            "languages_url": os.getenv("HIGHLIGHT_COMPARE_LANGUAGES_URL", DEFAULT_LANGUAGES_URL),
            "timeout": os.getenv("HIGHLIGHT_COMPARE_TIMEOUT", DEFAULT_TIMEOUT),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls(**values)
        except ValidationError as e:
            raise HighlightCompareError(f"Invalid configuration: {e}") from e
