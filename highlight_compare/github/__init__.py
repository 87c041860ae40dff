"""GitHub-facing collaborators: language catalog and Markdown rendering."""

from .client import MarkdownRenderClient
from .languages import languages_from_catalog, load_languages, parse_catalog

__all__ = [
    "MarkdownRenderClient",
    "languages_from_catalog",
    "load_languages",
    "parse_catalog",
]
