"""Extraction and equivalence components."""

from .request_builder import generate_markdown
from .fragment_extractor import extract_language_results, parse_rendered_markup
from .canonicalizer import canonicalize, canonicalize_markup
from .grouping import group_results, sort_by_group_size

__all__ = [
    "generate_markdown",
    "extract_language_results",
    "parse_rendered_markup",
    "canonicalize",
    "canonicalize_markup",
    "group_results",
    "sort_by_group_size",
]
