"""
Markdown request builder.

Produces a single Markdown document that renders the same text once per
language hint. Each fenced block is preceded by a ``## LANG_NAME:<name>``
marker heading so the rendered HTML can be split back into per-language
fragments.
"""

from typing import Iterable

from highlight_compare.schemas import Language

MARKER_PREFIX = "LANG_NAME:"


def generate_markdown(text: str, langs: Iterable[Language]) -> str:
    """
    Build the combined Markdown request body.

    The text is inserted verbatim (no escaping) into every fenced block.

    Args:
        text: Code to render
        langs: Language hints, in output order

    Returns:
        Markdown document with one marker heading + fenced block per hint
    """
    parts = []
    for lang in langs:
        parts.append(f"\n\n## {MARKER_PREFIX}{lang.name}\n\n")
        parts.append(f"```{lang.alias or lang.name}\n{text}\n```\n")
    return "".join(parts)
