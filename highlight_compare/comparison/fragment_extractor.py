"""
Fragment extraction from rendered Markdown.

Locates the marker headings produced by the request builder inside the
rendered HTML and pairs each one with the highlighted code block that
follows it. Headings whose block carries no highlighting are dropped: that is
the normal outcome for a hint GitHub does not recognize.

Handles both heading conventions GitHub has used:
- Modern: ``<div class="markdown-heading"><h2>...</h2><a class="anchor"></a></div>``
- Legacy: bare ``<h2>...</h2>``
"""

import logging
from typing import Iterator, List, Optional, Tuple

from highlight_compare.markup import Element, parse_fragment, serialize, text_content
from highlight_compare.markup.nodes import has_class_bearing_descendant, next_element_sibling
from highlight_compare.schemas import LanguageResult

logger = logging.getLogger(__name__)

# Checked in order; the last two belong to an older marker scheme.
MARKER_PREFIXES = ("LANG_NAME:", "__LANG__:", "LANG:")

HEADING_TAG = "h2"
HEADING_WRAPPER_CLASS = "markdown-heading"
HIGHLIGHT_CLASS = "highlight"
PREFORMATTED_TAG = "pre"

# (parent element, index of the child within parent.children)
PathEntry = Tuple[Element, int]


def match_marker(heading_text: str) -> Optional[str]:
    """
    Return the language name encoded in a marker heading, or None.

    Args:
        heading_text: Text content of a heading element

    Returns:
        Name with the marker prefix removed, or None if no prefix matches
    """
    text = heading_text.strip()
    for prefix in MARKER_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix):]
    return None


def _iter_elements_with_path(node: Element, path: List[PathEntry]) -> Iterator[Tuple[Element, List[PathEntry]]]:
    for index, child in enumerate(node.children):
        if isinstance(child, Element):
            child_path = path + [(node, index)]
            yield child, child_path
            yield from _iter_elements_with_path(child, child_path)


def _is_boundary(element: Element) -> bool:
    return element.tag == HEADING_TAG or element.has_class(HEADING_WRAPPER_CLASS)


def _is_code_block(element: Element) -> bool:
    return element.has_class(HIGHLIGHT_CLASS) or element.tag == PREFORMATTED_TAG


def _find_code_block(path: List[PathEntry]) -> Optional[Element]:
    """
    Walk forward from a heading to its code block.

    Args:
        path: Ancestor chain of the heading, innermost last

    Returns:
        The first highlighted container or ``pre`` before the next marker
        boundary, or None
    """
    if not path:
        return None

    parent, index = path[-1]
    if parent.has_class(HEADING_WRAPPER_CLASS) and len(path) >= 2:
        # Scan from the wrapper, not from inside it
        parent, index = path[-2]

    siblings = parent.children
    position = next_element_sibling(siblings, index)
    while position != -1:
        current = siblings[position]
        if _is_boundary(current):
            return None
        if _is_code_block(current):
            return current
        position = next_element_sibling(siblings, position)
    return None


def extract_language_results(root: Element) -> List[LanguageResult]:
    """
    Extract one result per marker heading whose block has highlighting.

    Args:
        root: Parsed rendered document

    Returns:
        LanguageResult objects in document order of their headings
    """
    results = []

    for element, path in _iter_elements_with_path(root, []):
        if element.tag != HEADING_TAG:
            continue

        lang_name = match_marker(text_content(element))
        if not lang_name:
            continue

        code_block = _find_code_block(path)
        if code_block is None:
            logger.debug(f"No code block found for {lang_name}")
            continue

        if not has_class_bearing_descendant(code_block):
            logger.debug(f"No highlighting for {lang_name}")
            continue

        results.append(LanguageResult(
            lang_name=lang_name,
            code_block_markup=serialize(code_block),
        ))

    logger.info(f"Extracted {len(results)} highlighted code blocks")
    return results


def parse_rendered_markup(html: str) -> List[LanguageResult]:
    """
    Convenience function: parse rendered HTML and extract results.

    Example:
        >>> html = '<h2>LANG_NAME:Ruby</h2><pre><span class="pl-k">puts</span></pre>'
        >>> [r.lang_name for r in parse_rendered_markup(html)]
        ['Ruby']
    """
    return extract_language_results(parse_fragment(html))
