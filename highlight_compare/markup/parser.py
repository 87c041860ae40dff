"""
Build markup trees from HTML text.

BeautifulSoup does the actual HTML parsing; the resulting soup is converted
into the package's own ``Element`` / ``Text`` tree so that nothing downstream
depends on a live parser object.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from highlight_compare.markup.nodes import Element, MarkupNode, Text

logger = logging.getLogger(__name__)

# Tag of the synthetic root returned by parse_fragment(); never serialized itself.
FRAGMENT_TAG = "#fragment"

_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def parse_fragment(html: str, features: str = "html.parser") -> Element:
    """
    Parse an HTML fragment into a tree rooted at a synthetic fragment element.

    Args:
        html: HTML source (a full document or any fragment)
        features: BeautifulSoup tree builder to use

    Returns:
        Root ``Element`` whose children are the top-level nodes of ``html``
    """
    soup = BeautifulSoup(html or "", features)
    root = Element(tag=FRAGMENT_TAG)
    root.children = _convert_children(soup)
    logger.debug(f"Parsed {len(html or '')} chars of markup into {len(root.children)} top-level nodes")
    return root


def _convert_children(tag: Tag) -> List[MarkupNode]:
    children = []
    for child in tag.children:
        node = _convert(child)
        if node is not None:
            children.append(node)
    return children


def _convert(node) -> Optional[MarkupNode]:
    if isinstance(node, Tag):
        class_list: List[str] = []
        attributes = {}
        for name, value in node.attrs.items():
            if name == "class":
                # bs4 already splits multi-valued attributes on whitespace
                class_list = list(value) if isinstance(value, list) else str(value).split()
            elif isinstance(value, list):
                attributes[name] = " ".join(value)
            else:
                attributes[name] = value
        return Element(
            tag=node.name.lower(),
            class_list=class_list,
            children=_convert_children(node),
            attributes=attributes,
        )
    if isinstance(node, _SKIPPED_STRINGS):
        return None
    if isinstance(node, NavigableString):
        return Text(str(node))
    return None
