"""Markup tree model, HTML parsing and serialization."""

from .nodes import (
    Element,
    MarkupNode,
    Text,
    clone,
    has_class_bearing_descendant,
    iter_elements,
    text_content,
)
from .parser import FRAGMENT_TAG, parse_fragment
from .serializer import serialize, serialize_children

__all__ = [
    "Element",
    "MarkupNode",
    "Text",
    "clone",
    "has_class_bearing_descendant",
    "iter_elements",
    "text_content",
    "FRAGMENT_TAG",
    "parse_fragment",
    "serialize",
    "serialize_children",
]
