"""
Markup tree node types.

A rendered code block is held as a small, finite tree of ``Element`` and
``Text`` nodes. Children are owned by their parent through a plain list, so
there are no parent pointers to keep in sync and any rewrite is a structural
edit of that list.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Union


@dataclass
class Text:
    """A run of character data."""
    content: str


@dataclass
class Element:
    """
    An element node.

    ``class_list`` is the whitespace-tokenized ``class`` attribute in source
    order (duplicates kept). ``attributes`` holds every other attribute in
    source order.
    """
    tag: str
    class_list: List[str] = field(default_factory=list)
    children: List["MarkupNode"] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)

    def has_class(self, token: str) -> bool:
        return token in self.class_list


MarkupNode = Union[Element, Text]


def text_content(node: MarkupNode) -> str:
    """Concatenated text of a node and all of its descendants."""
    if isinstance(node, Text):
        return node.content
    return "".join(text_content(child) for child in node.children)


def iter_elements(node: MarkupNode) -> Iterator[Element]:
    """Yield every element below ``node`` in document order (``node`` excluded)."""
    if not isinstance(node, Element):
        return
    for child in node.children:
        if isinstance(child, Element):
            yield child
            yield from iter_elements(child)


def has_class_bearing_descendant(node: MarkupNode) -> bool:
    """True if any descendant element carries at least one class token."""
    return any(element.class_list for element in iter_elements(node))


def clone(node: MarkupNode) -> MarkupNode:
    """Deep copy of a subtree."""
    if isinstance(node, Text):
        return Text(node.content)
    return Element(
        tag=node.tag,
        class_list=list(node.class_list),
        children=[clone(child) for child in node.children],
        attributes=dict(node.attributes),
    )


def next_element_sibling(siblings: List[MarkupNode], index: int) -> int:
    """
    Index of the first element after ``siblings[index]``, or -1.

    Text nodes (usually inter-element whitespace) are skipped.
    """
    for position in range(index + 1, len(siblings)):
        if isinstance(siblings[position], Element):
            return position
    return -1
