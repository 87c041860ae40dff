"""
Serialize markup trees back to HTML text.

Output is deterministic: attributes are written in stored order with
``class`` first, text and attribute values are escaped the same way a browser
serializes ``outerHTML``.
"""

from highlight_compare.markup.nodes import Element, MarkupNode, Text
from highlight_compare.markup.parser import FRAGMENT_TAG

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})


def _escape_text(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace(" ", "&nbsp;")
    )


def _escape_attribute(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;").replace(" ", "&nbsp;")


def serialize(node: MarkupNode) -> str:
    """Serialize a node including its own tags (``outerHTML``)."""
    if isinstance(node, Text):
        return _escape_text(node.content)
    if node.tag == FRAGMENT_TAG:
        return serialize_children(node)

    parts = [f"<{node.tag}"]
    if node.class_list:
        parts.append(f' class="{_escape_attribute(" ".join(node.class_list))}"')
    for name, value in node.attributes.items():
        parts.append(f' {name}="{_escape_attribute(value)}"')
    parts.append(">")

    if node.tag in VOID_ELEMENTS:
        return "".join(parts)

    parts.append(serialize_children(node))
    parts.append(f"</{node.tag}>")
    return "".join(parts)


def serialize_children(node: Element) -> str:
    """Serialize only the children of an element (``innerHTML``)."""
    return "".join(serialize(child) for child in node.children)
