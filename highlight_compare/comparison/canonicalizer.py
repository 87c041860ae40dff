"""
Canonical form of highlighted code blocks.

Different grammars that highlight a snippet the same way still produce
slightly different HTML: the container carries a grammar-specific
``highlight-source-*`` class, some tokenizers wrap plain identifiers in a
``pl-smi`` span, and overlapping scopes are sometimes emitted as two nested
spans with the same class instead of one. The canonical form erases exactly
those differences and is used only as an equality key.

Rewrites, applied in order on a private copy of the tree:
1. ``highlight-source-<ident>`` class tokens -> ``highlight-source-normalized``
2. ``<span class="pl-smi">`` unwrapped into its children
3. A span nested directly in a span with the same class list is flattened
4. Adjacent text merged, empty text and empty spans removed
"""

import re
from typing import List

from highlight_compare.markup import Element, MarkupNode, Text, clone, parse_fragment, serialize

SOURCE_CLASS_PATTERN = re.compile(r"highlight-source-[\w+#.-]+")
NORMALIZED_SOURCE_CLASS = "highlight-source-normalized"
NEUTRAL_CLASS_LIST = ["pl-smi"]
SPAN_TAG = "span"
PRESERVE_WHITESPACE_TAGS = frozenset({"pre", "textarea"})
ASCII_SPACES = " \t\n\r\f"


def _is_span(node: MarkupNode) -> bool:
    return isinstance(node, Element) and node.tag == SPAN_TAG


def normalize_source_classes(node: MarkupNode) -> None:
    if not isinstance(node, Element):
        return
    node.class_list = [
        NORMALIZED_SOURCE_CLASS if SOURCE_CLASS_PATTERN.fullmatch(token) else token
        for token in node.class_list
    ]
    for child in node.children:
        normalize_source_classes(child)


def unwrap_neutral_spans(node: MarkupNode) -> None:
    """Replace every ``pl-smi`` span by its own children, in place."""
    if not isinstance(node, Element):
        return
    children: List[MarkupNode] = []
    for child in node.children:
        unwrap_neutral_spans(child)
        if _is_span(child) and child.class_list == NEUTRAL_CLASS_LIST:
            children.extend(child.children)
        else:
            children.append(child)
    node.children = children


def flatten_nested_spans(node: MarkupNode) -> None:
    """
    Merge a span into its parent span when both have the same class list.

    Bottom-up: once a child is flattened none of its own children repeat its
    class list, so splicing them into the parent cannot create a new pair.
    """
    if not isinstance(node, Element):
        return
    children: List[MarkupNode] = []
    for child in node.children:
        flatten_nested_spans(child)
        if _is_span(node) and _is_span(child) and child.class_list == node.class_list:
            children.extend(child.children)
        else:
            children.append(child)
    node.children = children


def _collapse_whitespace(content: str) -> str:
    # Same collapsing BeautifulSoup applies to whitespace-only strings
    if content.strip(ASCII_SPACES):
        return content
    return "\n" if "\n" in content else " "


def clean_residue(node: MarkupNode, preserve_whitespace: bool = False) -> None:
    """
    Merge adjacent text nodes and drop empty text and empty spans.

    Whitespace-only runs outside ``pre``/``textarea`` are collapsed so the
    result parses back to the same tree.
    """
    if not isinstance(node, Element):
        return
    preserve_whitespace = preserve_whitespace or node.tag in PRESERVE_WHITESPACE_TAGS
    children: List[MarkupNode] = []
    for child in node.children:
        if isinstance(child, Text):
            if not child.content:
                continue
            if children and isinstance(children[-1], Text):
                children[-1] = Text(children[-1].content + child.content)
            else:
                children.append(Text(child.content))
            continue

        clean_residue(child, preserve_whitespace)
        if _is_span(child) and not child.children:
            continue
        children.append(child)

    if not preserve_whitespace:
        children = [
            Text(_collapse_whitespace(child.content)) if isinstance(child, Text) else child
            for child in children
        ]
    node.children = children


def canonicalize(node: MarkupNode) -> str:
    """
    Canonical serialization of a highlighted fragment.

    The argument is never modified; all rewrites happen on a deep copy.

    Args:
        node: Root of the fragment (element, text or parsed fragment root)

    Returns:
        Serialized canonical form, suitable as an equality key
    """
    working = clone(node)
    normalize_source_classes(working)
    unwrap_neutral_spans(working)
    flatten_nested_spans(working)
    clean_residue(working)
    return serialize(working)


def canonicalize_markup(markup: str) -> str:
    """Parse serialized markup and return its canonical form."""
    return canonicalize(parse_fragment(markup))
