"""Document loading and plain-text extraction."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from strip_nontext.exceptions import DocumentError
from strip_nontext.schemas import (
    BlockContainerNode,
    BlockQuoteNode,
    BreakNode,
    CodeBlockNode,
    CodeNode,
    Document,
    FigureNode,
    FootnoteNode,
    HeadingNode,
    HorizontalRuleNode,
    ListNode,
    LooseTextNode,
    MathNode,
    Node,
    ParagraphNode,
    RawBlockNode,
    RawInlineNode,
    SpaceNode,
    TableNode,
    TextRunNode,
)

_BLOCK_TYPES = (
    HeadingNode,
    ParagraphNode,
    LooseTextNode,
    TableNode,
    FigureNode,
    FootnoteNode,
    RawBlockNode,
    BlockContainerNode,
    BlockQuoteNode,
    ListNode,
    CodeBlockNode,
    HorizontalRuleNode,
)


def load_document(data: Mapping[str, Any]) -> Document:
    """Validate an already-parsed mapping tree into a ``Document``.

    Args:
        data: Mapping with a ``children`` list of node mappings, each tagged
            with a ``kind`` field, and optional ``metadata``.

    Returns:
        The validated document.

    Raises:
        DocumentError: If the tree does not match the node vocabulary.
    """
    try:
        return Document.model_validate(data)
    except ValidationError as exc:
        raise DocumentError(f"Invalid document tree: {exc}") from exc


def stringify(content: Document | Node | Iterable[Node]) -> str:
    """Flatten a node, node sequence, or document into plain text.

    Inline siblings are concatenated; block siblings are joined by newlines.
    Raw content contributes nothing, and a node without text yields "".
    """
    if isinstance(content, Document):
        return _stringify_sequence(content.children)
    if isinstance(content, (list, tuple)):
        return _stringify_sequence(content)
    return _stringify_node(content)


def _stringify_sequence(nodes: Iterable[Any]) -> str:
    nodes = list(nodes)
    separator = "\n" if any(isinstance(node, _BLOCK_TYPES) for node in nodes) else ""
    return separator.join(_stringify_node(node) for node in nodes)


def _stringify_node(node: Any) -> str:
    if isinstance(node, (TextRunNode, CodeNode, CodeBlockNode, MathNode)):
        return node.text or ""
    if isinstance(node, (SpaceNode, BreakNode)):
        return " "
    if isinstance(node, (RawBlockNode, RawInlineNode, HorizontalRuleNode)):
        return ""
    if isinstance(node, ListNode):
        return "\n".join(_stringify_sequence(item) for item in node.items)
    if isinstance(node, TableNode):
        parts = [_stringify_sequence(node.caption)] if node.caption else []
        for row in node.rows:
            parts.append(" ".join(_stringify_sequence(cell) for cell in row))
        return "\n".join(parts)

    child_fields = getattr(node, "child_fields", ())
    return "".join(_stringify_sequence(getattr(node, name)) for name in child_fields)
