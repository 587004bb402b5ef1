"""Shared schemas for strip_nontext."""

from strip_nontext.schemas.nodes import (
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
    ImageNode,
    InlineContainerNode,
    LinkNode,
    ListNode,
    LooseTextNode,
    MathNode,
    Node,
    ParagraphNode,
    RawBlockNode,
    RawInlineNode,
    SpaceNode,
    StyledNode,
    TableNode,
    TextRunNode,
)
from strip_nontext.schemas.report import FilterReport

__all__ = [
    "BlockContainerNode",
    "BlockQuoteNode",
    "BreakNode",
    "CodeBlockNode",
    "CodeNode",
    "Document",
    "FigureNode",
    "FilterReport",
    "FootnoteNode",
    "HeadingNode",
    "HorizontalRuleNode",
    "ImageNode",
    "InlineContainerNode",
    "LinkNode",
    "ListNode",
    "LooseTextNode",
    "MathNode",
    "Node",
    "ParagraphNode",
    "RawBlockNode",
    "RawInlineNode",
    "SpaceNode",
    "StyledNode",
    "TableNode",
    "TextRunNode",
]
