"""Document tree node models.

Every node kind is an immutable pydantic model tagged with a literal ``kind``
field, and ``Node`` is the discriminated union over all of them. A mapping
tree produced by an external reader validates straight into typed nodes::

    Document.model_validate({"children": [{"kind": "paragraph", "children": [...]}]})

``child_fields`` names the attributes holding nested nodes. Values there are
lists of nodes, or lists of such lists (list items, table rows and cells).
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _NodeModel(BaseModel):
    """Common configuration for all node models."""

    model_config = ConfigDict(frozen=True)

    child_fields: ClassVar[tuple[str, ...]] = ()


# Block-level nodes


class HeadingNode(_NodeModel):
    """A section heading with inline content."""

    kind: Literal["heading"] = "heading"
    level: int = Field(1, ge=1, le=6)
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class ParagraphNode(_NodeModel):
    """A paragraph of inline content."""

    kind: Literal["paragraph"] = "paragraph"
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class LooseTextNode(_NodeModel):
    """Inline content not wrapped in a paragraph (e.g. tight list-item bodies)."""

    kind: Literal["loose_text"] = "loose_text"
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class TableNode(_NodeModel):
    """A table. ``rows`` holds rows of cells, each cell a list of blocks."""

    kind: Literal["table"] = "table"
    caption: list[Node] = Field(default_factory=list)
    rows: list[list[list[Node]]] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("caption", "rows")


class FigureNode(_NodeModel):
    """A figure with caption and block content."""

    kind: Literal["figure"] = "figure"
    caption: list[Node] = Field(default_factory=list)
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("caption", "children")


class FootnoteNode(_NodeModel):
    """A footnote body."""

    kind: Literal["footnote"] = "footnote"
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class RawBlockNode(_NodeModel):
    """Format-specific block content the reader passed through verbatim."""

    kind: Literal["raw_block"] = "raw_block"
    format: str = ""
    text: str = ""


class MathNode(_NodeModel):
    """A math expression; ``display`` marks the block variant."""

    kind: Literal["math"] = "math"
    text: str = ""
    display: bool = False


class BlockContainerNode(_NodeModel):
    """A generic block wrapper (e.g. an HTML ``div``)."""

    kind: Literal["block_container"] = "block_container"
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class BlockQuoteNode(_NodeModel):
    kind: Literal["block_quote"] = "block_quote"
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class ListNode(_NodeModel):
    """A bullet or ordered list; each item is a list of blocks."""

    kind: Literal["list"] = "list"
    ordered: bool = False
    start: int = 1
    items: list[list[Node]] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("items",)


class CodeBlockNode(_NodeModel):
    kind: Literal["code_block"] = "code_block"
    text: str = ""
    language: str | None = None


class HorizontalRuleNode(_NodeModel):
    kind: Literal["horizontal_rule"] = "horizontal_rule"


# Inline-level nodes


class TextRunNode(_NodeModel):
    """A run of literal text, usually a single word."""

    kind: Literal["text"] = "text"
    text: str = ""


class SpaceNode(_NodeModel):
    kind: Literal["space"] = "space"


class BreakNode(_NodeModel):
    """A soft or hard line break."""

    kind: Literal["break"] = "break"
    hard: bool = False


class ImageNode(_NodeModel):
    """An image reference; ``children`` is the alt text."""

    kind: Literal["image"] = "image"
    children: list[Node] = Field(default_factory=list)
    target: str = ""
    title: str = ""

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class LinkNode(_NodeModel):
    """A hyperlink; ``children`` is the visible text."""

    kind: Literal["link"] = "link"
    children: list[Node] = Field(default_factory=list)
    target: str = ""
    title: str = ""

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class InlineContainerNode(_NodeModel):
    """A generic inline wrapper (e.g. an HTML ``span``)."""

    kind: Literal["inline_container"] = "inline_container"
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class StyledNode(_NodeModel):
    """Emphasis and other typographic wrappers around inline content."""

    kind: Literal["styled"] = "styled"
    style: Literal[
        "emphasis", "strong", "strikeout", "superscript", "subscript", "small_caps", "underline"
    ] = "emphasis"
    children: list[Node] = Field(default_factory=list)

    child_fields: ClassVar[tuple[str, ...]] = ("children",)


class CodeNode(_NodeModel):
    kind: Literal["code"] = "code"
    text: str = ""


class RawInlineNode(_NodeModel):
    """Format-specific inline content the reader passed through verbatim."""

    kind: Literal["raw_inline"] = "raw_inline"
    format: str = ""
    text: str = ""


Node = Annotated[
    Union[
        HeadingNode,
        ParagraphNode,
        LooseTextNode,
        TableNode,
        FigureNode,
        FootnoteNode,
        RawBlockNode,
        MathNode,
        BlockContainerNode,
        BlockQuoteNode,
        ListNode,
        CodeBlockNode,
        HorizontalRuleNode,
        TextRunNode,
        SpaceNode,
        BreakNode,
        ImageNode,
        LinkNode,
        InlineContainerNode,
        StyledNode,
        CodeNode,
        RawInlineNode,
    ],
    Field(discriminator="kind"),
]


class Document(BaseModel):
    """Root of a document tree (a whole book, or one chapter)."""

    model_config = ConfigDict(frozen=True)

    children: list[Node] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


for _model in (
    HeadingNode,
    ParagraphNode,
    LooseTextNode,
    TableNode,
    FigureNode,
    FootnoteNode,
    BlockContainerNode,
    BlockQuoteNode,
    ListNode,
    ImageNode,
    LinkNode,
    InlineContainerNode,
    StyledNode,
    Document,
):
    _model.model_rebuild()
