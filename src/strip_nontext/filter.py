"""Strip non-narratable content from a document tree.

The walk is bottom-up: every node's children are filtered before the node's
own rule runs, so block-level rules see text with inline deletions already
applied. Each rule returns the replacement for a node: an empty list drops
it, its children flatten it, and a single-element list keeps it.
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel

from strip_nontext.document import stringify
from strip_nontext.predicates import is_inline_stub_marker
from strip_nontext.schemas import (
    BlockContainerNode,
    Document,
    FigureNode,
    FilterReport,
    FootnoteNode,
    HeadingNode,
    ImageNode,
    InlineContainerNode,
    LinkNode,
    LooseTextNode,
    MathNode,
    Node,
    ParagraphNode,
    RawBlockNode,
    RawInlineNode,
    TableNode,
    TextRunNode,
)
from strip_nontext.state import FilterOptions, FilterState
from strip_nontext.toc import keep_heading, keep_text_block
from strip_nontext.utils.logging_config import get_logger

logger = get_logger(__name__)

_DROPPED_TYPES = (
    TableNode,
    FigureNode,
    ImageNode,
    FootnoteNode,
    RawBlockNode,
    RawInlineNode,
    MathNode,
)
_UNWRAPPED_TYPES = (LinkNode, BlockContainerNode, InlineContainerNode)
_TEXT_BLOCK_TYPES = (ParagraphNode, LooseTextNode)


def strip_nontext(document: Document, options: FilterOptions | None = None) -> Document:
    """Return a copy of ``document`` reduced to narratable text.

    Tables, figures, images, footnotes, raw markup and math are removed, links
    and generic containers are replaced by their content, and table-of-contents
    runs, decorative rules and placeholder markers are dropped.
    """
    result, _ = strip_nontext_with_report(document, options)
    return result


def strip_nontext_with_report(
    document: Document, options: FilterOptions | None = None
) -> tuple[Document, FilterReport]:
    """Filter a document and report how many nodes were dropped, by reason.

    Args:
        document: The parsed document tree. It is not modified.
        options: Filter options. Uses defaults if None.

    Returns:
        Tuple of (filtered document, report).
    """
    opts = options or FilterOptions()
    state = FilterState()
    children = _filter_sequence(document.children, state, opts)
    report = state.report()
    _log_report(report)
    return document.model_copy(update={"children": children}), report


def strip_nontext_blocks(
    blocks: Iterable[Node], options: FilterOptions | None = None
) -> list[Node]:
    """Filter a document fragment, such as the block list of one chapter."""
    opts = options or FilterOptions()
    state = FilterState()
    result = _filter_sequence(blocks, state, opts)
    _log_report(state.report())
    return result


def _filter_sequence(nodes: Iterable[Any], state: FilterState, options: FilterOptions) -> list[Any]:
    result: list[Any] = []
    for node in nodes:
        result.extend(_filter_node(node, state, options))
    return result


def _filter_node(node: Any, state: FilterState, options: FilterOptions) -> list[Any]:
    filtered = _filter_children(node, state, options)
    if (
        isinstance(node, _TEXT_BLOCK_TYPES)
        and stringify(node.children).strip()
        and not stringify(filtered.children).strip()
    ):
        # Inline rules removed all of the block's text, e.g. a lone "[IMAGE]".
        state.record_drop("emptied")
        return []
    return _apply_rule(filtered, state, options)


def _filter_children(node: Any, state: FilterState, options: FilterOptions) -> Any:
    if not isinstance(node, BaseModel):
        return node
    child_fields = getattr(node, "child_fields", ())
    if not child_fields:
        return node
    updates = {
        name: _filter_nested(getattr(node, name), state, options) for name in child_fields
    }
    return node.model_copy(update=updates)


def _filter_nested(value: list[Any], state: FilterState, options: FilterOptions) -> list[Any]:
    # List items and table cells nest block lists one or two levels deep.
    if value and isinstance(value[0], list):
        return [_filter_nested(item, state, options) for item in value]
    return _filter_sequence(value, state, options)


def _apply_rule(node: Any, state: FilterState, options: FilterOptions) -> list[Any]:
    if isinstance(node, _DROPPED_TYPES):
        state.record_drop("structural")
        return []

    if isinstance(node, _UNWRAPPED_TYPES):
        return list(node.children)

    if isinstance(node, TextRunNode):
        if is_inline_stub_marker(node.text):
            state.record_drop("stub")
            return []
        return [node]

    if isinstance(node, HeadingNode):
        return [node] if keep_heading(stringify(node.children), state, options) else []

    if isinstance(node, _TEXT_BLOCK_TYPES):
        return [node] if keep_text_block(stringify(node.children), state, options) else []

    return [node]


def _log_report(report: FilterReport) -> None:
    if report.total:
        logger.debug(
            "Dropped %d nodes (toc=%d, rule=%d, stub=%d, structural=%d, blank=%d, emptied=%d)",
            report.total,
            report.toc,
            report.rule,
            report.stub,
            report.structural,
            report.blank,
            report.emptied,
        )
