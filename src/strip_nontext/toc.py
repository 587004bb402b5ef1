"""Table-of-contents skipping for headings and text blocks.

A TOC label ("Contents", "List of Figures", ...) switches the state into skip
mode. While skipping, TOC-shaped lines and decorative rules are dropped; the
first text block that looks like ordinary prose ends the skip.
"""

from __future__ import annotations

from strip_nontext.predicates import (
    is_stub_marker,
    is_toc_label,
    looks_like_toc_entry,
    should_drop_ascii_tableish,
)
from strip_nontext.state import FilterOptions, FilterState
from strip_nontext.utils.logging_config import get_logger

logger = get_logger(__name__)


def keep_heading(text: str, state: FilterState, options: FilterOptions) -> bool:
    """Decide whether a heading with the given flattened text survives.

    Args:
        text: Flattened heading text.
        state: Per-invocation filter state, updated in place.
        options: Filter options.

    Returns:
        False if the heading is a TOC label (skip mode starts), True otherwise.
    """
    if is_toc_label(text):
        _enter_toc(state, text)
        state.record_drop("toc")
        return False

    if state.inside_toc and options.heading_ends_toc:
        _leave_toc(state, text)
    return True


def keep_text_block(text: str, state: FilterState, options: FilterOptions) -> bool:
    """Decide whether a paragraph or loose text block survives.

    Args:
        text: Flattened block text.
        state: Per-invocation filter state, updated in place.
        options: Filter options.

    Returns:
        True if the block should be kept.
    """
    stripped = text.strip()

    if not stripped:
        if state.inside_toc:
            state.record_drop("blank")
            return False
        return True

    if is_toc_label(stripped):
        _enter_toc(state, stripped)
        state.record_drop("toc")
        return False

    if is_stub_marker(stripped):
        state.record_drop("stub")
        return False

    if state.inside_toc:
        if _is_decorative(stripped, options) or looks_like_toc_entry(stripped):
            state.record_drop("toc")
            return False
        _leave_toc(state, stripped)

    if _is_decorative(stripped, options):
        state.record_drop("rule")
        return False

    return True


def _is_decorative(text: str, options: FilterOptions) -> bool:
    return should_drop_ascii_tableish(
        text,
        min_length=options.rule_min_length,
        density=options.rule_density,
        max_letters=options.rule_max_letters,
    )


def _enter_toc(state: FilterState, label: str) -> None:
    if not state.inside_toc:
        logger.debug("Entering table of contents at %r", label)
    state.inside_toc = True


def _leave_toc(state: FilterState, text: str) -> None:
    logger.debug("Leaving table of contents at %r", text[:60])
    state.inside_toc = False
