"""String classifiers for text that should not be narrated.

All functions take already-extracted plain text and are pure.
"""

from __future__ import annotations

import re
from typing import Final

from strip_nontext.config import (
    STRIP_NONTEXT_RULE_DENSITY,
    STRIP_NONTEXT_RULE_MAX_LETTERS,
    STRIP_NONTEXT_RULE_MIN_LENGTH,
)

TOC_LABELS: Final[frozenset[str]] = frozenset(
    {
        "CONTENTS",
        "TABLE OF CONTENTS",
        "ILLUSTRATIONS",
        "LIST OF ILLUSTRATIONS",
        "LIST OF FIGURES",
    }
)

STUB_MARKERS: Final[frozenset[str]] = frozenset(
    {"[IMAGE]", "[FIGURE]", "[TABLE]", "IMAGE", "FIGURE", "TABLE"}
)

# Only bracketed markers are dropped as single words inside running text.
INLINE_STUB_MARKERS: Final[frozenset[str]] = frozenset({"[IMAGE]", "[FIGURE]", "[TABLE]"})

RULE_CHARS: Final[frozenset[str]] = frozenset("-=+|")

_WHITESPACE_RE = re.compile(r"\s+")
_BORDER_LINE_RE = re.compile(r"\+[-=+]+\+")
_TABLE_ROW_RE = re.compile(r"\|.*\|", re.DOTALL)
# "Introduction ........ 12" or "Preface. . . . xiv"
_DOTTED_LEADER_RE = re.compile(r".+\.[. ]+[0-9ivxlcdmIVXLCDM]+", re.DOTALL)
# "1. The Beginning"
_NUMBERED_ENTRY_RE = re.compile(r"[0-9]+\.\s+.+", re.DOTALL)


def normalize_label(text: str) -> str:
    """Trim, collapse internal whitespace to single spaces, and uppercase."""
    return _WHITESPACE_RE.sub(" ", text.strip()).upper()


def is_toc_label(text: str) -> bool:
    """Check if text is a table-of-contents or list-of-figures label."""
    return normalize_label(text) in TOC_LABELS


def is_stub_marker(text: str) -> bool:
    """Check if text is a placeholder left in place of an image, figure, or table."""
    return normalize_label(text) in STUB_MARKERS


def is_inline_stub_marker(text: str) -> bool:
    """Check if a single text run is a bracketed placeholder such as ``[IMAGE]``."""
    return normalize_label(text) in INLINE_STUB_MARKERS


def is_ascii_border_line(text: str) -> bool:
    """Check for a table border such as ``+----+====+``."""
    return _BORDER_LINE_RE.fullmatch(text.strip()) is not None


def is_ascii_table_row(text: str) -> bool:
    """Check for a pipe-delimited row such as ``| a | b |``."""
    return _TABLE_ROW_RE.fullmatch(text.strip()) is not None


def looks_like_inflating_rule(
    text: str,
    *,
    min_length: int = STRIP_NONTEXT_RULE_MIN_LENGTH,
    density: float = STRIP_NONTEXT_RULE_DENSITY,
    max_letters: int = STRIP_NONTEXT_RULE_MAX_LETTERS,
) -> bool:
    """Check for a long separator or box-drawing line built from rule characters.

    Catches decorative lines the stricter border/row patterns miss, which a
    speech engine would otherwise read one character at a time.

    Args:
        text: Candidate line.
        min_length: Minimum trimmed length to consider.
        density: Fraction of the line that must be rule characters (exclusive).
        max_letters: Alphabetic characters must stay below this count.

    Returns:
        True if the line looks like a decorative rule.
    """
    stripped = text.strip()
    if len(stripped) < min_length:
        return False

    rule_chars = sum(1 for char in stripped if char in RULE_CHARS)
    letters = sum(1 for char in stripped if char.isalpha())
    return rule_chars > len(stripped) * density and letters < max_letters


def looks_like_toc_entry(text: str) -> bool:
    """Check for a dotted-leader or numbered table-of-contents line."""
    stripped = text.strip()
    if not stripped:
        return False
    if _DOTTED_LEADER_RE.fullmatch(stripped):
        return True
    return _NUMBERED_ENTRY_RE.fullmatch(stripped) is not None


def should_drop_ascii_tableish(
    text: str,
    *,
    min_length: int = STRIP_NONTEXT_RULE_MIN_LENGTH,
    density: float = STRIP_NONTEXT_RULE_DENSITY,
    max_letters: int = STRIP_NONTEXT_RULE_MAX_LETTERS,
) -> bool:
    """Check if text is an ASCII-art table fragment or a decorative rule."""
    return (
        is_ascii_border_line(text)
        or is_ascii_table_row(text)
        or looks_like_inflating_rule(
            text, min_length=min_length, density=density, max_letters=max_letters
        )
    )
