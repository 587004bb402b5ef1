"""Per-invocation options and state for the filter."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from strip_nontext.config import (
    STRIP_NONTEXT_HEADING_ENDS_TOC,
    STRIP_NONTEXT_RULE_DENSITY,
    STRIP_NONTEXT_RULE_MAX_LETTERS,
    STRIP_NONTEXT_RULE_MIN_LENGTH,
)
from strip_nontext.schemas import FilterReport


@dataclass(frozen=True)
class FilterOptions:
    """Options for one filter invocation.

    Attributes:
        rule_min_length: Minimum trimmed length of a decorative rule line.
        rule_density: Fraction of rule characters a decorative line must exceed.
        rule_max_letters: Decorative lines hold fewer letters than this.
        heading_ends_toc: If True, a heading that is not a TOC label ends an
            active table-of-contents skip and is kept. If False (default),
            only a non-matching paragraph ends the skip.
    """

    rule_min_length: int = STRIP_NONTEXT_RULE_MIN_LENGTH
    rule_density: float = STRIP_NONTEXT_RULE_DENSITY
    rule_max_letters: int = STRIP_NONTEXT_RULE_MAX_LETTERS
    heading_ends_toc: bool = STRIP_NONTEXT_HEADING_ENDS_TOC


@dataclass
class FilterState:
    """Mutable state scoped to a single document transform."""

    inside_toc: bool = False
    dropped: Counter[str] = field(default_factory=Counter)

    def record_drop(self, reason: str) -> None:
        self.dropped[reason] += 1

    def report(self) -> FilterReport:
        return FilterReport(**self.dropped)
