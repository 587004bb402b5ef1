"""Filter report model."""

from __future__ import annotations

from pydantic import BaseModel


class FilterReport(BaseModel):
    """Counts of nodes dropped during one filter invocation, by reason."""

    toc: int = 0
    rule: int = 0
    stub: int = 0
    structural: int = 0
    blank: int = 0
    emptied: int = 0

    @property
    def total(self) -> int:
        return self.toc + self.rule + self.stub + self.structural + self.blank + self.emptied
