"""Test setup for strip_nontext."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from strip_nontext.state import FilterOptions, FilterState  # noqa: E402


@pytest.fixture
def options() -> FilterOptions:
    """Filter options with the default thresholds."""
    return FilterOptions(
        rule_min_length=120,
        rule_density=0.9,
        rule_max_letters=8,
        heading_ends_toc=False,
    )


@pytest.fixture
def state() -> FilterState:
    """Fresh per-invocation filter state."""
    return FilterState()
