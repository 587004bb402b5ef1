"""Local configuration for strip_nontext."""

from __future__ import annotations

import os


DEFAULT_RULE_MIN_LENGTH = 120
DEFAULT_RULE_DENSITY = 0.9
DEFAULT_RULE_MAX_LETTERS = 8
DEFAULT_HEADING_ENDS_TOC = False

# Thresholds for long decorative separator lines.
STRIP_NONTEXT_RULE_MIN_LENGTH = int(os.getenv("STRIP_NONTEXT_RULE_MIN_LENGTH", str(DEFAULT_RULE_MIN_LENGTH)))
STRIP_NONTEXT_RULE_DENSITY = float(os.getenv("STRIP_NONTEXT_RULE_DENSITY", str(DEFAULT_RULE_DENSITY)))
STRIP_NONTEXT_RULE_MAX_LETTERS = int(os.getenv("STRIP_NONTEXT_RULE_MAX_LETTERS", str(DEFAULT_RULE_MAX_LETTERS)))
STRIP_NONTEXT_HEADING_ENDS_TOC = (
    os.getenv("STRIP_NONTEXT_HEADING_ENDS_TOC", str(DEFAULT_HEADING_ENDS_TOC)).lower() == "true"
)
