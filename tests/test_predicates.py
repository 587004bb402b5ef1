"""Tests for the text classification predicates."""

from __future__ import annotations

import pytest

from strip_nontext.predicates import (
    is_ascii_border_line,
    is_ascii_table_row,
    is_inline_stub_marker,
    is_stub_marker,
    is_toc_label,
    looks_like_inflating_rule,
    looks_like_toc_entry,
    normalize_label,
    should_drop_ascii_tableish,
)


class TestNormalizeLabel:
    """Tests for normalize_label function."""

    def test_trims_collapses_and_uppercases(self) -> None:
        assert normalize_label("  table   of CONTENTS ") == "TABLE OF CONTENTS"

    def test_collapses_tabs_and_newlines(self) -> None:
        assert normalize_label("list\tof\n\nfigures") == "LIST OF FIGURES"

    @pytest.mark.parametrize("text", ["", "   ", "Contents", " a  b\tc ", "[image]"])
    def test_is_idempotent(self, text: str) -> None:
        once = normalize_label(text)
        assert normalize_label(once) == once

    def test_empty_string(self) -> None:
        assert normalize_label("") == ""


class TestIsTocLabel:
    """Tests for is_toc_label function."""

    @pytest.mark.parametrize(
        "text",
        [
            "Contents",
            "CONTENTS",
            "Table of Contents",
            "  table  of\ncontents ",
            "Illustrations",
            "List of Illustrations",
            "list of figures",
        ],
    )
    def test_accepts_labels(self, text: str) -> None:
        assert is_toc_label(text)

    @pytest.mark.parametrize(
        "text",
        ["", "Content", "Contents of the box", "Table of Contents:", "List of Tables"],
    )
    def test_rejects_other_text(self, text: str) -> None:
        assert not is_toc_label(text)


class TestIsStubMarker:
    """Tests for is_stub_marker function."""

    @pytest.mark.parametrize(
        "text", ["[IMAGE]", "[image]", " [Figure] ", "[TABLE]", "image", "Figure", "TABLE"]
    )
    def test_accepts_markers(self, text: str) -> None:
        assert is_stub_marker(text)

    @pytest.mark.parametrize("text", ["", "[IMAGE 1]", "Tables", "[ IMAGE ]x", "table."])
    def test_rejects_other_text(self, text: str) -> None:
        assert not is_stub_marker(text)


class TestIsInlineStubMarker:
    """Tests for is_inline_stub_marker function."""

    @pytest.mark.parametrize("text", ["[IMAGE]", "[figure]", " [Table] "])
    def test_accepts_bracketed_markers(self, text: str) -> None:
        assert is_inline_stub_marker(text)

    @pytest.mark.parametrize("text", ["IMAGE", "Figure", "table", "", "[IMAGE 1]"])
    def test_rejects_bare_words(self, text: str) -> None:
        assert not is_inline_stub_marker(text)


class TestIsAsciiBorderLine:
    """Tests for is_ascii_border_line function."""

    @pytest.mark.parametrize("text", ["+----+====+", "+-+", "  +---+---+  ", "+=====+"])
    def test_accepts_borders(self, text: str) -> None:
        assert is_ascii_border_line(text)

    @pytest.mark.parametrize("text", ["++", "+----", "----+", "+ -- +", "+--a--+", ""])
    def test_rejects_other_text(self, text: str) -> None:
        assert not is_ascii_border_line(text)


class TestIsAsciiTableRow:
    """Tests for is_ascii_table_row function."""

    @pytest.mark.parametrize("text", ["| a | b | c |", "||", "  | cell |  "])
    def test_accepts_rows(self, text: str) -> None:
        assert is_ascii_table_row(text)

    @pytest.mark.parametrize("text", ["|", "| open", "closed |", "a | b", ""])
    def test_rejects_other_text(self, text: str) -> None:
        assert not is_ascii_table_row(text)


class TestLooksLikeInflatingRule:
    """Tests for looks_like_inflating_rule function."""

    def test_long_hyphen_rule(self) -> None:
        """A 130-character hyphen line is a decorative rule."""
        assert looks_like_inflating_rule("-" * 130)

    def test_mixed_rule_characters(self) -> None:
        assert looks_like_inflating_rule("=-+|" * 32)

    def test_below_minimum_length(self) -> None:
        assert not looks_like_inflating_rule("-" * 119)

    def test_minimum_length_is_inclusive(self) -> None:
        assert looks_like_inflating_rule("-" * 120)

    def test_length_ignores_surrounding_whitespace(self) -> None:
        assert not looks_like_inflating_rule("   " + "-" * 119 + "   ")

    def test_density_must_exceed_ninety_percent(self) -> None:
        """Exactly 90% rule characters is not enough."""
        assert not looks_like_inflating_rule("-" * 108 + "1" * 12)
        assert looks_like_inflating_rule("-" * 109 + "1" * 11)

    def test_letters_must_stay_below_eight(self) -> None:
        assert looks_like_inflating_rule("-" * 120 + "abcdefg")
        assert not looks_like_inflating_rule("-" * 120 + "abcdefgh")

    def test_spaced_rule_is_not_dense_enough(self) -> None:
        assert not looks_like_inflating_rule("-- " * 50)

    def test_custom_thresholds(self) -> None:
        assert looks_like_inflating_rule("-" * 50, min_length=40)
        assert not looks_like_inflating_rule("-" * 130, max_letters=0)


class TestLooksLikeTocEntry:
    """Tests for looks_like_toc_entry function."""

    @pytest.mark.parametrize(
        "text",
        [
            "Introduction.......... 3",
            "Introduction..........3",
            "Chapter One. . . . . 17",
            "Preface . . . . xiv",
            "Foreword ..... IX",
            "1. The Beginning",
            "12.   Epilogue",
            "  3. Appendix  ",
        ],
    )
    def test_accepts_entries(self, text: str) -> None:
        assert looks_like_toc_entry(text)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "It was a dark night.",
            "Chapter 1",
            "1.The Beginning",
            "Introduction   3",
            "See page 3",
        ],
    )
    def test_rejects_other_text(self, text: str) -> None:
        assert not looks_like_toc_entry(text)


class TestShouldDropAsciiTableish:
    """Tests for should_drop_ascii_tableish function."""

    @pytest.mark.parametrize(
        "text", ["+----+----+", "| a | b | c |", "-" * 130, "=" * 200]
    )
    def test_drops_tableish_text(self, text: str) -> None:
        assert should_drop_ascii_tableish(text)

    @pytest.mark.parametrize(
        "text", ["It was a dark night.", "-----", "A | B", "1. The Beginning"]
    )
    def test_keeps_prose(self, text: str) -> None:
        assert not should_drop_ascii_tableish(text)

    def test_passes_thresholds_through(self) -> None:
        assert should_drop_ascii_tableish("-" * 10, min_length=10)
