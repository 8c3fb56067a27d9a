"""Unit tests for severity levels."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sinklog.events import (
    DEFAULT_LEVEL,
    UNKNOWN_LEVEL_NAME,
    Level,
    level_color,
    level_name,
    parse_level,
)


# ---------------------------------------------------------------------------
# Level ordering
# ---------------------------------------------------------------------------


class TestLevel:
    def test_levels_are_totally_ordered(self) -> None:
        ordered = [Level.TRACE, Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR, Level.FATAL]
        assert sorted(ordered) == ordered
        assert [int(l) for l in ordered] == [0, 1, 2, 3, 4, 5]

    def test_default_is_trace(self) -> None:
        assert DEFAULT_LEVEL is Level.TRACE

    def test_levels_compare_with_plain_ints(self) -> None:
        assert Level.WARN >= 3
        assert Level.INFO < 3


# ---------------------------------------------------------------------------
# level_name
# ---------------------------------------------------------------------------


class TestLevelName:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (Level.TRACE, "TRACE"),
            (Level.DEBUG, "DEBUG"),
            (Level.INFO, "INFO"),
            (Level.WARN, "WARN"),
            (Level.ERROR, "ERROR"),
            (Level.FATAL, "FATAL"),
        ],
    )
    def test_canonical_names(self, level: Level, expected: str) -> None:
        assert level_name(level) == expected

    def test_plain_int_in_range(self) -> None:
        assert level_name(3) == "WARN"

    @pytest.mark.parametrize("level", [-1, 6, 100])
    def test_out_of_range_is_unknown(self, level: int) -> None:
        assert level_name(level) == UNKNOWN_LEVEL_NAME == "UNKNOWN"

    @given(st.integers())
    def test_any_int_yields_a_name(self, level: int) -> None:
        name = level_name(level)
        assert isinstance(name, str)
        assert name


# ---------------------------------------------------------------------------
# level_color
# ---------------------------------------------------------------------------


class TestLevelColor:
    def test_each_level_has_an_escape_sequence(self) -> None:
        for level in Level:
            assert level_color(level).startswith("\x1b[")

    def test_colors_match_terminal_palette(self) -> None:
        assert level_color(Level.TRACE) == "\x1b[94m"
        assert level_color(Level.ERROR) == "\x1b[31m"
        assert level_color(Level.FATAL) == "\x1b[35m"

    def test_out_of_range_has_no_color(self) -> None:
        assert level_color(42) == ""
        assert level_color(-3) == ""


# ---------------------------------------------------------------------------
# parse_level
# ---------------------------------------------------------------------------


class TestParseLevel:
    def test_level_passes_through(self) -> None:
        assert parse_level(Level.ERROR) is Level.ERROR

    def test_names_are_case_insensitive(self) -> None:
        assert parse_level("info") is Level.INFO
        assert parse_level("  Fatal ") is Level.FATAL

    def test_stdlib_aliases(self) -> None:
        assert parse_level("WARNING") is Level.WARN
        assert parse_level("critical") is Level.FATAL

    def test_int_in_range(self) -> None:
        assert parse_level(2) is Level.INFO

    def test_int_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            parse_level(9)

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown level"):
            parse_level("verbose")

    def test_bool_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_level(True)
