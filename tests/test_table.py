"""Tests for the fixed-width table renderer."""

import io

from rich.console import Console

from covid_tracker.table import Color, Column, PlainWriter, RichWriter, Table, clip


def test_headers_are_padded_without_separator(writer) -> None:
    table = Table([Column("A", 4), Column("BB", 3, Color.RED)], writer)
    table.print_headers()
    assert writer.lines == ["A   BB "]


def test_long_cell_is_clipped_with_ellipsis(writer) -> None:
    table = Table([Column("NAME", 10)], writer)
    table.print_row(["HELLOWORLD123"])
    assert writer.lines == ["HELLOW... "]
    assert len(writer.lines[0]) == 10


def test_cell_fitting_width_minus_one_is_not_clipped(writer) -> None:
    table = Table([Column("NAME", 10)], writer)
    table.print_row(["HELLOWORL"])
    table.print_row(["HELLOWORLD"])
    assert writer.lines == ["HELLOWORL ", "HELLOW... "]


def test_row_with_wrong_cell_count_is_dropped(writer) -> None:
    table = Table([Column(h, 5) for h in "ABCD"], writer)
    table.print_row(["1", "2", "3"])
    table.print_row(["1", "2", "3", "4", "5"])
    assert writer.lines == []
    assert table.row_segments(["1", "2", "3"]) is None


def test_row_segments_keep_symbolic_colors() -> None:
    table = Table([Column("A", 3), Column("B", 3, Color.GREEN)], PlainWriter())
    assert table.row_segments(["x", "y"]) == [("x  ", Color.DEFAULT), ("y  ", Color.GREEN)]


def test_clip_short_bound() -> None:
    assert clip("abcdef", 2) == "ab"
    assert clip("abcdef", 3) == "..."
    assert clip("ab", 2) == "ab"


def test_rich_writer_emits_one_plain_line_without_color() -> None:
    out = io.StringIO()
    writer = RichWriter(Console(file=out, no_color=True, highlight=False, soft_wrap=True, width=200))
    table = Table([Column("A", 4, Color.YELLOW), Column("B", 4, Color.BLUE)], writer)
    table.print_row(["1", "2"])
    assert out.getvalue().count("\n") == 1
    assert out.getvalue().rstrip() == "1   2"
    assert "\x1b" not in out.getvalue()


def test_rich_writer_colors_segments() -> None:
    out = io.StringIO()
    console = Console(file=out, force_terminal=True, color_system="standard", highlight=False, soft_wrap=True)
    Table([Column("A", 2, Color.RED)], RichWriter(console)).print_headers()
    assert "\x1b[31m" in out.getvalue()
    assert "A " in out.getvalue()


def test_narrow_column_keeps_row_width(writer) -> None:
    table = Table([Column("A", 2), Column("B", 3)], writer)
    table.print_row(["abcdef", "x"])
    assert writer.lines == ["a x  "]
