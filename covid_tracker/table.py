"""
Fixed-width text tables.

A Table only decides text, widths and a symbolic Color per cell. Writing the
line, and turning a Color into terminal styling, is the writer's job:
RichWriter prints through rich, PlainWriter collects plain strings.
"""

import sys
from dataclasses import dataclass
from enum import Enum

from rich.console import Console
from rich.text import Text

ELLIPSIS = "..."


class Color(Enum):
    DEFAULT = None
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"


@dataclass(frozen=True)
class Column:
    header: str
    width: int
    color: Color = Color.DEFAULT


def clip(text, max_length):
    """Cut `text` to `max_length` characters, ending in '...' when there is room for it."""
    if len(text) <= max_length:
        return text
    if max_length < len(ELLIPSIS):
        return text[:max(max_length, 0)]
    return text[:max_length - len(ELLIPSIS)] + ELLIPSIS


class RichWriter:
    """Writes colored lines to a terminal through rich."""

    def __init__(self, console=None, color=True):
        self.console = console or Console(
            file=sys.stdout, highlight=False, no_color=not color, soft_wrap=True,
        )

    def write(self, segments):
        line = Text()
        for text, color in segments:
            line.append(text, style=color.value)
        self.console.print(line)


class PlainWriter:
    """Collects lines as plain strings, dropping colors."""

    def __init__(self):
        self.lines = []

    def write(self, segments):
        self.lines.append("".join(text for text, _ in segments))


class Table:
    def __init__(self, columns, writer=None):
        self.columns = list(columns)
        self.writer = writer or RichWriter()

    def header_segments(self):
        return [(c.header.ljust(c.width), c.color) for c in self.columns]

    def row_segments(self, cells):
        """Clipped, padded cells, or None when the cell count is wrong."""
        if len(cells) != len(self.columns):
            return None
        return [
            (clip(cell, c.width - 1).ljust(c.width), c.color)
            for cell, c in zip(cells, self.columns)
        ]

    def print_headers(self):
        self.writer.write(self.header_segments())

    def print_row(self, cells):
        segments = self.row_segments(cells)
        if segments is not None:
            self.writer.write(segments)
