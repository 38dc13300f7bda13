"""Boxed tree rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from ..models import JsonObject, JsonValue
from .base import CONNECTOR, CONTINUATION, LAST_CONNECTOR, Style
from .width import display_width

FILL = "─"
PADDING = 10

TOP_LEFT = "┌─"
TOP_RIGHT = "┐"
RIGHT_EDGE = "┤"
BOTTOM_INDENT = "└─ "
BOTTOM_RIGHT = "┘"


@dataclass
class Row:
    """One key of the document, positioned in the box."""

    depth: int
    label: str
    is_first: bool = False
    is_last: bool = False

    @property
    def body(self) -> str:
        """The row text before fill, as used for measurement."""
        return CONTINUATION * self.depth + CONNECTOR + self.label


def iter_rows(root: JsonObject) -> Iterator[Row]:
    """Yield the rows of ``root`` in pre-order, flagging the first and last."""
    previous = None
    for row in _walk(root, 0):
        if previous is None:
            row.is_first = True
        else:
            yield previous
        previous = row
    if previous is not None:
        previous.is_last = True
        yield previous


def _walk(node: JsonObject, depth: int) -> Iterator[Row]:
    for key, child in node:
        match child:
            case JsonObject():
                yield Row(depth, key)
                yield from _walk(child, depth + 1)
            case JsonValue(value=None):
                yield Row(depth, key)
            case JsonValue(value=value):
                yield Row(depth, f"{key}: {value}")


class RectangleStyle(Style):
    """
    Tree rendering closed into a box.

    Rows are padded with ``─`` so every right edge lands in the same column,
    ``PADDING`` columns past the widest row. The first row opens the box
    with ``┌``/``┐`` and the last row draws the bottom edge with ``└``/``┘``::

        ┌─♤a: 1──────────┐
        ├─♢b─────────────┤
        └─ └─♤c──────────┘

    Rendering takes two passes over the tree: the first measures the widest
    row, the second pads every row to that width.
    """

    name = "rectangle"

    def __init__(self, width: Callable[[str], int] = display_width):
        self.width = width

    def render(self, root: JsonObject) -> str:
        max_width = self.measure(root)
        target = max_width + PADDING
        return "".join(self._format_row(row, target) for row in iter_rows(root))

    def measure(self, root: JsonObject) -> int:
        """Width of the widest row before fill, 0 for an empty tree."""
        return max((self.width(row.body) for row in iter_rows(root)), default=0)

    def _format_row(self, row: Row, target: int) -> str:
        fill = FILL * (target - self.width(row.body))
        if row.is_first:
            return f"{TOP_LEFT}{row.label}{fill}{TOP_RIGHT}\n"
        if row.is_last:
            indent = BOTTOM_INDENT * row.depth
            return f"{indent}{LAST_CONNECTOR}{row.label}{fill}{BOTTOM_RIGHT}\n"
        indent = CONTINUATION * row.depth
        return f"{indent}{CONNECTOR}{row.label}{fill}{RIGHT_EDGE}\n"
