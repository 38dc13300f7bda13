"""Indented tree rendering."""

from __future__ import annotations

from ..models import JsonObject, JsonValue
from .base import CONNECTOR, CONTINUATION, LAST_CONNECTOR, LAST_CONTINUATION, Style


class TreeStyle(Style):
    """
    One line per key, with branch glyphs showing each key's position.

        ├─♤a: 1
        └─♢b
           └─♤c
    """

    name = "tree"

    def render(self, root: JsonObject) -> str:
        return "".join(_render_subtree(root, ""))


def _render_subtree(node: JsonObject, prefix: str) -> list[str]:
    """Recursively render the children of ``node`` as lines."""
    lines: list[str] = []
    last_index = len(node) - 1
    for i, (key, child) in enumerate(node):
        is_last = i == last_index
        connector = LAST_CONNECTOR if is_last else CONNECTOR
        match child:
            case JsonObject():
                lines.append(f"{prefix}{connector}{key}\n")
                extension = LAST_CONTINUATION if is_last else CONTINUATION
                lines.extend(_render_subtree(child, prefix + extension))
            case JsonValue(value=None):
                lines.append(f"{prefix}{connector}{key}\n")
            case JsonValue(value=value):
                lines.append(f"{prefix}{connector}{key}: {value}\n")
    return lines
