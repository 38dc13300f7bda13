"""Base class shared by the rendering styles."""

from __future__ import annotations

from ..models import JsonObject

CONNECTOR = "├─"
LAST_CONNECTOR = "└─"
CONTINUATION = "│  "
LAST_CONTINUATION = "   "


class Style:
    """Turns an annotated document tree into a block of text."""

    name = ""

    def render(self, root: JsonObject) -> str:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"
