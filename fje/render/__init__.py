"""Rendering styles for annotated document trees."""

from typing import Dict, Type

from ..models import UnknownStyleError
from .base import Style
from .rectangle import RectangleStyle
from .tree import TreeStyle
from .width import display_width, terminal_width

STYLES: Dict[str, Type[Style]] = {
    TreeStyle.name: TreeStyle,
    RectangleStyle.name: RectangleStyle,
}


def create_style(name: str) -> Style:
    """Create the style registered under ``name``."""
    try:
        return STYLES[name]()
    except KeyError:
        raise UnknownStyleError(f"unknown style: {name}") from None


__all__ = [
    "Style",
    "TreeStyle",
    "RectangleStyle",
    "STYLES",
    "create_style",
    "display_width",
    "terminal_width",
]
