"""Render JSON documents as annotated tree and box diagrams."""

from .annotator import annotate
from .builder import VisualizationBuilder, visualize
from .icons import IconFamily, JsonIconFamily, PokerFaceIconFamily, create_icon_family
from .loader import load_json, parse_json
from .models import ErrorKind, FjeError, JsonObject, JsonValue
from .render import RectangleStyle, Style, TreeStyle, create_style

__all__ = [
    "annotate",
    "VisualizationBuilder",
    "visualize",
    "IconFamily",
    "JsonIconFamily",
    "PokerFaceIconFamily",
    "create_icon_family",
    "load_json",
    "parse_json",
    "ErrorKind",
    "FjeError",
    "JsonObject",
    "JsonValue",
    "RectangleStyle",
    "Style",
    "TreeStyle",
    "create_style",
]
