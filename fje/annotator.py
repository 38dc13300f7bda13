"""Prefix document keys with icon family markers."""

from __future__ import annotations

from .icons import IconFamily
from .models import JsonObject, JsonValue


def annotate(root: JsonObject, icons: IconFamily) -> JsonObject:
    """
    Return a copy of ``root`` with every key prefixed by its marker.

    Keys holding an object get the internal node icon, every other key the
    leaf icon. The input tree is not modified, so it can be annotated again
    with another family.
    """
    annotated = JsonObject()
    for key, child in root:
        match child:
            case JsonObject():
                annotated.add(icons.internal_node_icon + key, annotate(child, icons))
            case JsonValue(value=value):
                annotated.add(icons.leaf_node_icon + key, JsonValue(value))
    return annotated
