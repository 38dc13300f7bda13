"""Icon families marking internal and leaf keys."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Mapping, Union

from .loader import load_icon_definition
from .models import UnknownIconFamilyError

logger = logging.getLogger(__name__)

DEFAULT_ICON_FILE = "icon.json"

INTERNAL_ROLE = "internalNodeIcon"
LEAF_ROLE = "leafNodeIcon"


class IconFamily:
    """A pair of markers: one for internal nodes, one for leaves."""

    internal_node_icon: str = ""
    leaf_node_icon: str = ""

    def __repr__(self):
        return f"{type(self).__name__}({self.internal_node_icon!r}, {self.leaf_node_icon!r})"


class PokerFaceIconFamily(IconFamily):
    internal_node_icon = "♢"
    leaf_node_icon = "♤"


class JsonIconFamily(IconFamily):
    """Icons configured from an icon definition file."""

    DEFAULT_INTERNAL_ICON = "+"
    DEFAULT_LEAF_ICON = "-"

    def __init__(self, internal_node_icon: str = DEFAULT_INTERNAL_ICON,
                 leaf_node_icon: str = DEFAULT_LEAF_ICON):
        self.internal_node_icon = internal_node_icon
        self.leaf_node_icon = leaf_node_icon

    @classmethod
    def from_definition(cls, definition: Mapping[str, str]) -> "JsonIconFamily":
        """
        Pick the icons out of a definition mapping by role name.

        Key order does not matter. A mapping that does not name both roles
        falls back to the default ``+`` / ``-`` pair.
        """
        if INTERNAL_ROLE in definition and LEAF_ROLE in definition:
            return cls(definition[INTERNAL_ROLE], definition[LEAF_ROLE])
        logger.warning(
            "Icon definition does not name both '%s' and '%s', using defaults",
            INTERNAL_ROLE, LEAF_ROLE,
        )
        return cls()

    @classmethod
    def from_file(cls, icon_file: Union[str, Path] = DEFAULT_ICON_FILE) -> "JsonIconFamily":
        return cls.from_definition(load_icon_definition(icon_file))


ICON_FAMILIES: Dict[str, Callable[[Union[str, Path]], IconFamily]] = {
    "poker-face": lambda icon_file: PokerFaceIconFamily(),
    "json_defined": JsonIconFamily.from_file,
}


def create_icon_family(name: str, icon_file: Union[str, Path] = DEFAULT_ICON_FILE) -> IconFamily:
    """Create the icon family registered under ``name``."""
    try:
        factory = ICON_FAMILIES[name]
    except KeyError:
        raise UnknownIconFamilyError(f"unknown icon family: {name}") from None
    return factory(icon_file)
