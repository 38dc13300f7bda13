"""
Composition of a visualization.

Collects a style, an icon family and a document, then annotates and
renders the document in a single pass.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .annotator import annotate
from .icons import DEFAULT_ICON_FILE, IconFamily, create_icon_family
from .loader import load_json
from .models import JsonObject, MissingConfigurationError
from .render import Style, create_style

logger = logging.getLogger(__name__)


class VisualizationBuilder:
    """Builds the rendered text once style, icons and data are all set."""

    def __init__(self):
        self.style: Optional[Style] = None
        self.icon_family: Optional[IconFamily] = None
        self.json_data: Optional[JsonObject] = None

    def set_style(self, style: Style) -> "VisualizationBuilder":
        self.style = style
        return self

    def set_icon_family(self, icon_family: IconFamily) -> "VisualizationBuilder":
        self.icon_family = icon_family
        return self

    def set_json_data(self, json_data: JsonObject) -> "VisualizationBuilder":
        self.json_data = json_data
        return self

    def build(self) -> str:
        """Annotate the document with the icon family and render it."""
        missing = [
            name for name, value in (
                ("style", self.style),
                ("icon family", self.icon_family),
                ("JSON data", self.json_data),
            )
            if value is None
        ]
        if missing:
            raise MissingConfigurationError(
                f"{', '.join(missing)} must be set before building"
            )

        logger.debug("Rendering with %r and %r", self.style, self.icon_family)
        return self.style.render(annotate(self.json_data, self.icon_family))


def visualize(
    json_file: Union[str, Path],
    style: str,
    icon_family: str,
    icon_file: Union[str, Path] = DEFAULT_ICON_FILE,
) -> str:
    """Load ``json_file`` and render it with the named style and icon family."""
    builder = VisualizationBuilder()
    builder.set_json_data(load_json(json_file))
    builder.set_style(create_style(style))
    builder.set_icon_family(create_icon_family(icon_family, icon_file))
    return builder.build()
