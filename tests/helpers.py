"""Shared helpers for the explorer test suites."""

import json
from pathlib import Path
from typing import Any

from fje.loader import parse_json
from fje.models import JsonObject

SAMPLE = {"a": "1", "b": {"c": None}}

NESTED = {
    "oranges": {
        "mandarin": {
            "clementine": None,
            "tangerine": "cheap & juicy!",
        },
    },
    "apples": {
        "gala": None,
        "pink lady": None,
    },
}


def make_tree(data: dict) -> JsonObject:
    """Build a document tree the same way files are loaded."""
    return parse_json(json.dumps(data, ensure_ascii=False))


def write_json(directory: Path, name: str, data: Any) -> Path:
    """Write ``data`` as JSON (or raw text when given a str) and return its path."""
    path = directory / name
    text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
    path.write_text(text, encoding="utf-8")
    return path
