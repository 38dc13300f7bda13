"""
File loading for the JSON explorer.

Reads JSON documents into the node tree and reads icon definition files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from .models import (
    InvalidIconDefinitionError,
    JsonFileError,
    JsonObject,
    JsonValue,
    MalformedJsonError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class _Pairs(list):
    """Decoded JSON object kept as its raw ``(key, value)`` pairs."""


def get_file_content(file_path: PathLike) -> str:
    """Read a UTF-8 file, raising JsonFileError when it cannot be read."""
    path = Path(file_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise JsonFileError(f"could not open JSON file: {path} does not exist") from None
    except (UnicodeDecodeError, OSError) as e:
        raise JsonFileError(f"could not read JSON file {path}: {e}") from e
    logger.debug("Read %d characters from %s", len(content), path)
    return content


def _decode(text: str, source: str) -> Any:
    try:
        return json.loads(text, object_pairs_hook=_Pairs)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(f"invalid JSON in {source}: {e}") from e
    except RecursionError:
        raise MalformedJsonError(f"invalid JSON in {source}: nesting too deep") from None


def build_object(pairs: List[Tuple[str, Any]]) -> JsonObject:
    """
    Build a JsonObject from decoded ``(key, value)`` pairs.

    Strings become leaves, nested objects become internal nodes and ``null``
    becomes an empty leaf. Arrays, numbers and booleans are not part of the
    document model and are skipped.
    """
    obj = JsonObject()
    for key, value in pairs:
        if isinstance(value, _Pairs):
            obj.add(key, build_object(value))
        elif isinstance(value, str):
            obj.add(key, JsonValue(value))
        elif value is None:
            obj.add(key, JsonValue(None))
        else:
            logger.warning("Skipping key '%s': unsupported %s value", key, type(value).__name__)
    return obj


def parse_json(text: str, source: str = "<string>") -> JsonObject:
    """Parse a JSON document whose top-level value must be an object."""
    data = _decode(text, source)
    if not isinstance(data, _Pairs):
        raise MalformedJsonError(
            f"top-level value in {source} must be an object, got {type(data).__name__}"
        )
    try:
        return build_object(data)
    except RecursionError:
        raise MalformedJsonError(f"invalid JSON in {source}: nesting too deep") from None


def load_json(file_path: PathLike) -> JsonObject:
    """Load and parse a JSON file into a document tree."""
    return parse_json(get_file_content(file_path), source=str(file_path))


def load_icon_definition(file_path: PathLike) -> Dict[str, str]:
    """
    Load an icon definition file.

    The file must hold a JSON object whose values are all strings, e.g.
    ``{"internalNodeIcon": "+", "leafNodeIcon": "-"}``.
    """
    data = _decode(get_file_content(file_path), str(file_path))
    if not isinstance(data, _Pairs):
        raise InvalidIconDefinitionError(f"icon definition {file_path} must be a JSON object")

    definition: Dict[str, str] = {}
    for key, value in data:
        if not isinstance(value, str):
            raise InvalidIconDefinitionError(
                f"icon '{key}' in {file_path} must be a string, got {type(value).__name__}"
            )
        definition[key] = value
    return definition
