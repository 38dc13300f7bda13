"""
Data models for the JSON explorer.

Contains the document tree rendered by the styles and the error types
raised while loading and composing a visualization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union


@dataclass
class JsonValue:
    """A leaf node. ``None`` stands for JSON ``null``."""

    value: Optional[str] = None


@dataclass
class JsonObject:
    """An internal node with ordered, possibly duplicated, keys."""

    entries: list[tuple[str, Node]] = field(default_factory=list)

    def add(self, key: str, child: Node) -> None:
        self.entries.append((key, child))

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def values(self) -> list[Node]:
        return [child for _, child in self.entries]

    def __iter__(self) -> Iterator[tuple[str, Node]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


Node = Union[JsonObject, JsonValue]


class ErrorKind(Enum):
    """Kinds of failures reported to the caller."""
    FILE_NOT_FOUND = "file_not_found"
    MALFORMED_JSON = "malformed_json"
    MISSING_CONFIGURATION = "missing_configuration"
    INVALID_ICON_DEFINITION = "invalid_icon_definition"
    UNKNOWN_STYLE = "unknown_style"
    UNKNOWN_ICON_FAMILY = "unknown_icon_family"


class FjeError(Exception):
    """Base class for every error the explorer reports."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self):
        return f"{type(self).__name__}({self.kind.value}, '{self.message}')"


class JsonFileError(FjeError):
    """A JSON or icon definition file is missing or unreadable."""
    kind = ErrorKind.FILE_NOT_FOUND


class MalformedJsonError(FjeError):
    """A file could not be parsed, or its top-level value is not an object."""
    kind = ErrorKind.MALFORMED_JSON


class MissingConfigurationError(FjeError):
    kind = ErrorKind.MISSING_CONFIGURATION


class InvalidIconDefinitionError(FjeError):
    kind = ErrorKind.INVALID_ICON_DEFINITION


class UnknownStyleError(FjeError):
    kind = ErrorKind.UNKNOWN_STYLE


class UnknownIconFamilyError(FjeError):
    kind = ErrorKind.UNKNOWN_ICON_FAMILY
