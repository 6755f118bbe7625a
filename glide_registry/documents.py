"""Loading registry YAML documents and reading fields out of them."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

# yq prints all of these as null; the registry treats them as "not set"
NULL_MARKERS = frozenset({"", "~", "null", "Null", "NULL"})


class AliasError(yaml.MarkedYAMLError):
    """A document used a YAML alias (``*name``)."""


class RegistryLoader(yaml.BaseLoader):
    """``BaseLoader`` that refuses aliases.

    Every alias expands into a full copy once the document is normalized, so a
    few nested anchors in a small file can blow up into an enormous tree.
    Registry descriptors are flat enough to never need them.
    """

    def compose_node(self, parent: Any, index: Any) -> Any:
        if self.check_event(yaml.AliasEvent):
            event = self.peek_event()
            raise AliasError(
                None, None, f"alias *{event.anchor} is not allowed", event.start_mark
            )
        return super().compose_node(parent, index)


class DocumentError(Exception):
    """A registry document could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def normalize_scalar(value: str) -> str | None:
    """Strip literal double quotes and map null markers to None."""
    value = value.strip('"')
    if value in NULL_MARKERS:
        return None
    return value


def normalize(node: Any) -> Any:
    """Apply scalar normalization to every value in a parsed document."""
    if isinstance(node, dict):
        return {key: normalize(value) for key, value in node.items()}
    if isinstance(node, list):
        return [normalize(item) for item in node]
    if isinstance(node, str):
        return normalize_scalar(node)
    return node


def load_document(path: Path) -> Any:
    """Parse a YAML document with every scalar kept as written.

    ``yaml.BaseLoader`` performs no type resolution, so ``version: 1.10`` and
    ``releaseDate: 2024-01-15`` come back as the exact text in the file
    instead of a float or a date.

    Args:
        path: Document to load

    Returns:
        The normalized document; an empty file loads as an empty mapping.

    Raises:
        DocumentError: If the file cannot be read or is not valid YAML,
            or uses aliases.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DocumentError(path, "File not found") from None
    except PermissionError:
        raise DocumentError(path, "Permission denied reading file") from None
    except UnicodeDecodeError as e:
        raise DocumentError(path, f"File is not valid UTF-8 (byte {e.start}: {e.reason})") from None
    except OSError as e:
        raise DocumentError(path, f"Cannot read file: {e}") from None

    try:
        data = yaml.load(text, Loader=RegistryLoader)  # noqa: S506 - BaseLoader builds no objects
    except AliasError as e:
        raise DocumentError(path, f"YAML aliases are not allowed\n  {e}") from None
    except yaml.YAMLError as e:
        raise DocumentError(path, f"Invalid YAML syntax\n  {e}") from None

    if data is None:
        return {}
    return normalize(data)


def get_field(document: Any, path: str | Sequence[str]) -> Any:
    """Return the value at ``path`` in a loaded document, or None if absent.

    Args:
        document: A document returned by :func:`load_document`
        path: Dotted key path (``"checksums.linux-amd64"``) or a sequence of keys

    Returns:
        The value, or None when any step of the path is missing or not a mapping.
    """
    keys = path.split(".") if isinstance(path, str) else list(path)
    node = document
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
        if node is None:
            return None
    if isinstance(node, str):
        return normalize_scalar(node)
    return node
