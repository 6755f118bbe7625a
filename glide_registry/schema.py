"""Structural schemas for registry documents.

These schemas only describe the *shape* of a document: which fields are
mappings, which are sequences and which are scalars. Whether a required field
is present, or a value is well formed, is decided by the validators so that
every problem is reported as its own finding.

Documents are loaded with every scalar as text and null markers already
mapped to None, so scalars are always ``string`` or ``null`` here.
"""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

SCALAR: dict[str, Any] = {"type": ["string", "null"]}

PLUGIN_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": True,
    "properties": {
        "name": SCALAR,
        "description": SCALAR,
        "author": SCALAR,
        "repository": SCALAR,
        "license": SCALAR,
        "latest": SCALAR,
        "stable": SCALAR,
        "categories": {"type": ["array", "null"], "items": SCALAR},
    },
}

VERSION_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": True,
    "properties": {
        "version": SCALAR,
        "releaseDate": SCALAR,
        "minGlideVersion": SCALAR,
        "type": SCALAR,
        "releaseURL": SCALAR,
        "checksums": {"type": ["object", "null"], "additionalProperties": SCALAR},
    },
}

CATEGORIES_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["categories"],
    "properties": {
        "categories": {
            "type": "array",
            "items": {"type": "object", "properties": {"id": SCALAR}},
        },
    },
}


class DescriptorStructureError(Exception):
    """A document parsed but does not have the shape of its descriptor."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


def structure_errors(data: Any, schema: dict[str, Any]) -> list[str]:
    """Validate data against a Draft 7 schema.

    Args:
        data: Loaded document
        schema: JSON Schema dict (Draft 7 format)

    Returns:
        List of ``"<field path>: <message>"`` entries, sorted by field path.
    """
    try:
        Draft7Validator.check_schema(schema)
        validator = Draft7Validator(schema)
    except SchemaError as e:
        return [f"root: INTERNAL ERROR - Invalid schema definition: {e}"]

    errors = sorted(validator.iter_errors(data), key=lambda error: [str(p) for p in error.path])
    return [
        f"{'.'.join(str(p) for p in error.path) if error.path else 'root'}: {error.message}"
        for error in errors
    ]


def check_structure(data: Any, schema: dict[str, Any]) -> None:
    """Raise DescriptorStructureError if data does not fit schema."""
    problems = structure_errors(data, schema)
    if problems:
        raise DescriptorStructureError(problems)
