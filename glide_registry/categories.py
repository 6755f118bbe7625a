"""The category taxonomy shared by every plugin in the registry."""

from __future__ import annotations

from pathlib import Path

from glide_registry.debug import DebugConsole
from glide_registry.documents import DocumentError, get_field, load_document
from glide_registry.schema import CATEGORIES_SCHEMA, structure_errors

CATEGORIES_FILE = "categories.yml"


def load_categories(path: Path) -> frozenset[str]:
    """Load the set of valid category ids from a taxonomy document.

    A missing or broken taxonomy yields an empty set, so every category
    reference then fails validation instead of being skipped.

    Args:
        path: Path to ``categories.yml``

    Returns:
        The ``id`` of every record under ``categories``.
    """
    if not path.is_file():
        DebugConsole.debug(f"Taxonomy not found: {path}")
        return frozenset()

    try:
        document = load_document(path)
    except DocumentError as e:
        DebugConsole.debug(f"Taxonomy unusable: {e}")
        return frozenset()

    problems = structure_errors(document, CATEGORIES_SCHEMA)
    if problems:
        DebugConsole.debug(f"Taxonomy has unexpected structure: {'; '.join(problems)}")
        return frozenset()

    ids = frozenset(
        category_id
        for record in document["categories"]
        if (category_id := get_field(record, "id")) is not None
    )
    DebugConsole.debug(f"Loaded {len(ids)} categories from {path}")
    return ids
