"""Typed views over plugin and version documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from glide_registry.documents import get_field, load_document
from glide_registry.schema import PLUGIN_SCHEMA, VERSION_SCHEMA, check_structure


@dataclass(frozen=True)
class PluginDescriptor:
    """Top-level metadata of one plugin (``plugins/<name>/plugin.yml``)."""

    path: Path
    name: str | None = None
    description: str | None = None
    author: str | None = None
    repository: str | None = None
    license: str | None = None
    latest: str | None = None
    stable: str | None = None
    categories: tuple[str, ...] = ()

    REQUIRED_FIELDS = ("name", "description", "author", "repository", "license", "latest", "stable")

    @property
    def directory_name(self) -> str:
        return self.path.parent.name

    @property
    def versions_dir(self) -> Path:
        return self.path.parent / "versions"

    @classmethod
    def from_document(cls, path: Path, document: Any) -> PluginDescriptor:
        check_structure(document, PLUGIN_SCHEMA)
        categories = get_field(document, "categories") or []
        return cls(
            path=path,
            name=get_field(document, "name"),
            description=get_field(document, "description"),
            author=get_field(document, "author"),
            repository=get_field(document, "repository"),
            license=get_field(document, "license"),
            latest=get_field(document, "latest"),
            stable=get_field(document, "stable"),
            categories=tuple(category for category in categories if category is not None),
        )

    @classmethod
    def load(cls, path: Path) -> PluginDescriptor:
        """Load and structurally check a plugin descriptor.

        Raises:
            DocumentError: If the file is unreadable or not valid YAML.
            DescriptorStructureError: If a field has the wrong shape.
        """
        return cls.from_document(path, load_document(path))


@dataclass(frozen=True)
class VersionDescriptor:
    """Metadata of one release (``plugins/<name>/versions/<version>.yml``)."""

    path: Path
    version: str | None = None
    release_date: str | None = None
    min_glide_version: str | None = None
    type: str | None = None
    release_url: str | None = None
    checksums: dict[str, str] = field(default_factory=dict)

    # document key -> attribute
    REQUIRED_FIELDS = {
        "version": "version",
        "releaseDate": "release_date",
        "minGlideVersion": "min_glide_version",
    }

    @property
    def file_version(self) -> str:
        return self.path.stem

    @property
    def is_builtin(self) -> bool:
        return self.type == "builtin"

    @classmethod
    def from_document(cls, path: Path, document: Any) -> VersionDescriptor:
        check_structure(document, VERSION_SCHEMA)
        checksums = get_field(document, "checksums") or {}
        return cls(
            path=path,
            version=get_field(document, "version"),
            release_date=get_field(document, "releaseDate"),
            min_glide_version=get_field(document, "minGlideVersion"),
            type=get_field(document, "type"),
            release_url=get_field(document, "releaseURL"),
            checksums={
                platform: value for platform, value in checksums.items() if value is not None
            },
        )

    @classmethod
    def load(cls, path: Path) -> VersionDescriptor:
        """Load and structurally check a version descriptor.

        Raises:
            DocumentError: If the file is unreadable or not valid YAML.
            DescriptorStructureError: If a field has the wrong shape.
        """
        return cls.from_document(path, load_document(path))
