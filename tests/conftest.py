"""Pytest configuration and registry fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from glide_registry.debug import DebugConsole

VALID_CHECKSUM = "sha256:" + "a" * 64

WriteYaml = Callable[[Path, Any], Path]


@pytest.fixture(autouse=True)
def quiet_debug_console():
    """Keep DebugConsole state from leaking between tests."""
    DebugConsole.enabled = False
    yield
    DebugConsole.enabled = False


@pytest.fixture
def write_yaml() -> WriteYaml:
    """Write data (a dict, or raw YAML text) to path, creating parent directories."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else yaml.safe_dump(data, sort_keys=False)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def valid_checksum() -> str:
    return VALID_CHECKSUM


@pytest.fixture
def categories() -> frozenset[str]:
    return frozenset({"containers", "cloud", "developer-tools"})


@pytest.fixture
def plugin_data() -> dict[str, Any]:
    """A plugin.yml for 'docker' that passes every check."""
    return {
        "name": "docker",
        "description": "Docker integration for Glide",
        "author": "Glide Maintainers",
        "repository": "https://github.com/glide-cli/glide-plugin-docker",
        "license": "MIT",
        "categories": ["containers"],
        "latest": "3.0.0",
        "stable": "3.0.0",
    }


@pytest.fixture
def version_data() -> dict[str, Any]:
    """A versions/3.0.0.yml that passes every check."""
    return {
        "version": "3.0.0",
        "releaseDate": "2024-06-01",
        "minGlideVersion": "1.2.0",
        "releaseURL": "https://github.com/glide-cli/glide-plugin-docker/releases/tag/v3.0.0",
        "checksums": {
            "darwin-arm64": VALID_CHECKSUM,
            "linux-amd64": "sha256:" + "0123456789abcdef" * 4,
        },
    }


@pytest.fixture
def registry(
    tmp_path: Path,
    write_yaml: WriteYaml,
    plugin_data: dict[str, Any],
    version_data: dict[str, Any],
) -> Path:
    """A complete, valid registry with the single plugin 'docker'."""
    write_yaml(
        tmp_path / "categories.yml",
        {
            "categories": [
                {"id": "containers", "name": "Containers"},
                {"id": "cloud", "name": "Cloud"},
            ]
        },
    )
    write_yaml(tmp_path / "plugins" / "docker" / "plugin.yml", plugin_data)
    write_yaml(tmp_path / "plugins" / "docker" / "versions" / "3.0.0.yml", version_data)
    return tmp_path
