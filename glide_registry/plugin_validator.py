"""Checks for a single ``plugin.yml``."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from glide_registry.descriptors import PluginDescriptor
from glide_registry.documents import DocumentError
from glide_registry.findings import Finding
from glide_registry.rules import attach_path, run_rules
from glide_registry.schema import DescriptorStructureError

GITHUB_PREFIX = "https://github.com/"
YAML_SUFFIXES = (".yml", ".yaml")


def version_file(versions_dir: Path, version: str) -> Path | None:
    """Return the descriptor file for version, or None if there is none."""
    for suffix in YAML_SUFFIXES:
        candidate = versions_dir / f"{version}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def check_required_fields(
    plugin: PluginDescriptor, categories: frozenset[str]
) -> Iterator[Finding]:
    for field in PluginDescriptor.REQUIRED_FIELDS:
        if getattr(plugin, field) is None:
            yield Finding.error(f"Missing required field: {field}")
        else:
            yield Finding.success(f"Field '{field}' present")


def check_name_matches_directory(
    plugin: PluginDescriptor, categories: frozenset[str]
) -> Iterator[Finding]:
    if plugin.name != plugin.directory_name:
        yield Finding.error(
            f"Plugin name '{plugin.name or ''}' doesn't match directory '{plugin.directory_name}'"
        )
    else:
        yield Finding.success("Plugin name matches directory")


def check_categories(plugin: PluginDescriptor, categories: frozenset[str]) -> Iterator[Finding]:
    if not plugin.categories:
        yield Finding.warning("No categories defined")
        return

    for category in plugin.categories:
        if category in categories:
            yield Finding.success(f"Category '{category}' is valid")
        else:
            yield Finding.error(f"Category '{category}' not found in categories.yml")


def check_repository(plugin: PluginDescriptor, categories: frozenset[str]) -> Iterator[Finding]:
    if plugin.repository is None:
        return
    if plugin.repository.startswith(GITHUB_PREFIX):
        yield Finding.success("Repository URL format valid")
    else:
        yield Finding.warning("Repository URL is not a GitHub URL")


def check_version_files(plugin: PluginDescriptor, categories: frozenset[str]) -> Iterator[Finding]:
    pointers = [("latest", plugin.latest)]
    if plugin.stable != plugin.latest:
        pointers.append(("stable", plugin.stable))

    for label, version in pointers:
        if version is None:
            continue
        if version_file(plugin.versions_dir, version) is None:
            yield Finding.error(
                f"Version file missing for {label}: {plugin.versions_dir / f'{version}.yml'}"
            )
        else:
            yield Finding.success(f"Version file exists for {label} ({version})")


PLUGIN_RULES = (
    check_required_fields,
    check_name_matches_directory,
    check_categories,
    check_repository,
    check_version_files,
)


def validate_plugin(path: Path, categories: frozenset[str]) -> list[Finding]:
    """Validate one plugin descriptor.

    Every rule runs and reports independently. Only a document that cannot be
    parsed, or whose fields have the wrong shape, stops at the first finding.

    Args:
        path: Path to ``plugins/<name>/plugin.yml``
        categories: Valid category ids

    Returns:
        Findings for this descriptor, each carrying ``path``.
    """
    try:
        plugin = PluginDescriptor.load(path)
    except DocumentError as e:
        return [Finding.error(e.reason, path)]
    except DescriptorStructureError as e:
        return [Finding.error(f"Invalid structure at {problem}", path) for problem in e.problems]

    return attach_path(run_rules(PLUGIN_RULES, plugin, categories), path)
