"""Discovering every descriptor in a registry and validating it."""

from __future__ import annotations

from pathlib import Path

from glide_registry.categories import CATEGORIES_FILE, load_categories
from glide_registry.config import ValidatorOptions
from glide_registry.debug import DebugConsole
from glide_registry.findings import Finding, ValidationReport
from glide_registry.plugin_validator import YAML_SUFFIXES, validate_plugin
from glide_registry.version_validator import validate_version

PLUGINS_DIR = "plugins"
PLUGIN_FILES = tuple(f"plugin{suffix}" for suffix in YAML_SUFFIXES)


def find_plugin_files(registry_root: Path) -> list[Path]:
    plugins_dir = registry_root / PLUGINS_DIR
    if not plugins_dir.is_dir():
        return []
    return sorted(
        path
        for path in plugins_dir.rglob("plugin.*")
        if path.name in PLUGIN_FILES and path.is_file()
    )


def find_version_files(registry_root: Path) -> list[Path]:
    plugins_dir = registry_root / PLUGINS_DIR
    if not plugins_dir.is_dir():
        return []
    return sorted(
        path
        for path in plugins_dir.rglob("*")
        if path.parent.name == "versions" and path.suffix in YAML_SUFFIXES and path.is_file()
    )


def run(registry_root: Path, options: ValidatorOptions | None = None) -> ValidationReport:
    """Validate a whole registry.

    Plugin descriptors are validated first, then version descriptors, each in
    sorted path order. A broken file only affects its own findings.

    Args:
        registry_root: Directory holding ``categories.yml`` and ``plugins/``
        options: Run options

    Returns:
        Report with every finding of the run; its ``exit_code`` is non-zero
        iff any error was found.
    """
    options = options or ValidatorOptions()
    report = ValidationReport()

    categories_path = registry_root / CATEGORIES_FILE
    if categories_path.is_file():
        report.add(Finding.success(f"{CATEGORIES_FILE} exists"))
    else:
        report.add(Finding.error(f"{CATEGORIES_FILE} not found"))
    categories = load_categories(categories_path)
    if categories_path.is_file() and not categories:
        report.add(Finding.warning(f"{CATEGORIES_FILE} defines no usable categories"))

    plugin_files = find_plugin_files(registry_root)
    DebugConsole.debug_paths("plugin descriptor(s)", plugin_files, registry_root)
    if not plugin_files:
        report.add(Finding.warning("No plugin.yml files found"))
    for path in plugin_files:
        report.extend(validate_plugin(path, categories))

    version_files = find_version_files(registry_root)
    DebugConsole.debug_paths("version descriptor(s)", version_files, registry_root)
    if not version_files:
        report.add(Finding.warning("No version files found"))
    for path in version_files:
        report.extend(validate_version(path, options))

    return report
