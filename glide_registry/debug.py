"""Opt-in diagnostic output on stderr for a validation run."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from glide_registry.config import ValidatorOptions


class DebugConsole:
    """Run diagnostics, switched on by ``ValidatorOptions.debug``.

    Lines go to stderr so they never mix with the report on stdout, and are
    flushed one by one to keep their order in CI logs.
    """

    enabled = False

    @classmethod
    def configure(cls, options: ValidatorOptions, registry_root: Path | None = None) -> None:
        """Turn output on or off for a run and describe its settings."""
        cls.enabled = options.debug
        if registry_root is not None:
            cls.debug(f"Registry: {registry_root}")
        url_checks = f"on, {options.timeout}s per URL" if options.validate_urls else "off"
        cls.debug(f"URL checks: {url_checks}")

    @classmethod
    def debug(cls, msg: str) -> None:
        if not cls.enabled:
            return

        print(f"[DEBUG] {msg}", file=sys.stderr)
        sys.stderr.flush()

    @classmethod
    def debug_paths(cls, label: str, paths: Sequence[Path], root: Path) -> None:
        """Report how many descriptors were discovered and list them under ``root``."""
        if not cls.enabled:
            return

        cls.debug(f"Found {len(paths)} {label}")
        for path in paths:
            shown = path.relative_to(root) if path.is_relative_to(root) else path
            print(f"        {shown}", file=sys.stderr)
        sys.stderr.flush()
