"""Checksum format rules and the platforms a release can ship for."""

from __future__ import annotations

import re

PLATFORMS = ("darwin-amd64", "darwin-arm64", "linux-amd64", "linux-arm64", "windows-amd64")

# Absence of these is only a warning
RECOMMENDED_PLATFORMS = ("darwin-arm64", "linux-amd64")

CHECKSUM_PATTERN = re.compile(r"sha256:[0-9a-f]{64}")


def is_valid_checksum(checksum: str) -> bool:
    """Return True if checksum is ``sha256:`` followed by 64 lowercase hex digits."""
    return CHECKSUM_PATTERN.fullmatch(checksum) is not None
