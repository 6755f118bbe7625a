"""Run options, read from the environment and the command line."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TIMEOUT = 10.0

VALIDATE_URLS_ENV = "VALIDATE_URLS"
DEBUG_ENV = "GLIDE_REGISTRY_DEBUG"


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "false") == "true"


@dataclass(frozen=True)
class ValidatorOptions:
    """Settings for one validation run.

    Attributes:
        validate_urls: Probe each ``releaseURL`` over the network
        timeout: Seconds allowed per probe
        debug: Emit diagnostics on stderr
    """

    validate_urls: bool = False
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: object
    ) -> ValidatorOptions:
        """Build options from environment variables.

        Only the literal value ``true`` enables a flag. Keyword overrides
        that are not None (e.g. from CLI flags) take precedence.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {
            "validate_urls": _env_flag(environ, VALIDATE_URLS_ENV),
            "debug": _env_flag(environ, DEBUG_ENV),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)  # type: ignore[arg-type]
