"""Static validation of Glide plugin registries."""

from glide_registry.findings import Finding, Severity, ValidationReport
from glide_registry.plugin_validator import validate_plugin
from glide_registry.version_validator import validate_version
from glide_registry.walker import run

__version__ = "0.1.0"

__all__ = [
    "Finding",
    "Severity",
    "ValidationReport",
    "__version__",
    "run",
    "validate_plugin",
    "validate_version",
]
