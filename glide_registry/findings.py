"""Validation findings and the report that accumulates them."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


class Severity(enum.Enum):
    """How a finding affects the outcome of a run.

    Only ERROR fails a run. SUCCESS and INFO exist so operators can see which
    checks ran.
    """

    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"


@dataclass(frozen=True)
class Finding:
    """A single validation outcome."""

    severity: Severity
    message: str
    path: Path | None = None

    @classmethod
    def error(cls, message: str, path: Path | None = None) -> Finding:
        return cls(Severity.ERROR, message, path)

    @classmethod
    def warning(cls, message: str, path: Path | None = None) -> Finding:
        return cls(Severity.WARNING, message, path)

    @classmethod
    def success(cls, message: str, path: Path | None = None) -> Finding:
        return cls(Severity.SUCCESS, message, path)

    @classmethod
    def info(cls, message: str, path: Path | None = None) -> Finding:
        return cls(Severity.INFO, message, path)


@dataclass
class ValidationReport:
    """Ordered collection of findings for a whole run.

    Totals are derived from the findings, so reports can be built up and
    merged freely without any shared counters.
    """

    findings: list[Finding] = field(default_factory=list)

    def add(self, finding: Finding) -> None:
        self.findings.append(finding)

    def extend(self, findings: Iterable[Finding]) -> None:
        self.findings.extend(findings)

    def count(self, severity: Severity) -> int:
        return sum(1 for finding in self.findings if finding.severity is severity)

    @property
    def errors(self) -> int:
        return self.count(Severity.ERROR)

    @property
    def warnings(self) -> int:
        return self.count(Severity.WARNING)

    @property
    def passed(self) -> bool:
        return self.errors == 0

    @property
    def exit_code(self) -> int:
        """Exit code for the run: warnings never fail it."""
        return 0 if self.passed else 1
