"""Running validation rules independently of one another."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from pathlib import Path

from glide_registry.findings import Finding

Rule = Callable[..., Iterable[Finding]]


def run_rule(rule: Rule, *args: object) -> list[Finding]:
    """Evaluate one rule, turning an unexpected exception into an error finding.

    A bug in one rule must not hide the findings of the rules after it.
    """
    try:
        return list(rule(*args))
    except Exception as e:  # noqa: BLE001
        message = f"Internal error in check '{rule.__name__}': {type(e).__name__}: {e}"
        return [Finding.error(message)]


def run_rules(rules: Iterable[Rule], *args: object) -> list[Finding]:
    findings: list[Finding] = []
    for rule in rules:
        findings.extend(run_rule(rule, *args))
    return findings


def attach_path(findings: Iterable[Finding], path: Path) -> list[Finding]:
    return [replace(finding, path=path) for finding in findings]
