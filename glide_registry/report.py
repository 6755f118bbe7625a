"""Rendering a validation report to the terminal."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from glide_registry.findings import Finding, Severity, ValidationReport

MARKERS = {
    Severity.SUCCESS: "[green]✓[/green] ",
    Severity.ERROR: "[red]✗[/red] ",
    Severity.WARNING: "[yellow]![/yellow] ",
    Severity.INFO: "  ",
}


def format_finding(finding: Finding) -> str:
    return f"{MARKERS[finding.severity]}{escape(finding.message)}"


def _display_path(path: Path, registry_root: Path | None) -> str:
    if registry_root is not None:
        try:
            return str(path.relative_to(registry_root))
        except ValueError:
            pass
    return str(path)


def render_report(
    report: ValidationReport, console: Console, registry_root: Path | None = None
) -> None:
    """Print one line per finding, grouped by file, followed by a summary."""
    console.print(Panel.fit("[bold cyan]Glide Plugin Registry Validator[/bold cyan]"))

    current: Path | None = None
    for finding in report.findings:
        if finding.path != current:
            current = finding.path
            console.print()
            if current is not None:
                console.print(f"Validating {escape(_display_path(current, registry_root))}")
        console.print(format_finding(finding))

    console.print()
    console.print("[bold]Validation Summary[/bold]")
    console.print(f"Errors:   [red]{report.errors}[/red]")
    console.print(f"Warnings: [yellow]{report.warnings}[/yellow]")
    console.print()

    if report.passed:
        message = "✅ Validation passed"
        if report.warnings:
            message += f"\n{report.warnings} warning(s) found but not failing"
        console.print(Panel.fit(f"[bold green]{message}[/bold green]", border_style="green"))
    else:
        console.print(
            Panel.fit(
                f"[bold red]✗ Validation failed with {report.errors} error(s)[/bold red]\n"
                "See details above for specific issues.",
                border_style="red",
            )
        )
