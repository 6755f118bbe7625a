"""Command line entry point."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from rich.console import Console

from glide_registry.config import ValidatorOptions
from glide_registry.debug import DebugConsole
from glide_registry.report import render_report
from glide_registry.walker import run

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glide-registry-validate",
        description="Validate a Glide plugin registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0 - Validation passed (warnings allowed)
  1 - Validation failed (errors found)

Environment:
  VALIDATE_URLS=true         Check that every releaseURL is reachable
  GLIDE_REGISTRY_DEBUG=true  Print diagnostics to stderr

Examples:
  glide-registry-validate                      # Validate the current directory
  glide-registry-validate path/to/registry
  glide-registry-validate --validate-urls      # Also probe release URLs
        """,
    )
    parser.add_argument(
        "registry_root",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Registry directory containing categories.yml and plugins/ (default: cwd)",
    )
    parser.add_argument(
        "--validate-urls",
        action="store_true",
        default=None,
        help="Check that each releaseURL responds (network access required)",
    )
    parser.add_argument(
        "--timeout", type=float, default=None, help="Seconds allowed per URL check (default: 10)"
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Print diagnostics")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the validator and return the process exit code."""
    args = build_parser().parse_args(argv)
    options = ValidatorOptions.from_env(
        os.environ, validate_urls=args.validate_urls, timeout=args.timeout, debug=args.debug
    )
    DebugConsole.configure(options, args.registry_root)

    report = run(args.registry_root, options)
    render_report(report, console, registry_root=args.registry_root)
    return report.exit_code
