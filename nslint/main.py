"""
Typer CLI entry point and orchestration of the lint pipeline.

- Accepts a file or directory path
- A readable file is linted as-is; a directory is scanned recursively for
  .swift files (traversal.find_source_files)
- Builds a SourceUnit for each file and runs the Linter over it
- Prints "<n> violations found." followed by Xcode-style diagnostics, or a
  Rich report with --format rich
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from nslint.config import LinterConfig, override_config
from nslint.context import create_context
from nslint.findings.models import DetectedCall
from nslint.linter import Linter
from nslint.parser import create_parser
from nslint.reporting.console import print_calls
from nslint.reporting.diagnostics import format_report
from nslint.traversal import find_source_files, is_readable_file

logger = logging.getLogger(__name__)

app = typer.Typer(help="Check that every NSLocalizedString call passes `bundle: .module`.")


class OutputFormat(str, Enum):
    xcode = "xcode"
    rich = "rich"


def _collect_files(target: Path, config: LinterConfig, exclude: set[str]) -> tuple[List[Path], bool]:
    """
    Resolve a target path into the files to lint.

    Returns (files, is_directory). A readable file is returned as-is whatever
    its extension; a directory is scanned for config.file_extension files.
    """
    if not target.exists():
        raise typer.BadParameter(f"File doesn't exist at path: {target}")

    if target.is_file() and is_readable_file(target):
        return [target], False

    if target.is_dir():
        files = find_source_files(target, extension=config.file_extension, ignore_dirs=exclude)
        if not files:
            logger.warning("No %s files found under %s", config.file_extension, target)
        return files, True

    raise typer.BadParameter(f"Unable to read input path: {target}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def lint(
    target: Path = typer.Argument(
        ...,
        help="Swift file or directory to lint.",
    ),
    report_all: bool = typer.Option(
        False, "--all", help="Also report valid calls (as notes)."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.xcode, "--format", help="Output style: xcode diagnostics or a rich report."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with code 1 when violations are found."
    ),
    function_name: Optional[str] = typer.Option(
        None, "--function", help="Name of the function to check."
    ),
    parameter_label: Optional[str] = typer.Option(
        None, "--label", help="Label of the required argument."
    ),
    accepted_values: Optional[List[str]] = typer.Option(
        None, "--accept", help="Accepted argument spelling (repeatable); replaces the defaults."
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", help="Directory name to skip while scanning (repeatable)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Lint a single Swift file or every .swift file under a directory.
    """
    _configure_logging(verbose)
    config = override_config(
        function_name=function_name,
        parameter_label=parameter_label,
        accepted_values=accepted_values,
    )
    files, is_directory = _collect_files(target, config, set(exclude or []))

    parser = create_parser()
    linter = Linter(config, parser=parser)
    calls: List[DetectedCall] = []

    for path in files:
        if is_directory and output_format is OutputFormat.xcode:
            typer.echo(f"Parsing: {path}...")
        unit = create_context(path, parser=parser)
        if unit is None:
            # Unreadable file; error already logged in create_context
            continue
        calls.extend(linter.detect_unit(unit))

    if not report_all:
        calls = [c for c in calls if c.is_violation]

    if output_format is OutputFormat.rich:
        print_calls(calls, analyzed_files=files)
    else:
        typer.echo(format_report(calls))

    if strict and any(c.is_violation for c in calls):
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the `nslocalizedstring-linter` script and `python -m nslint.main`."""
    app()


if __name__ == "__main__":
    main()
