"""
High-level linter API.

Linter ties the pipeline together for one source unit:

- parse the text with tree-sitter (nslint.parser),
- walk the tree with CallVisitor to collect byte-offset findings,
- resolve every offset into file:line:column plus the source line.

detect_calls() returns every call including valid ones; lint() keeps only
the violations. Both are pure functions of (source, file_name). The *_file
variants read the file first and let OSError propagate to the caller.

Typical usage:
    from nslint.linter import Linter

    for call in Linter().lint(source, file_name="Strings.swift"):
        print(call)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Parser

from nslint.config import LinterConfig, get_default_config
from nslint.context import SourceUnit, create_unit
from nslint.findings.models import DetectedCall
from nslint.locations import OffsetMap, resolve
from nslint.visitor import CallVisitor

logger = logging.getLogger(__name__)


class Linter:
    """Detect and check calls to the configured localization function."""

    def __init__(self, config: Optional[LinterConfig] = None, parser: Optional[Parser] = None) -> None:
        self.config = config or get_default_config()
        self.parser = parser

    def detect_unit(self, unit: SourceUnit) -> list[DetectedCall]:
        """Run the visitor and resolver over an already parsed unit."""
        findings = CallVisitor(self.config).visit(unit.tree, unit.source)
        return resolve(
            findings,
            OffsetMap(unit.source),
            unit.display_name,
            parameter=self.config.parameter_label,
        )

    def detect_calls(self, source: Union[str, bytes], file_name: str = "<stdin>") -> list[DetectedCall]:
        """Return every call site found in source, valid ones included, in document order."""
        unit = create_unit(source, file_name, parser=self.parser)
        return self.detect_unit(unit)

    def lint(self, source: Union[str, bytes], file_name: str = "<stdin>") -> list[DetectedCall]:
        """Return only the call sites that violate the configured rule."""
        return [c for c in self.detect_calls(source, file_name) if c.is_violation]

    def detect_calls_in_file(self, path: Union[str, Path]) -> list[DetectedCall]:
        """Read path and run detect_calls on it; raises OSError if the file cannot be read."""
        path = Path(path)
        source = path.read_bytes()
        logger.info("Linting %s", path)
        return self.detect_calls(source, str(path))

    def lint_file(self, path: Union[str, Path]) -> list[DetectedCall]:
        """Read path and run lint on it; raises OSError if the file cannot be read."""
        return [c for c in self.detect_calls_in_file(path) if c.is_violation]


def detect_calls(source: Union[str, bytes], file_name: str = "<stdin>") -> list[DetectedCall]:
    """detect_calls() with the default configuration."""
    return Linter().detect_calls(source, file_name)


def lint(source: Union[str, bytes], file_name: str = "<stdin>") -> list[DetectedCall]:
    """lint() with the default configuration."""
    return Linter().lint(source, file_name)
