# Xcode-style diagnostic rendering: `file:line:col: severity: message`, the
# offending source line, and a caret under the reported column.

from __future__ import annotations

from typing import Sequence

from nslint.findings.models import DetectedCall


def format_diagnostic(call: DetectedCall) -> str:
    """
    Render a detected call as the three-line diagnostic Xcode understands.

    The caret line is padded with column-1 spaces; a column below 1 pads with
    nothing rather than failing.
    """
    return str(call)


def format_report(calls: Sequence[DetectedCall]) -> str:
    """Render the plain CLI report: a count line, then each diagnostic separated by a blank line."""
    violations = sum(1 for c in calls if c.is_violation)
    lines = [f"{violations} violations found."]
    lines.append("\n\n".join(format_diagnostic(c) for c in calls))
    return "\n".join(lines)
