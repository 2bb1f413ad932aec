# Location resolution: turn byte offsets reported by the visitor into
# file:line:column locations plus the source line they point into.

from __future__ import annotations

import bisect
import logging
import re
from typing import Iterable

from nslint.config import DEFAULT_PARAMETER_LABEL
from nslint.findings.models import DetectedCall, Finding, Location

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(rb"\r\n|\r|\n")


class OffsetMap:
    """
    Map absolute byte offsets of a source buffer to 1-based (line, column).

    Line breaks are `\\r\\n`, `\\r` and `\\n`. Columns count UTF-8 bytes from
    the start of the line, so they agree with tree-sitter byte offsets.
    """

    def __init__(self, source: bytes) -> None:
        self.source = source
        self._line_starts: list[int] = [0]
        self._line_ends: list[int] = []
        for m in _LINE_BREAK.finditer(source):
            self._line_ends.append(m.start())
            self._line_starts.append(m.end())
        self._line_ends.append(len(source))

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def location(self, offset: int) -> tuple[int, int]:
        """Return (line, column) for offset; offsets past the end clamp to the last line."""
        offset = max(0, min(offset, len(self.source)))
        index = bisect.bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index] + 1

    def line_text(self, line: int) -> str:
        """Return the text of the 1-based line without its terminator, or "" if out of range."""
        index = line - 1
        if not 0 <= index < self.line_count:
            return ""
        raw = self.source[self._line_starts[index] : self._line_ends[index]]
        return raw.decode("utf-8", errors="replace")


def resolve(
    findings: Iterable[Finding],
    offset_map: OffsetMap,
    display_name: str,
    parameter: str = DEFAULT_PARAMETER_LABEL,
) -> list[DetectedCall]:
    """
    Attach a Location and source line to every finding.

    This is a pure, order-preserving map: the result has one DetectedCall per
    input Finding, in the same order.
    """
    calls: list[DetectedCall] = []
    for finding in findings:
        line, column = offset_map.location(finding.offset)
        calls.append(
            DetectedCall(
                kind=finding.kind,
                location=Location(file=display_name, line=line, column=column),
                source_line=offset_map.line_text(line),
                parameter=parameter,
            )
        )
    logger.debug("Resolved %d finding(s) in %s", len(calls), display_name)
    return calls
