# Pydantic data models for detected calls: DiagnosticKind, Finding, Location, DetectedCall.

from enum import Enum

from pydantic import BaseModel, Field

from nslint.config import DEFAULT_PARAMETER_LABEL


class DiagnosticKind(str, Enum):
    """Classification of a single call site of the target function."""

    VALID = "valid"
    MISSING_REQUIRED_ARGUMENT = "missing-argument"
    INVALID_REQUIRED_ARGUMENT_VALUE = "invalid-argument-value"

    @property
    def severity(self) -> str:
        """Xcode severity keyword: "note" for valid calls, "error" otherwise."""
        return "note" if self is DiagnosticKind.VALID else "error"

    def message(self, parameter: str = DEFAULT_PARAMETER_LABEL) -> str:
        """Fixed human-readable message, naming the required parameter label."""
        if self is DiagnosticKind.VALID:
            return "Valid call"
        if self is DiagnosticKind.MISSING_REQUIRED_ARGUMENT:
            return f"Missing parameter `{parameter}:`"
        return f"Incorrect value for parameter `{parameter}:`"


class Finding(BaseModel):
    """A call site detected by the visitor, before line/column resolution."""

    kind: DiagnosticKind
    offset: int = Field(..., ge=0, description="UTF-8 byte offset from the start of the buffer")

    model_config = {"frozen": True}


class Location(BaseModel):
    """Where in the source a call was reported (display name, line, column)."""

    file: str
    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(..., ge=1, description="1-based column number")

    model_config = {"frozen": True}


class DetectedCall(BaseModel):
    """A resolved call site, ready to be rendered as an Xcode diagnostic."""

    kind: DiagnosticKind
    location: Location
    source_line: str = ""
    parameter: str = DEFAULT_PARAMETER_LABEL

    model_config = {"frozen": True}

    @property
    def severity(self) -> str:
        return self.kind.severity

    @property
    def message(self) -> str:
        return self.kind.message(self.parameter)

    @property
    def is_violation(self) -> bool:
        return self.kind is not DiagnosticKind.VALID

    def __str__(self) -> str:
        # file:line:col: severity: message, the source line, a caret under the column
        loc = self.location
        header = f"{loc.file}:{loc.line}:{loc.column}: {self.severity}: {self.message}"
        caret = " " * max(0, loc.column - 1) + "^"
        return "\n".join((header, self.source_line, caret))
