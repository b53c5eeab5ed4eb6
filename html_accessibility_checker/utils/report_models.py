# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Pydantic models for accessibility issues, diagnostics and reports.

Issues, spans and diagnostics are frozen: a detector creates an issue once and
nothing downstream may change it.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Enum for issue severity levels."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class DiagnosticLevel(str, Enum):
    """Enum for the host-facing diagnostic levels."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


class Span(BaseModel):
    """Model for a source range (zero-based lines and columns)."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @classmethod
    def for_line(cls, line_index: int, line: str) -> "Span":
        """Return the span covering the whole physical line."""
        return cls(
            start_line=line_index,
            start_column=0,
            end_line=line_index,
            end_column=len(line),
        )


class Issue(BaseModel):
    """Model for one accessibility finding reported by a detector."""

    model_config = ConfigDict(frozen=True)

    line: int  # 1-based, for display
    issue_text: str
    severity: Severity
    span: Span


class Diagnostic(BaseModel):
    """Model for the host-facing representation of an issue."""

    model_config = ConfigDict(frozen=True)

    range: Span
    message: str
    severity_level: DiagnosticLevel
    source: str


class LineContext(BaseModel):
    """Snapshot of one physical line and the document it belongs to."""

    model_config = ConfigDict(frozen=True)

    text: str
    index: int
    full_text: str = ""


class DocumentSnapshot(BaseModel):
    """Read-only view of a document taken at analysis time."""

    model_config = ConfigDict(frozen=True)

    full_text: str
    lines: Tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "DocumentSnapshot":
        """
        Split document text into lines.

        Lines are split on '\\n'; a trailing '\\r' is dropped from each line so
        CRLF documents match the same patterns as LF documents.

        Args:
            text: Raw document text

        Returns:
            DocumentSnapshot for the text
        """
        text = text or ""
        lines = tuple(
            line[:-1] if line.endswith("\r") else line for line in text.split("\n")
        )
        return cls(full_text=text, lines=lines)

    def line_context(self, index: int) -> LineContext:
        """Return the line context for a zero-based line index."""
        return LineContext(text=self.lines[index], index=index, full_text=self.full_text)


class AuditSummary(BaseModel):
    """Model for audit summary details."""

    total_issues: int
    severity_counts: Dict[str, int] = Field(
        default_factory=lambda: {"HIGH": 0, "MEDIUM": 0, "LOW": 0}
    )
    family_counts: Dict[str, int] = Field(default_factory=dict)
    lines_with_issues: int = 0
    generated_at: datetime = Field(default_factory=datetime.now)


class ReportedIssue(BaseModel):
    """Model for an issue as written to a report."""

    line: int
    family: str
    severity: Severity
    message: str
    diagnostic_level: DiagnosticLevel


class AuditReport(BaseModel):
    """Model for audit reports."""

    file_path: Optional[str] = None
    summary: AuditSummary
    issues: List[ReportedIssue]


class TextEdit(BaseModel):
    """A whole-line replacement to be applied by the host."""

    model_config = ConfigDict(frozen=True)

    range: Span
    new_text: str

    @property
    def line_index(self) -> int:
        return self.range.start_line


class AltTextRequest(BaseModel):
    """Everything the text generator needs to describe one image."""

    model_config = ConfigDict(frozen=True)

    line_index: int
    line: str
    image_src: str
    context: str = ""


class AltFixResult(BaseModel):
    """Outcome of one alt text repair attempt."""

    model_config = ConfigDict(frozen=True)

    success: bool
    line_index: Optional[int] = None
    image_src: Optional[str] = None
    alt_text: Optional[str] = None
    decorative: bool = False
    edit: Optional[TextEdit] = None
    error: Optional[str] = None


def create_audit_summary(
    issues_by_family: List[Tuple[str, Issue]]
) -> AuditSummary:
    """
    Create an audit summary from (family, issue) pairs.

    Args:
        issues_by_family: Issues tagged with the family that reported them

    Returns:
        AuditSummary object with calculated statistics
    """
    severity_counts = {"HIGH": 0, "MEDIUM": 0, "LOW": 0}
    family_counts: Dict[str, int] = {}
    lines = set()

    for family, issue in issues_by_family:
        severity_counts[issue.severity.value] += 1
        family_counts[family] = family_counts.get(family, 0) + 1
        lines.add(issue.line)

    return AuditSummary(
        total_issues=len(issues_by_family),
        severity_counts=severity_counts,
        family_counts=family_counts,
        lines_with_issues=len(lines),
        generated_at=datetime.now(),
    )
