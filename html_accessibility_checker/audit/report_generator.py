# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Generate accessibility audit reports in text or JSON format.

Reports are built as Pydantic ``AuditReport`` models and rendered from there.
"""

from typing import List, Optional, Sequence, Tuple

from html_accessibility_checker.audit.standards import (
    get_diagnostic_level,
    meets_severity_threshold,
)
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import (
    AuditReport,
    Issue,
    ReportedIssue,
    create_audit_summary,
)

logger = setup_logger(__name__)

REPORT_FORMATS = ("text", "json")

SEVERITY_ICONS = {
    "HIGH": "🔴",
    "MEDIUM": "🟡",
    "LOW": "🟢",
}


def build_audit_report(
    issues_by_family: Sequence[Tuple[str, Issue]],
    file_path: Optional[str] = None,
    min_severity: str = "low",
) -> AuditReport:
    """
    Build an audit report from (family, issue) pairs.

    Args:
        issues_by_family: Issues in report order, tagged with their family
        file_path: Path of the audited file, if any
        min_severity: Lowest severity to include ('high', 'medium' or 'low')

    Returns:
        AuditReport model
    """
    kept = [
        (family, issue)
        for family, issue in issues_by_family
        if meets_severity_threshold(issue.severity, min_severity)
    ]

    issues: List[ReportedIssue] = [
        ReportedIssue(
            line=issue.line,
            family=family,
            severity=issue.severity,
            message=issue.issue_text,
            diagnostic_level=get_diagnostic_level(issue.severity),
        )
        for family, issue in kept
    ]

    return AuditReport(
        file_path=file_path,
        summary=create_audit_summary(kept),
        issues=issues,
    )


def generate_text_report(report: AuditReport) -> str:
    """
    Render a report as console text.

    Args:
        report: The audit report

    Returns:
        Report text
    """
    text = []

    if report.file_path:
        text.append(f"🔍 Accessibility Check - {report.file_path}")

    if not report.issues:
        text.append("✅ No accessibility issues detected!")
        return "\n".join(text)

    text.append(f"⚠️  Found {report.summary.total_issues} accessibility issue(s):")
    text.append("=" * 50)

    for issue in report.issues:
        icon = SEVERITY_ICONS.get(issue.severity.value, "🟢")
        text.append(
            f"{icon} Line {issue.line}: {issue.message} ({issue.severity.value})"
        )

    text.append("=" * 50)
    counts = report.summary.severity_counts
    text.append(
        f"HIGH: {counts.get('HIGH', 0)}  MEDIUM: {counts.get('MEDIUM', 0)}  "
        f"LOW: {counts.get('LOW', 0)}  "
        f"Lines affected: {report.summary.lines_with_issues}"
    )
    text.append("💡 Tip: Fix these issues to improve accessibility for all users")

    return "\n".join(text)


def generate_json_report(report: AuditReport) -> str:
    """Render a report as indented JSON."""
    return report.model_dump_json(indent=2)


def generate_report(
    report: AuditReport,
    output_path: Optional[str] = None,
    report_format: str = "text",
) -> str:
    """
    Generate an accessibility audit report in the specified format.

    Args:
        report: The audit report
        output_path: Path where the report should be saved (optional)
        report_format: Format of the report (text or json)

    Returns:
        The rendered report

    Raises:
        ValueError: If the format is not supported
    """
    if report_format == "json":
        content = generate_json_report(report)
    elif report_format == "text":
        content = generate_text_report(report)
    else:
        raise ValueError(
            f"Unsupported report format: {report_format}. "
            f"Supported formats: {', '.join(REPORT_FORMATS)}"
        )

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Generated {report_format} report: {output_path}")

    return content
