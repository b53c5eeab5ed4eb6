# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Severity levels and their mapping to diagnostic levels.
"""

from typing import Any

from html_accessibility_checker.utils.report_models import DiagnosticLevel, Severity

# Source tag attached to every diagnostic
DIAGNOSTIC_SOURCE = "HTML Accessibility Checker"

# Severity levels (higher number = more severe); used for grouping and filtering
SEVERITY_LEVELS = {
    "LOW": 1,
    "MEDIUM": 2,
    "HIGH": 3,
}

_DIAGNOSTIC_LEVELS = {
    Severity.HIGH.value: DiagnosticLevel.ERROR,
    Severity.MEDIUM.value: DiagnosticLevel.WARNING,
    Severity.LOW.value: DiagnosticLevel.INFORMATION,
}


def get_diagnostic_level(severity: Any) -> DiagnosticLevel:
    """
    Map an issue severity to a diagnostic level.

    Accepts Severity members or their string values. Anything unrecognised
    maps to INFORMATION.

    Args:
        severity: Issue severity

    Returns:
        DiagnosticLevel for the severity
    """
    if isinstance(severity, Severity):
        severity = severity.value
    if not isinstance(severity, str):
        return DiagnosticLevel.INFORMATION
    return _DIAGNOSTIC_LEVELS.get(severity, DiagnosticLevel.INFORMATION)


def meets_severity_threshold(severity: Any, threshold: str) -> bool:
    """
    Check whether a severity is at or above a threshold.

    Args:
        severity: Issue severity (member or value)
        threshold: Minimum severity name, case-insensitive

    Returns:
        True if the issue should be reported
    """
    if isinstance(severity, Severity):
        severity = severity.value
    level = SEVERITY_LEVELS.get(str(severity).upper(), 0)
    return level >= SEVERITY_LEVELS.get(threshold.upper(), 0)
