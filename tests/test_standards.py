# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for severity to diagnostic level mapping.
"""

import pytest

from html_accessibility_checker.audit.standards import (
    get_diagnostic_level,
    meets_severity_threshold,
)
from html_accessibility_checker.utils.report_models import DiagnosticLevel, Severity


def test_defined_severities_map_to_distinct_levels():
    levels = [get_diagnostic_level(s) for s in (Severity.HIGH, Severity.MEDIUM, Severity.LOW)]

    assert levels == [DiagnosticLevel.ERROR, DiagnosticLevel.WARNING, DiagnosticLevel.INFORMATION]
    assert len(set(levels)) == 3


def test_string_values_accepted():
    assert get_diagnostic_level("HIGH") == DiagnosticLevel.ERROR
    assert get_diagnostic_level("MEDIUM") == DiagnosticLevel.WARNING


@pytest.mark.parametrize("value", ["CRITICAL", "high", "", None, 42, object()])
def test_unknown_values_default_to_information(value):
    assert get_diagnostic_level(value) == DiagnosticLevel.INFORMATION


def test_mapping_is_stable():
    assert get_diagnostic_level(Severity.HIGH) is get_diagnostic_level(Severity.HIGH)


@pytest.mark.parametrize(
    "severity, threshold, expected",
    [
        (Severity.HIGH, "low", True),
        (Severity.LOW, "low", True),
        (Severity.LOW, "medium", False),
        (Severity.MEDIUM, "MEDIUM", True),
        ("HIGH", "high", True),
        (Severity.MEDIUM, "high", False),
    ],
)
def test_meets_severity_threshold(severity, threshold, expected):
    assert meets_severity_threshold(severity, threshold) is expected
