# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Accessibility audit module for HTML source text.

This module provides line-based checks grouped into families, the auditor that
runs them over a document, and report generation.
"""

from html_accessibility_checker.audit.auditor import (
    AccessibilityAuditor,
    DiagnosticCollection,
)
from html_accessibility_checker.audit.registry import (
    DEFAULT_REGISTRY,
    CheckRegistry,
    build_default_registry,
    run_family,
)
from html_accessibility_checker.audit.report_generator import generate_report
from html_accessibility_checker.audit.standards import get_diagnostic_level

__all__ = [
    "AccessibilityAuditor",
    "DiagnosticCollection",
    "CheckRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "run_family",
    "generate_report",
    "get_diagnostic_level",
]
