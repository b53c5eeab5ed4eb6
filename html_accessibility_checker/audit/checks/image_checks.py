# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Image-related accessibility checks.

This module provides checks for image text alternatives (WCAG 1.1.1).
"""

from typing import Optional

from html_accessibility_checker.audit.base_check import (
    create_issue,
    has_blank_attribute,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity


def check_image_alt_attribute(line: str, line_number: int) -> Optional[Issue]:
    """Check for images without an alt attribute."""
    text = line.strip()

    if has_element(text, "img") and "alt=" not in text:
        return create_issue(
            line, line_number, "Missing alt attribute on image", Severity.HIGH
        )

    return None


def check_empty_alt_attribute(line: str, line_number: int) -> Optional[Issue]:
    """Check for empty or whitespace-only alt attributes."""
    text = line.strip()

    if has_blank_attribute(text, "alt"):
        return create_issue(
            line,
            line_number,
            "Empty alt attribute - consider if image is decorative or needs description",
            Severity.MEDIUM,
        )

    return None


IMAGE_CHECKS = (
    check_image_alt_attribute,
    check_empty_alt_attribute,
)
