# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Miscellaneous accessibility checks.

Covers page language, heading count, clickable containers and colour/focus
styling that do not belong to a more specific family.
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import (
    create_issue,
    document_check,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

_H1_PATTERN = re.compile(r"<h1(?=[\s>/]|$)")


@document_check
def check_multiple_h1(line: str, line_number: int, full_text: str) -> Optional[Issue]:
    """
    Check for a page with more than one h1 (WCAG 1.3.1).

    Reported on every line that opens an h1 once the document holds two or more.
    """
    text = line.strip()

    if has_element(text, "h1") and len(_H1_PATTERN.findall(full_text)) > 1:
        return create_issue(
            line,
            line_number,
            "Multiple h1 tags found - page should have only one h1",
            Severity.MEDIUM,
        )

    return None


def check_html_lang_attribute(line: str, line_number: int) -> Optional[Issue]:
    """Check for a missing lang attribute on the html tag (WCAG 3.1.1)."""
    text = line.strip()

    if has_element(text, "html") and "lang=" not in text:
        return create_issue(
            line, line_number, "Missing lang attribute on html tag", Severity.HIGH
        )

    return None


def check_clickable_container(line: str, line_number: int) -> Optional[Issue]:
    """Check for clickable div/span elements that cannot be reached by keyboard."""
    text = line.strip()

    if (
        has_element(text, "div", "span")
        and "onclick" in text
        and "tabindex" not in text
        and "role=" not in text
    ):
        return create_issue(
            line,
            line_number,
            "Clickable div/span without keyboard accessibility - add tabindex and role",
            Severity.HIGH,
        )

    return None


def check_color_only_information(line: str, line_number: int) -> Optional[Issue]:
    """Check for colour styling that may carry information on its own (WCAG 1.4.1)."""
    text = line.strip()

    if "color:" in text or "background-color:" in text:
        return create_issue(
            line,
            line_number,
            "Color styling detected - ensure information is not conveyed by color alone",
            Severity.LOW,
        )

    return None


def check_focus_indicator(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if ":focus" in text and "outline: none" in text:
        return create_issue(
            line,
            line_number,
            "Focus outline removed without alternative focus indicator",
            Severity.HIGH,
        )

    return None


OTHER_CHECKS = (
    check_multiple_h1,
    check_html_lang_attribute,
    check_clickable_container,
    check_color_only_information,
    check_focus_indicator,
)
