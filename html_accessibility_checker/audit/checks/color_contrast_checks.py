# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Colour and contrast checks.

Contrast ratios cannot be computed from a single line of markup, so these
checks flag styling that needs manual verification (WCAG 1.4.1, 1.4.3,
1.4.11, 1.4.12, 2.4.7).
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import contains_any, create_issue
from html_accessibility_checker.utils.report_models import Issue, Severity

COLOR_DECLARATIONS = ("color:", "background-color:")

UI_DECLARATIONS = ("border:", "outline:", "box-shadow:", "background:")

SPACING_DECLARATIONS = ("line-height:", "letter-spacing:", "word-spacing:", "text-indent:")

_COLOR_NAME = re.compile(r"\b(red|green|blue|yellow)\b")
_OUTLINE_REMOVED = re.compile(r"outline:\s*(none|0)\b")


def check_color_contrast(line: str, line_number: int) -> Optional[Issue]:
    """
    Check colour declarations that need a contrast review.

    Issues:
        - colour in an inline style attribute (HIGH)
        - colour in a stylesheet rule (HIGH)
    """
    text = line.strip()

    if not contains_any(text, COLOR_DECLARATIONS):
        return None

    if "style=" in text:
        return create_issue(
            line,
            line_number,
            "Inline color styles detected - verify contrast ratio meets WCAG 2.1 AA standards",
            Severity.HIGH,
        )

    return create_issue(
        line,
        line_number,
        "Color contrast validation needed - ensure text has sufficient contrast ratio (4.5:1 for normal text, 3:1 for large text)",
        Severity.HIGH,
    )


def check_color_only_information(line: str, line_number: int) -> Optional[Issue]:
    """Check for bare colour names used without a text alternative."""
    text = line.strip()

    if (
        "color:" in text
        and _COLOR_NAME.search(text)
        and not contains_any(text, ("aria-label", "title="))
    ):
        return create_issue(
            line,
            line_number,
            "Color-only information detected - ensure information is not conveyed by color alone",
            Severity.HIGH,
        )

    return None


def check_non_text_contrast(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if contains_any(text, UI_DECLARATIONS):
        return create_issue(
            line,
            line_number,
            "UI component styling detected - ensure sufficient contrast ratio (3:1) for visual elements",
            Severity.MEDIUM,
        )

    return None


def check_focus_indicator_contrast(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if ":focus" in text and _OUTLINE_REMOVED.search(text):
        return create_issue(
            line,
            line_number,
            "Focus outline removed - ensure alternative focus indicator has sufficient contrast",
            Severity.HIGH,
        )

    return None


def check_text_spacing(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if contains_any(text, SPACING_DECLARATIONS):
        return create_issue(
            line,
            line_number,
            "Text spacing detected - ensure content remains accessible when spacing is adjusted",
            Severity.MEDIUM,
        )

    return None


COLOR_CONTRAST_CHECKS = (
    check_color_contrast,
    check_color_only_information,
    check_non_text_contrast,
    check_focus_indicator_contrast,
    check_text_spacing,
)
