# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Keyboard navigation checks (WCAG 2.1.1, 2.1.2, 2.1.4, 2.4.1).
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    document_check,
    get_attribute,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

KEY_HANDLERS = ("onkeydown", "onkeyup", "onkeypress")

DIALOG_MARKERS = ('role="dialog"', 'role="alertdialog"', "modal", "popup")

# Composite widgets that manage arrow-key navigation themselves
COMPOSITE_ROLES = ("menu", "menubar", "tablist", "grid")

_POSITIVE_PATTERN = re.compile(r"tabindex=[\"']([1-9][0-9]*)[\"']")


def check_clickable_keyboard_support(line: str, line_number: int) -> Optional[Issue]:
    """Check for clickable div/span with no key handler and no tabindex (WCAG 2.1.1)."""
    text = line.strip()

    if (
        has_element(text, "div", "span")
        and "onclick" in text
        and not contains_any(text, KEY_HANDLERS)
        and "tabindex=" not in text
    ):
        return create_issue(
            line,
            line_number,
            "Clickable element missing keyboard support - add onkeydown/onkeyup handlers or use semantic button element",
            Severity.HIGH,
        )

    return None


def check_keyboard_trap(line: str, line_number: int) -> Optional[Issue]:
    """Check for focusable dialogs that must release focus on Escape (WCAG 2.1.2)."""
    text = line.strip()

    if get_attribute(text, "tabindex") == "0" and contains_any(text, DIALOG_MARKERS):
        return create_issue(
            line,
            line_number,
            "Modal/dialog element detected - ensure keyboard trap is properly managed with Escape key",
            Severity.HIGH,
        )

    return None


def check_missing_key_handlers(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        "onclick" in text
        and not contains_any(text, KEY_HANDLERS)
        and has_element(text, "div", "span")
    ):
        return create_issue(
            line,
            line_number,
            "Interactive element missing keyboard event handlers - add onkeydown/onkeyup for accessibility",
            Severity.HIGH,
        )

    return None


def check_navigation_order(line: str, line_number: int) -> Optional[Issue]:
    match = _POSITIVE_PATTERN.search(line.strip())

    if match:
        return create_issue(
            line,
            line_number,
            f'Positive tabindex="{match.group(1)}" disrupts natural keyboard navigation order - use tabindex="0" or negative values',
            Severity.HIGH,
        )

    return None


@document_check
def check_skip_links(line: str, line_number: int, full_text: str) -> Optional[Issue]:
    """Check for a page body without any skip link (WCAG 2.4.1)."""
    text = line.strip()

    if has_element(text, "body") and "skip" not in full_text:
        return create_issue(
            line,
            line_number,
            "Page missing skip links - add skip links for keyboard navigation to main content",
            Severity.MEDIUM,
        )

    return None


def check_keyboard_shortcuts(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for key handlers that may define character shortcuts (WCAG 2.1.4).

    Any onkeydown handler is reported; the handler body is not inspected.
    """
    text = line.strip()

    if "onkeydown" in text:
        return create_issue(
            line,
            line_number,
            "Keyboard shortcut detected - ensure users can turn off or remap shortcuts",
            Severity.MEDIUM,
        )

    return None


def check_composite_role_keyboard(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        get_attribute(text, "role") in COMPOSITE_ROLES
        and "tabindex=" not in text
        and "onkeydown" not in text
    ):
        return create_issue(
            line,
            line_number,
            "ARIA role requires keyboard navigation - add proper keyboard event handlers",
            Severity.HIGH,
        )

    return None


def check_form_keyboard_access(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        has_element(text, "select", "input")
        and "tabindex=" not in text
        and "disabled" not in text
    ):
        return create_issue(
            line,
            line_number,
            "Form element should be keyboard accessible - ensure proper tabindex and keyboard support",
            Severity.MEDIUM,
        )

    return None


KEYBOARD_CHECKS = (
    check_clickable_keyboard_support,
    check_keyboard_trap,
    check_missing_key_handlers,
    check_navigation_order,
    check_skip_links,
    check_keyboard_shortcuts,
    check_composite_role_keyboard,
    check_form_keyboard_access,
)
