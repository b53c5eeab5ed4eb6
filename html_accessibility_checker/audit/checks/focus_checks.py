# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Focus management checks.

This module provides checks for focus order, focus visibility and focus
handling in dialogs, widgets and dynamic content (WCAG 2.4.3, 2.4.7).
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    get_attribute,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

DIALOG_MARKERS = ('role="dialog"', 'role="alertdialog"', "modal", "popup")

FOCUS_WIDGET_ROLES = ("menu", "menubar", "tablist", "grid", "tree", "listbox")

DOM_MUTATIONS = ("innerHTML", "appendChild", "insertBefore", "replaceChild")

ROUTE_CHANGES = ("router", "navigate", "history.pushState", "history.replaceState")

COLLAPSIBLE_MARKERS = ("aria-expanded", "collapsible", "accordion", "dropdown")

TABLE_FEATURES = ("sortable", "filterable", "editable", "selectable")

_POSITIVE_PATTERN = re.compile(r"tabindex=[\"']([1-9][0-9]*)[\"']")
_OUTLINE_REMOVED = re.compile(r"outline:\s*(none|0)\b")


def _has_key_handler(text: str) -> bool:
    return contains_any(text, ("onkeydown", "onkeyup"))


def check_focus_order(line: str, line_number: int) -> Optional[Issue]:
    match = _POSITIVE_PATTERN.search(line.strip())

    if match:
        return create_issue(
            line,
            line_number,
            f'Positive tabindex="{match.group(1)}" disrupts natural focus order - use tabindex="0" or negative values',
            Severity.HIGH,
        )

    return None


def check_focus_trap(line: str, line_number: int) -> Optional[Issue]:
    """Check for dialogs without key handlers to contain and release focus."""
    text = line.strip()

    if contains_any(text, DIALOG_MARKERS) and not _has_key_handler(text):
        return create_issue(
            line,
            line_number,
            "Modal/dialog element missing focus trap management - add keyboard handlers for focus control",
            Severity.HIGH,
        )

    return None


def check_focus_indicator_removed(line: str, line_number: int) -> Optional[Issue]:
    """Check for :focus rules that set outline to none or 0 (WCAG 2.4.7)."""
    text = line.strip()

    if ":focus" in text and _OUTLINE_REMOVED.search(text):
        return create_issue(
            line,
            line_number,
            "Focus outline removed - ensure alternative focus indicator is provided",
            Severity.HIGH,
        )

    return None


def check_dynamic_content(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if contains_any(text, DOM_MUTATIONS):
        return create_issue(
            line,
            line_number,
            "Dynamic content manipulation detected - ensure focus management when content changes",
            Severity.MEDIUM,
        )

    return None


def check_widget_focus(line: str, line_number: int) -> Optional[Issue]:
    """Check for composite widgets with neither aria-activedescendant nor tabindex."""
    text = line.strip()

    if (
        get_attribute(text, "role") in FOCUS_WIDGET_ROLES
        and "aria-activedescendant" not in text
        and "tabindex=" not in text
    ):
        return create_issue(
            line,
            line_number,
            "ARIA component missing focus management - add aria-activedescendant or proper tabindex",
            Severity.HIGH,
        )

    return None


def check_form_validation_focus(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        has_element(text, "input", "select", "textarea")
        and contains_any(text, ("error", "invalid", "required"))
        and not contains_any(text, ("aria-invalid", "aria-describedby"))
    ):
        return create_issue(
            line,
            line_number,
            "Form validation missing focus management - add aria-invalid and aria-describedby for error states",
            Severity.MEDIUM,
        )

    return None


def check_route_change_focus(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if contains_any(text, ROUTE_CHANGES):
        return create_issue(
            line,
            line_number,
            "SPA navigation detected - ensure focus management when route changes",
            Severity.MEDIUM,
        )

    return None


def check_collapsible_focus(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if contains_any(text, COLLAPSIBLE_MARKERS) and not _has_key_handler(text):
        return create_issue(
            line,
            line_number,
            "Collapsible content missing keyboard focus management - add keyboard handlers",
            Severity.MEDIUM,
        )

    return None


def check_interactive_table_focus(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        has_element(text, "table")
        and contains_any(text, TABLE_FEATURES)
        and "role=" not in text
        and "tabindex=" not in text
    ):
        return create_issue(
            line,
            line_number,
            "Interactive table missing focus management - add proper ARIA roles and tabindex",
            Severity.MEDIUM,
        )

    return None


FOCUS_CHECKS = (
    check_focus_order,
    check_focus_trap,
    check_focus_indicator_removed,
    check_dynamic_content,
    check_widget_focus,
    check_form_validation_focus,
    check_route_change_focus,
    check_collapsible_focus,
    check_interactive_table_focus,
)
