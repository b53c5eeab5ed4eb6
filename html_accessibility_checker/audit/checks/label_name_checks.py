# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Label and accessible name consistency checks (WCAG 2.5.3 Label in Name, 4.1.2).
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    get_attribute,
    get_element_text,
    has_blank_attribute,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

INTERACTIVE_ROLES = ("button", "link", "menuitem", "tab", "option", "checkbox")

_TEXT_BETWEEN_TAGS = re.compile(r">([^<]+)<")


def _visible_text(text: str) -> str:
    """Return the visible text of a button or link closed on the line."""
    if has_element(text, "button"):
        return get_element_text(text, "button") or ""
    if has_element(text, "a"):
        return get_element_text(text, "a") or ""
    return ""


def check_label_in_name(line: str, line_number: int) -> Optional[Issue]:
    """
    Check that aria-label and visible text agree.

    Either must contain the other, ignoring case, so speech users can activate
    the control by what they see.
    """
    text = line.strip()

    if not has_element(text, "button", "a", "input"):
        return None

    label = get_attribute(text, "aria-label")
    visible = _visible_text(text)
    if not label or not visible:
        return None

    label = label.strip().lower()
    visible = visible.lower()
    if label not in visible and visible not in label:
        return create_issue(
            line,
            line_number,
            "Label-name inconsistency - aria-label should contain the visible text or be consistent with it",
            Severity.HIGH,
        )

    return None


def check_missing_name(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        has_element(text, "button", "a", "input")
        and not contains_any(text, ("aria-label", "title="))
        and not _visible_text(text)
    ):
        return create_issue(
            line,
            line_number,
            "Interactive element missing accessible name - add aria-label, aria-labelledby, or visible text",
            Severity.HIGH,
        )

    return None


def check_redundant_name(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if not has_element(text, "button", "a"):
        return None

    label = get_attribute(text, "aria-label")
    visible = _visible_text(text)
    if label and visible and label.strip().lower() == visible.lower():
        return create_issue(
            line,
            line_number,
            "Redundant accessible name - aria-label is identical to visible text",
            Severity.MEDIUM,
        )

    return None


def check_conflicting_names(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if "aria-label=" in text and "aria-labelledby=" in text:
        return create_issue(
            line,
            line_number,
            "Conflicting accessible names - element has both aria-label and aria-labelledby",
            Severity.HIGH,
        )

    return None


def check_empty_name(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if has_blank_attribute(text, "aria-label"):
        return create_issue(
            line,
            line_number,
            "Empty accessible name - aria-label is empty or contains only whitespace",
            Severity.HIGH,
        )

    return None


def check_name_on_non_interactive(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        "aria-label=" in text
        and has_element(text, "div", "span", "p")
        and "role=" not in text
        and "tabindex=" not in text
    ):
        return create_issue(
            line,
            line_number,
            "Non-interactive element with aria-label - add role attribute or use semantic element",
            Severity.MEDIUM,
        )

    return None


def check_form_element_name(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for form controls without any naming hook.

    Only a control that carries both an id and a for attribute on the line is
    treated as associated with a label.
    """
    text = line.strip()

    if not has_element(text, "input", "select", "textarea"):
        return None
    if contains_any(text, ("aria-label", "title=", "placeholder=")):
        return None

    if "id=" not in text or "for=" not in text:
        return create_issue(
            line,
            line_number,
            "Form element missing accessible name - add label, aria-label, or aria-labelledby",
            Severity.HIGH,
        )

    return None


def check_custom_control_name(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if get_attribute(text, "role") not in INTERACTIVE_ROLES or "aria-label" in text:
        return None

    match = _TEXT_BETWEEN_TAGS.search(text)
    if not match or not match.group(1).strip():
        return create_issue(
            line,
            line_number,
            "Custom control missing accessible name - add aria-label, aria-labelledby, or visible text",
            Severity.HIGH,
        )

    return None


def check_image_name(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if has_element(text, "img") and not contains_any(
        text, ("alt=", "aria-label=", "aria-labelledby=")
    ):
        return create_issue(
            line,
            line_number,
            "Image missing accessible name - add alt, aria-label, or aria-labelledby",
            Severity.HIGH,
        )

    return None


LABEL_NAME_CHECKS = (
    check_label_in_name,
    check_missing_name,
    check_redundant_name,
    check_conflicting_names,
    check_empty_name,
    check_name_on_non_interactive,
    check_form_element_name,
    check_custom_control_name,
    check_image_name,
)
