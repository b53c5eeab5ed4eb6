# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tab order accessibility checks.

This module provides checks for tabindex usage (WCAG 2.1.1, 2.4.3). Checks are
declared in priority order: mandatory (HIGH) first, then MEDIUM, then LOW.
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    get_attribute,
    has_element,
    is_decorative,
    tag_markup,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

# Elements that are naturally focusable
NATURALLY_FOCUSABLE = (
    "button", "input", "select", "textarea", "a", "area", "summary", "details",
)

# Elements that should not be focusable
NON_FOCUSABLE = (
    "div", "span", "p", "h1", "h2", "h3", "h4", "h5", "h6", "img", "br", "hr",
)

# Content elements that are rarely meant to take focus
CONTENT_ELEMENTS = ("p", "h1", "h2", "h3", "h4", "h5", "h6", "img")

# Roles that make a generic element behave like a control
INTERACTIVE_ROLES = ("button", "link", "menuitem", "tab", "option", "checkbox")

CUSTOM_FORM_CONTROL_ROLES = ("combobox", "slider", "spinbutton")

_NEGATIVE_PATTERN = re.compile(r"tabindex=[\"'](-[0-9]+)[\"']")
_POSITIVE_PATTERN = re.compile(r"tabindex=[\"']([1-9][0-9]*)[\"']")
_HIDDEN_TOKEN = re.compile(r"(?<![-\w])hidden(?![-\w])")
_HIDDEN_STYLE = re.compile(r"display:\s*none|visibility:\s*hidden")


def _tabindex(text: str) -> Optional[str]:
    return get_attribute(text, "tabindex")


def _is_hidden(text: str) -> bool:
    """Return True for the hidden attribute or an inline style that hides the element."""
    return bool(_HIDDEN_TOKEN.search(tag_markup(text)) or _HIDDEN_STYLE.search(text))


def _is_disabled(text: str) -> bool:
    return "disabled" in tag_markup(text) and 'aria-disabled="false"' not in text


def check_negative_tabindex(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for negative tabindex values.

    A negative value is legitimate for programmatic focus, so this is a prompt
    to confirm intent rather than a definite defect.
    """
    match = _NEGATIVE_PATTERN.search(line.strip())

    if match:
        return create_issue(
            line,
            line_number,
            f'Negative tabindex="{match.group(1)}" removes element from tab order - ensure this is intentional',
            Severity.HIGH,
        )

    return None


def check_tabindex_zero_on_non_interactive(
    line: str, line_number: int
) -> Optional[Issue]:
    """
    Check for tabindex="0" on a structurally non-interactive element with no role.

    Hidden, aria-hidden, disabled and decorative elements are left to the
    checks that target those states.
    """
    text = line.strip()

    if _tabindex(text) != "0" or "role=" in text:
        return None
    if not has_element(text, *NON_FOCUSABLE):
        return None
    if (
        'aria-hidden="true"' in text
        or _is_hidden(text)
        or _is_disabled(text)
        or is_decorative(text)
    ):
        return None

    return create_issue(
        line,
        line_number,
        'Non-interactive element with tabindex="0" - add role attribute or use semantic element',
        Severity.HIGH,
    )


def check_custom_interactive_tabindex(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for elements with an interactive role that are not in the natural tab order.

    Missing tabindex and positive tabindex both leave the control unreachable
    in document order.
    """
    text = line.strip()

    if get_attribute(text, "role") not in INTERACTIVE_ROLES:
        return None

    if "tabindex=" not in text:
        return create_issue(
            line,
            line_number,
            'Custom interactive element missing tabindex - add tabindex="0" for keyboard accessibility',
            Severity.HIGH,
        )

    if _POSITIVE_PATTERN.search(text):
        return create_issue(
            line,
            line_number,
            'Custom interactive element has positive tabindex - use tabindex="0" to follow document order',
            Severity.HIGH,
        )

    return None


def check_tabindex_on_presentation_role(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if 'role="presentation"' in text and "tabindex=" in text:
        return create_issue(
            line,
            line_number,
            'Element with role="presentation" should not be focusable - remove tabindex',
            Severity.HIGH,
        )

    return None


def check_tabindex_on_none_role(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if 'role="none"' in text and "tabindex=" in text:
        return create_issue(
            line,
            line_number,
            'Element with role="none" should not be focusable - remove tabindex',
            Severity.HIGH,
        )

    return None


def check_tabindex_on_aria_hidden(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if 'aria-hidden="true"' in text and "tabindex=" in text:
        return create_issue(
            line,
            line_number,
            'Element with aria-hidden="true" should not be focusable - remove tabindex',
            Severity.HIGH,
        )

    return None


def check_redundant_tabindex(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for tabindex="0" on elements that are focusable already.

    Other values change the tab order and are reported by the value checks.
    """
    text = line.strip()

    if (
        has_element(text, *NATURALLY_FOCUSABLE)
        and _tabindex(text) == "0"
        and not _is_disabled(text)
        and not _is_hidden(text)
    ):
        return create_issue(
            line,
            line_number,
            "Redundant tabindex on naturally focusable element - remove unless changing tab order",
            Severity.MEDIUM,
        )

    return None


def check_positive_tabindex(line: str, line_number: int) -> Optional[Issue]:
    match = _POSITIVE_PATTERN.search(line.strip())

    if match:
        return create_issue(
            line,
            line_number,
            f'Positive tabindex="{match.group(1)}" disrupts natural tab order - use tabindex="0" or negative values only',
            Severity.MEDIUM,
        )

    return None


def check_clickable_missing_tabindex(line: str, line_number: int) -> Optional[Issue]:
    """Check for clickable div/span elements with neither tabindex nor role."""
    text = line.strip()

    if (
        contains_any(text, ("onclick", "onkeydown"))
        and "tabindex=" not in text
        and "role=" not in text
        and has_element(text, "div", "span")
    ):
        return create_issue(
            line,
            line_number,
            'Clickable element missing tabindex - add tabindex="0" for keyboard accessibility',
            Severity.MEDIUM,
        )

    return None


def check_disabled_with_tabindex(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (_is_disabled(text) or 'aria-disabled="true"' in text) and "tabindex=" in text:
        return create_issue(
            line,
            line_number,
            'Disabled element should not be focusable - remove tabindex or use tabindex="-1"',
            Severity.MEDIUM,
        )

    return None


def check_hidden_with_tabindex(line: str, line_number: int) -> Optional[Issue]:
    """Check for tabindex on elements hidden by attribute or inline style."""
    text = line.strip()

    if _is_hidden(text) and "tabindex=" in text:
        return create_issue(
            line,
            line_number,
            'Hidden element should not be focusable - remove tabindex or use tabindex="-1"',
            Severity.MEDIUM,
        )

    return None


def check_modal_trigger_tabindex(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    is_modal_trigger = contains_any(
        text, ('data-toggle="modal"', 'data-bs-toggle="modal"')
    ) or ("onclick" in text and "modal" in text)

    if (
        is_modal_trigger
        and "tabindex=" not in text
        and has_element(text, "div", "span")
    ):
        return create_issue(
            line,
            line_number,
            'Modal trigger element missing tabindex - add tabindex="0" for keyboard accessibility',
            Severity.MEDIUM,
        )

    return None


def check_custom_form_control_tabindex(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if get_attribute(text, "role") in CUSTOM_FORM_CONTROL_ROLES and "tabindex=" not in text:
        return create_issue(
            line,
            line_number,
            'Custom form control missing tabindex - add tabindex="0" for keyboard accessibility',
            Severity.MEDIUM,
        )

    return None


def check_decorative_with_tabindex(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if is_decorative(text) and "tabindex=" in text:
        return create_issue(
            line,
            line_number,
            'Decorative element should not be focusable - remove tabindex or use tabindex="-1"',
            Severity.LOW,
        )

    return None


def check_low_positive_tabindex(line: str, line_number: int) -> Optional[Issue]:
    value = _tabindex(line.strip())

    if value in ("1", "2", "3"):
        return create_issue(
            line,
            line_number,
            f'Low positive tabindex="{value}" may cause confusion - consider using tabindex="0" or negative values',
            Severity.LOW,
        )

    return None


def check_tabindex_on_content_element(line: str, line_number: int) -> Optional[Issue]:
    """Check for tabindex on paragraphs, headings and images without a role."""
    text = line.strip()

    if (
        has_element(text, *CONTENT_ELEMENTS)
        and "tabindex=" in text
        and "role=" not in text
        and not is_decorative(text)
    ):
        return create_issue(
            line,
            line_number,
            "Non-interactive element with tabindex - consider if this element should be focusable",
            Severity.LOW,
        )

    return None


TAB_INDEX_CHECKS = (
    # HIGH
    check_negative_tabindex,
    check_tabindex_zero_on_non_interactive,
    check_custom_interactive_tabindex,
    check_tabindex_on_presentation_role,
    check_tabindex_on_none_role,
    check_tabindex_on_aria_hidden,
    # MEDIUM
    check_redundant_tabindex,
    check_positive_tabindex,
    check_clickable_missing_tabindex,
    check_disabled_with_tabindex,
    check_hidden_with_tabindex,
    check_modal_trigger_tabindex,
    check_custom_form_control_tabindex,
    # LOW
    check_decorative_with_tabindex,
    check_low_positive_tabindex,
    check_tabindex_on_content_element,
)
