# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
ARIA label and role accessibility checks.

This module provides checks for accessible names, aria-label quality, role
validity and ARIA state attributes (WCAG 1.3.1, 4.1.2).
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    document_check,
    get_attribute,
    get_element_text,
    has_blank_attribute,
    has_element,
    is_decorative,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

# Valid ARIA roles (WAI-ARIA 1.2)
VALID_ROLES = frozenset(
    [
        "alert", "alertdialog", "application", "article", "banner", "button",
        "cell", "checkbox", "columnheader", "combobox", "complementary",
        "contentinfo", "definition", "dialog", "directory", "document", "feed",
        "figure", "form", "grid", "gridcell", "group", "heading", "img", "link",
        "list", "listbox", "listitem", "log", "main", "marquee", "math", "menu",
        "menubar", "menuitem", "menuitemcheckbox", "menuitemradio",
        "navigation", "none", "note", "option", "presentation", "progressbar",
        "radio", "radiogroup", "region", "row", "rowgroup", "rowheader",
        "scrollbar", "search", "separator", "slider", "spinbutton", "status",
        "switch", "tab", "table", "tablist", "tabpanel", "textbox", "timer",
        "toolbar", "tooltip", "tree", "treegrid", "treeitem",
    ]
)

# Interactive elements that need an accessible name
INTERACTIVE_ELEMENTS = ("button", "input", "select", "textarea", "a", "area", "summary")

# Elements whose implicit role makes an explicit one redundant
IMPLICIT_ROLES = {
    "button": "button",
    "nav": "navigation",
    "main": "main",
    "header": "banner",
    "footer": "contentinfo",
    "section": "region",
    "article": "article",
    "aside": "complementary",
}

# aria-label values that say nothing about the element's purpose
GENERIC_LABELS = frozenset(
    [
        "button", "link", "image", "img", "icon", "graphic", "click",
        "click here", "here", "more", "read more", "label", "element",
        "input", "field",
    ]
)

MAX_ARIA_LABEL_LENGTH = 100

FORM_CONTROLS = ("input", "select", "textarea")


def check_missing_accessible_name(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for interactive elements without an accessible name.

    An accessible name may come from aria-label, aria-labelledby, title, alt,
    or visible text inside a button or link closed on the same line.
    """
    text = line.strip()

    if not has_element(text, *INTERACTIVE_ELEMENTS):
        return None

    if contains_any(text, ("aria-label", "title=", "alt=")):
        return None

    for element in ("button", "a"):
        if has_element(text, element) and get_element_text(text, element):
            return None

    return create_issue(
        line,
        line_number,
        "Interactive element missing accessible name (aria-label, aria-labelledby, or visible text)",
        Severity.HIGH,
    )


def check_empty_aria_label(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if has_blank_attribute(text, "aria-label"):
        return create_issue(
            line,
            line_number,
            "aria-label attribute has empty or whitespace-only value",
            Severity.HIGH,
        )

    return None


def check_generic_aria_label(line: str, line_number: int) -> Optional[Issue]:
    """Check for aria-label values such as "button" or "click here"."""
    label = get_attribute(line.strip(), "aria-label")

    if label and label.strip().lower() in GENERIC_LABELS:
        return create_issue(
            line,
            line_number,
            "aria-label contains generic text - use more descriptive labels",
            Severity.MEDIUM,
        )

    return None


def check_aria_label_with_placeholder(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if "aria-label=" in text and "placeholder=" in text:
        return create_issue(
            line,
            line_number,
            "Avoid using both aria-label and placeholder - choose one for better UX",
            Severity.MEDIUM,
        )

    return None


def check_aria_label_on_presentation(line: str, line_number: int) -> Optional[Issue]:
    """Check for aria-label on elements removed from the accessibility tree by role."""
    text = line.strip()
    role = get_attribute(text, "role")

    if "aria-label=" in text and role in ("presentation", "none"):
        return create_issue(
            line,
            line_number,
            'aria-label on decorative element - consider using aria-hidden="true" instead',
            Severity.MEDIUM,
        )

    return None


def check_long_aria_label(line: str, line_number: int) -> Optional[Issue]:
    label = get_attribute(line.strip(), "aria-label")

    if label and len(label) > MAX_ARIA_LABEL_LENGTH:
        return create_issue(
            line,
            line_number,
            "aria-label is very long - consider shortening for better user experience",
            Severity.LOW,
        )

    return None


def check_invalid_role(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for role values that are not WAI-ARIA roles.

    A role attribute may list fallback roles; the first unknown token is reported.
    """
    value = get_attribute(line.strip(), "role")
    if not value:
        return None

    for role in value.lower().split():
        if role not in VALID_ROLES:
            return create_issue(
                line,
                line_number,
                f'Invalid ARIA role "{role}" - not a valid ARIA role',
                Severity.HIGH,
            )

    return None


def check_redundant_role(line: str, line_number: int) -> Optional[Issue]:
    """Check for explicit roles that repeat an element's implicit role."""
    text = line.strip()
    value = get_attribute(text, "role")
    if not value:
        return None

    role = value.lower()
    for element, implicit_role in IMPLICIT_ROLES.items():
        if role == implicit_role and has_element(text, element):
            return create_issue(
                line,
                line_number,
                f'Redundant role="{role}" on semantic element - element already has implicit role',
                Severity.LOW,
            )

    return None


def _missing_reference(full_text: str, value: str) -> Optional[str]:
    for ref_id in value.split():
        if f'id="{ref_id}"' not in full_text and f"id='{ref_id}'" not in full_text:
            return ref_id
    return None


@document_check
def check_aria_labelledby_reference(
    line: str, line_number: int, full_text: str
) -> Optional[Issue]:
    """Check that every id listed in aria-labelledby exists in the document."""
    value = get_attribute(line.strip(), "aria-labelledby")
    if not value:
        return None

    missing = _missing_reference(full_text, value)
    if missing:
        return create_issue(
            line,
            line_number,
            f'aria-labelledby references non-existent element with id="{missing}"',
            Severity.HIGH,
        )

    return None


@document_check
def check_aria_describedby_reference(
    line: str, line_number: int, full_text: str
) -> Optional[Issue]:
    """Check that every id listed in aria-describedby exists in the document."""
    value = get_attribute(line.strip(), "aria-describedby")
    if not value:
        return None

    missing = _missing_reference(full_text, value)
    if missing:
        return create_issue(
            line,
            line_number,
            f'aria-describedby references non-existent element with id="{missing}"',
            Severity.HIGH,
        )

    return None


def check_missing_aria_expanded(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        contains_any(text, ('role="button"', 'role="menuitem"'))
        and "onclick" in text
        and "aria-expanded" not in text
    ):
        return create_issue(
            line,
            line_number,
            "Collapsible element missing aria-expanded attribute",
            Severity.MEDIUM,
        )

    return None


def check_invalid_aria_expanded(line: str, line_number: int) -> Optional[Issue]:
    value = get_attribute(line.strip(), "aria-expanded")
    if value is None:
        return None

    value = value.lower()
    if value not in ("true", "false"):
        return create_issue(
            line,
            line_number,
            f'Invalid aria-expanded value "{value}" - must be "true" or "false"',
            Severity.HIGH,
        )

    return None


def check_decorative_image_hidden(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        has_element(text, "img")
        and is_decorative(text)
        and 'aria-hidden="true"' not in text
    ):
        return create_issue(
            line,
            line_number,
            'Decorative image should have aria-hidden="true"',
            Severity.MEDIUM,
        )

    return None


def check_aria_hidden_with_role(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if 'aria-hidden="true"' in text and "role=" in text:
        return create_issue(
            line,
            line_number,
            'Element with aria-hidden="true" should not have a role attribute',
            Severity.HIGH,
        )

    return None


def check_missing_aria_disabled(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        contains_any(text, ("disabled", "readonly"))
        and "aria-disabled" not in text
        and has_element(text, "input", "button", "select")
    ):
        return create_issue(
            line,
            line_number,
            'Disabled element should have aria-disabled="true" for screen readers',
            Severity.MEDIUM,
        )

    return None


def check_missing_aria_required(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        re.search(r"(?<![-\w])required(?![-\w])", text)
        and "aria-required" not in text
        and has_element(text, *FORM_CONTROLS)
    ):
        return create_issue(
            line,
            line_number,
            'Required form element should have aria-required="true"',
            Severity.MEDIUM,
        )

    return None


def check_missing_aria_invalid(line: str, line_number: int) -> Optional[Issue]:
    """Check for form controls in an error state that do not expose aria-invalid."""
    text = line.strip()

    if (
        contains_any(text, ("error", "invalid"))
        and "aria-invalid" not in text
        and has_element(text, *FORM_CONTROLS)
    ):
        return create_issue(
            line,
            line_number,
            'Form element with validation error should have aria-invalid="true"',
            Severity.MEDIUM,
        )

    return None


ARIA_CHECKS = (
    check_missing_accessible_name,
    check_empty_aria_label,
    check_generic_aria_label,
    check_aria_label_with_placeholder,
    check_aria_label_on_presentation,
    check_long_aria_label,
    check_invalid_role,
    check_redundant_role,
    check_aria_labelledby_reference,
    check_aria_describedby_reference,
    check_missing_aria_expanded,
    check_invalid_aria_expanded,
    check_decorative_image_hidden,
    check_aria_hidden_with_role,
    check_missing_aria_disabled,
    check_missing_aria_required,
    check_missing_aria_invalid,
)
