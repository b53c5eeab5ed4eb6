# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Form-related accessibility checks.

This module provides checks for form control labelling (WCAG 1.3.1, 3.3.2).
"""

from typing import Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

FORM_CONTROLS = ("input", "textarea", "select")


def check_form_input_labels(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for form controls with no labelling hook on the line.

    An ``id`` is accepted as a hook for a ``<label for>`` elsewhere, and a
    placeholder as a visible hint.
    """
    text = line.strip()

    if has_element(text, *FORM_CONTROLS) and not contains_any(
        text, ("aria-label", "aria-labelledby", "id=", "placeholder=")
    ):
        return create_issue(
            line,
            line_number,
            "Form input missing label, aria-label, or aria-labelledby",
            Severity.HIGH,
        )

    return None


def check_label_for_attribute(line: str, line_number: int) -> Optional[Issue]:
    """Check for label elements that are not bound to a control."""
    text = line.strip()

    if has_element(text, "label") and "for=" not in text:
        return create_issue(
            line, line_number, "Label element missing for attribute", Severity.MEDIUM
        )

    return None


FORM_CHECKS = (
    check_form_input_labels,
    check_label_for_attribute,
)
