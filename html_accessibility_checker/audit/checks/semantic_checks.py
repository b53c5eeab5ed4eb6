# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Semantic HTML structure checks.

This module provides checks for headings, lists, tables, forms, buttons,
links, landmarks and document metadata (WCAG 1.3.1, 2.4.2, 2.4.4, 3.1.1).

Each check reports at most one issue per line: the first matching condition
wins.
"""

import re
from typing import Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    document_check,
    get_element_text,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")

GENERIC_LINK_TEXT = (">click here<", ">read more<", ">here<", ">more<")

_H1_TAG = re.compile(r"<h1(?=[\s>/])[^>]*>")
_HEADING_TAG = re.compile(r"<h([1-6])(?=[\s>/])[^>]*>")


@document_check
def check_heading_hierarchy(
    line: str, line_number: int, full_text: str
) -> Optional[Issue]:
    """
    Check heading structure.

    Issues:
        - More than one h1 in the document (HIGH), reported on h1 lines
        - Any heading below h1 (MEDIUM). Levels are not tracked across lines,
          so every h2-h6 is flagged for manual review of the hierarchy.
    """
    text = line.strip()

    if has_element(text, "h1") and len(_H1_TAG.findall(full_text)) > 1:
        return create_issue(
            line,
            line_number,
            "Multiple h1 tags found - page should have only one h1 for proper document structure",
            Severity.HIGH,
        )

    match = _HEADING_TAG.search(text)
    if match and int(match.group(1)) > 1:
        level = match.group(1)
        return create_issue(
            line,
            line_number,
            f"Heading h{level} detected - ensure proper heading hierarchy (h1 → h2 → h3, etc.)",
            Severity.MEDIUM,
        )

    return None


def check_html_lang_attribute(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if has_element(text, "html") and "lang=" not in text:
        return create_issue(
            line,
            line_number,
            "Missing lang attribute on html tag - required for screen readers and language detection",
            Severity.HIGH,
        )

    return None


def check_list_structure(line: str, line_number: int) -> Optional[Issue]:
    """
    Check list structure.

    Issues:
        - li without a ul/ol on the same line (HIGH)
        - ul and ol mixed on one line (MEDIUM)
    """
    text = line.strip()

    if has_element(text, "li") and not has_element(text, "ul", "ol"):
        return create_issue(
            line,
            line_number,
            "List item (li) found without proper list container (ul/ol)",
            Severity.HIGH,
        )

    if has_element(text, "ul") and has_element(text, "ol"):
        return create_issue(
            line,
            line_number,
            "Mixed list types (ul and ol) in same line - ensure proper nesting",
            Severity.MEDIUM,
        )

    return None


def check_table_structure(line: str, line_number: int) -> Optional[Issue]:
    """
    Check table structure.

    Issues:
        - td/th without table or tr on the same line (HIGH)
        - table without caption or summary (MEDIUM)
    """
    text = line.strip()
    in_table = has_element(text, "table", "tr")

    if has_element(text, "td") and not in_table:
        return create_issue(
            line,
            line_number,
            "Table cell (td) found without proper table structure (table > tr > td)",
            Severity.HIGH,
        )

    if has_element(text, "th") and not in_table:
        return create_issue(
            line,
            line_number,
            "Table header (th) found without proper table structure (table > tr > th)",
            Severity.HIGH,
        )

    if has_element(text, "table") and not contains_any(text, ("caption", "summary")):
        return create_issue(
            line,
            line_number,
            "Table missing caption or summary - add caption for table description",
            Severity.MEDIUM,
        )

    return None


def check_form_structure(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        has_element(text, "input", "select", "textarea")
        and "aria-label" not in text
        and not has_element(text, "label")
    ):
        return create_issue(
            line,
            line_number,
            "Form control missing label - add label, aria-label, or aria-labelledby",
            Severity.HIGH,
        )

    if has_element(text, "fieldset") and not has_element(text, "legend"):
        return create_issue(
            line,
            line_number,
            "Fieldset missing legend - add legend to describe fieldset purpose",
            Severity.HIGH,
        )

    return None


def check_button_usage(line: str, line_number: int) -> Optional[Issue]:
    """
    Check button semantics.

    Issues:
        - div/span with onclick instead of a button (HIGH)
        - button without text content or aria-label (HIGH)
    """
    text = line.strip()

    if (
        has_element(text, "div", "span")
        and "onclick" in text
        and 'role="button"' not in text
    ):
        return create_issue(
            line,
            line_number,
            "Use semantic button element instead of div/span with onclick for better accessibility",
            Severity.HIGH,
        )

    if (
        has_element(text, "button")
        and "aria-label" not in text
        and not get_element_text(text, "button", greedy=True)
    ):
        return create_issue(
            line,
            line_number,
            "Button missing accessible text - add text content or aria-label",
            Severity.HIGH,
        )

    return None


def check_link_usage(line: str, line_number: int) -> Optional[Issue]:
    """
    Check link text.

    Issues:
        - link without text content or aria-label (HIGH)
        - generic link text such as "click here" (MEDIUM)
    """
    text = line.strip()

    if not has_element(text, "a"):
        return None

    if "aria-label" not in text and not get_element_text(text, "a", greedy=True):
        return create_issue(
            line,
            line_number,
            "Link missing accessible text - add text content or aria-label",
            Severity.HIGH,
        )

    if contains_any(text, GENERIC_LINK_TEXT):
        return create_issue(
            line,
            line_number,
            'Link text is not descriptive - use meaningful link text instead of "click here" or "read more"',
            Severity.MEDIUM,
        )

    return None


def check_landmark_usage(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()
    has_main = has_element(text, "main") or 'role="main"' in text

    if has_element(text, "body") and not has_main:
        return create_issue(
            line,
            line_number,
            'Page missing main landmark - add <main> or role="main" for primary content',
            Severity.MEDIUM,
        )

    if has_main:
        return create_issue(
            line,
            line_number,
            "Main landmark detected - ensure only one main landmark per page",
            Severity.MEDIUM,
        )

    return None


def check_sectioning_elements(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if has_element(text, "section", "article") and not has_element(text, *HEADINGS):
        return create_issue(
            line,
            line_number,
            "Section/article should have a heading to describe its purpose",
            Severity.MEDIUM,
        )

    return None


def check_navigation_structure(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if has_element(text, "nav") and not has_element(text, "ul", "ol"):
        return create_issue(
            line,
            line_number,
            "Navigation should use list structure (ul/ol) for better screen reader support",
            Severity.MEDIUM,
        )

    return None


@document_check
def check_document_structure(
    line: str, line_number: int, full_text: str
) -> Optional[Issue]:
    """
    Check document metadata, reported on the head line.

    Issues:
        - no title element anywhere in the document (HIGH)
        - no viewport meta tag anywhere in the document (MEDIUM)
    """
    text = line.strip()

    if not has_element(text, "head"):
        return None

    if not has_element(full_text, "title"):
        return create_issue(
            line,
            line_number,
            "Document missing title element - add <title> for page identification",
            Severity.HIGH,
        )

    if "viewport" not in full_text:
        return create_issue(
            line,
            line_number,
            "Missing viewport meta tag - add for responsive design and mobile accessibility",
            Severity.MEDIUM,
        )

    return None


SEMANTIC_CHECKS = (
    check_heading_hierarchy,
    check_html_lang_attribute,
    check_list_structure,
    check_table_structure,
    check_form_structure,
    check_button_usage,
    check_link_usage,
    check_landmark_usage,
    check_sectioning_elements,
    check_navigation_structure,
    check_document_structure,
)
