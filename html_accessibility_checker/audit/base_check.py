# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Base helpers for accessibility checks.

Every check is a plain function taking the raw line and its zero-based index
(and, when decorated with ``document_check``, the full document text). Checks
match on the stripped line text and never raise; the helpers here keep that
matching consistent across families.
"""

import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Union

from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import (
    Issue,
    LineContext,
    Severity,
    Span,
)

# Set up module-level logger
logger = setup_logger(__name__)

CheckResult = Union[Issue, List[Issue], None]
Check = Callable[..., CheckResult]

_TAG_PATTERN = re.compile(r"<[^>]*>?")


def document_check(check_func: Check) -> Check:
    """
    Mark a check as needing the full document text.

    The family runner passes ``full_text`` as a third argument only to checks
    carrying this mark.
    """
    check_func.needs_document = True
    return check_func


def needs_document(check_func: Check) -> bool:
    """Return True when the check was declared with ``document_check``."""
    return getattr(check_func, "needs_document", False)


def run_check(check_func: Check, context: LineContext) -> List[Issue]:
    """
    Run one check against a line, isolating failures.

    A check that raises is logged and treated as reporting nothing, so one
    broken rule cannot silence the rest of a family.

    Args:
        check_func: The check to run
        context: The line being analysed

    Returns:
        List of issues reported by the check (possibly empty)
    """
    try:
        if needs_document(check_func):
            result = check_func(context.text, context.index, context.full_text)
        else:
            result = check_func(context.text, context.index)
    except Exception as e:
        logger.warning(
            f"Error in {getattr(check_func, '__name__', check_func)} "
            f"on line {context.index + 1}: {str(e)}"
        )
        return []

    if result is None:
        return []
    if isinstance(result, Issue):
        return [result]
    return [issue for issue in result if issue is not None]


def create_issue(
    line: str, line_number: int, issue_text: str, severity: Severity
) -> Issue:
    """
    Create an issue anchored to a whole physical line.

    Args:
        line: The untrimmed line text
        line_number: Zero-based line index
        issue_text: Human-readable message
        severity: Issue severity

    Returns:
        Issue spanning the line
    """
    return Issue(
        line=line_number + 1,
        issue_text=issue_text,
        severity=severity,
        span=Span.for_line(line_number, line),
    )


@lru_cache(maxsize=None)
def _element_pattern(name: str) -> "re.Pattern":
    return re.compile(r"<" + re.escape(name) + r"(?=[\s>/]|$)")


def has_element(text: str, *names: str) -> bool:
    """
    Check whether the text opens any of the given elements.

    The element name must end at a tag boundary, so ``<a`` does not match
    ``<article>`` and ``<head`` does not match ``<header>``.
    """
    return any(_element_pattern(name).search(text) for name in names)


def contains_any(text: str, needles: Iterable[str]) -> bool:
    """Return True if any needle occurs in the text."""
    return any(needle in text for needle in needles)


@lru_cache(maxsize=None)
def _attribute_pattern(attribute: str, allow_empty: bool) -> "re.Pattern":
    value = "[^\"']*" if allow_empty else "[^\"']+"
    return re.compile(r"(?<![\w-])" + re.escape(attribute) + "=[\"'](" + value + ")[\"']")


def get_attribute(
    text: str, attribute: str, allow_empty: bool = False
) -> Optional[str]:
    """
    Get the first quoted value of an attribute on the line.

    The name must start at an attribute boundary, so ``role`` does not match
    ``data-role``.

    Args:
        text: Line text
        attribute: Attribute name, e.g. ``role``
        allow_empty: Whether an empty value counts as a match

    Returns:
        The attribute value, or None if not present
    """
    match = _attribute_pattern(attribute, allow_empty).search(text)
    if match:
        return match.group(1)
    return None


def has_blank_attribute(text: str, attribute: str) -> bool:
    """Return True when the attribute is present with an empty or whitespace-only value."""
    return bool(re.search(r"(?<![\w-])" + re.escape(attribute) + r"=([\"'])\s*\1", text))


def get_element_text(text: str, element: str, greedy: bool = False) -> Optional[str]:
    """
    Get the inner text of an element opened and closed on the same line.

    Args:
        text: Line text
        element: Element name, e.g. ``button``
        greedy: Whether to extend the match to the last closing tag

    Returns:
        The stripped inner content, or None if the element is not closed on the line
    """
    inner = "(.*)" if greedy else "(.*?)"
    match = re.search(
        "<" + re.escape(element) + "[^>]*>" + inner + "</" + re.escape(element) + ">",
        text,
    )
    if match:
        return match.group(1).strip()
    return None


def tag_markup(text: str) -> str:
    """Return only the tag markup of the line, without text content between tags."""
    return " ".join(_TAG_PATTERN.findall(text))


def is_decorative(text: str) -> bool:
    """Return True when the line carries a decorative-content marker."""
    return contains_any(text, ("decorative", "ornament", "spacer", "divider"))
