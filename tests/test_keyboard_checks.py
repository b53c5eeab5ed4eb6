# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the keyboard navigation check family.
"""

from html_accessibility_checker.audit.checks import keyboard_checks as kc
from html_accessibility_checker.utils.report_models import Severity


def test_clickable_span_without_keyboard_support():
    issue = kc.check_clickable_keyboard_support('<span onclick="open()">Open</span>', 0)

    assert issue.severity == Severity.HIGH


def test_clickable_with_key_handler_and_tabindex():
    line = '<div onclick="open()" onkeydown="open()" tabindex="0">Open</div>'

    assert kc.check_clickable_keyboard_support(line, 0) is None
    assert kc.check_missing_key_handlers(line, 0) is None


def test_focusable_dialog_needs_escape_handling():
    issue = kc.check_keyboard_trap('<div role="dialog" tabindex="0">', 0)

    assert issue.severity == Severity.HIGH
    assert kc.check_keyboard_trap('<div role="dialog" tabindex="-1">', 0) is None


def test_positive_tabindex_breaks_navigation_order():
    issue = kc.check_navigation_order('<a href="/" tabindex="3">Home</a>', 0)

    assert 'tabindex="3"' in issue.issue_text


def test_skip_links_checked_on_body_line():
    full_text = "<body>\n<main>Content</main>\n</body>"
    issue = kc.check_skip_links("<body>", 0, full_text)

    assert issue.severity == Severity.MEDIUM
    with_skip = '<body>\n<a href="#main" class="skip-link">Skip to content</a>'
    assert kc.check_skip_links("<body>", 0, with_skip) is None


def test_any_keydown_handler_is_a_possible_shortcut():
    issue = kc.check_keyboard_shortcuts('<div onkeydown="handleKey(event)">', 0)

    assert issue.severity == Severity.MEDIUM


def test_composite_role_without_keyboard_support():
    assert kc.check_composite_role_keyboard('<ul role="menu">', 0).severity == Severity.HIGH
    assert kc.check_composite_role_keyboard('<ul role="menu" tabindex="0">', 0) is None


def test_form_keyboard_access():
    assert kc.check_form_keyboard_access('<select name="size">', 0) is not None
    assert kc.check_form_keyboard_access('<input type="text" disabled>', 0) is None


def test_family_on_clickable_div(run_checks):
    issues = run_checks(kc.KEYBOARD_CHECKS, '<div onclick="go()">Go</div>')

    assert [i.severity for i in issues] == [Severity.HIGH, Severity.HIGH]
