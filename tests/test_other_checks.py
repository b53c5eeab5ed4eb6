# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the miscellaneous check family.
"""

from html_accessibility_checker.audit.checks import other_checks as oc
from html_accessibility_checker.utils.report_models import Severity


def test_multiple_h1_reported_on_each_h1():
    full_text = "<h1>One</h1>\n<p>text</p>\n<h1>Two</h1>"

    assert oc.check_multiple_h1("<h1>One</h1>", 0, full_text).severity == Severity.MEDIUM
    assert oc.check_multiple_h1("<h1>Two</h1>", 2, full_text) is not None
    assert oc.check_multiple_h1("<p>text</p>", 1, full_text) is None


def test_single_h1():
    assert oc.check_multiple_h1("<h1>Only</h1>", 0, "<h1>Only</h1>\n<h2>Sub</h2>") is None


def test_html_lang():
    assert oc.check_html_lang_attribute("<html>", 0).severity == Severity.HIGH
    assert oc.check_html_lang_attribute('<html lang="fr">', 0) is None


def test_clickable_container():
    assert oc.check_clickable_container('<div onclick="go()">Go</div>', 0).severity == Severity.HIGH
    assert oc.check_clickable_container('<div onclick="go()" tabindex="0" role="button">', 0) is None


def test_color_styling_is_low():
    assert oc.check_color_only_information('<p style="color: #c00">x</p>', 0).severity == Severity.LOW


def test_focus_outline_removed():
    assert oc.check_focus_indicator("a:focus { outline: none; }", 0).severity == Severity.HIGH
    assert oc.check_focus_indicator("a { outline: none; }", 0) is None


def test_family_on_plain_paragraph(run_checks):
    assert run_checks(oc.OTHER_CHECKS, "<p>Hello</p>") == []
