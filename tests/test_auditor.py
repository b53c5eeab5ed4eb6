# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the auditor: ordering, idempotence and diagnostic replacement.
"""

import pytest

from html_accessibility_checker.audit import auditor as auditor_module
from html_accessibility_checker.audit.auditor import (
    AccessibilityAuditor,
    DiagnosticCollection,
    to_diagnostic,
)
from html_accessibility_checker.audit.base_check import create_issue
from html_accessibility_checker.audit.registry import FAMILY_ORDER, CheckRegistry
from html_accessibility_checker.audit.standards import DIAGNOSTIC_SOURCE
from html_accessibility_checker.utils.report_models import DiagnosticLevel, Severity


class TestOrdering:
    def test_line_then_family_order(self, sample_html):
        pairs = AccessibilityAuditor().check_issues_by_family(sample_html)
        keys = [(issue.line, FAMILY_ORDER.index(family)) for family, issue in pairs]

        assert pairs
        assert keys == sorted(keys)

    def test_check_order_within_family(self):
        registry = CheckRegistry(
            {
                "first": [
                    lambda line, n: create_issue(line, n, "a", Severity.LOW),
                    lambda line, n: create_issue(line, n, "b", Severity.LOW),
                ],
                "second": [lambda line, n: create_issue(line, n, "c", Severity.LOW)],
            }
        )
        issues = AccessibilityAuditor(registry=registry).check_issues("x\ny")

        assert [(i.line, i.issue_text) for i in issues] == [
            (1, "a"), (1, "b"), (1, "c"), (2, "a"), (2, "b"), (2, "c"),
        ]

    def test_family_subset(self, sample_html):
        pairs = AccessibilityAuditor(families=["image"]).check_issues_by_family(sample_html)

        assert {family for family, _ in pairs} == {"image"}
        assert [issue.line for _, issue in pairs] == [6, 7]

    def test_unknown_family(self):
        with pytest.raises(KeyError):
            AccessibilityAuditor(families=["nope"])


class TestPasses:
    def test_idempotent(self, sample_html):
        auditor = AccessibilityAuditor()

        assert auditor.check_issues(sample_html) == auditor.check_issues(sample_html)

    def test_empty_document(self):
        assert AccessibilityAuditor().check_issues("") == ()

    @pytest.mark.parametrize(
        "text",
        [
            '<img src="a',
            "<div aria-label='x\" role=>",
            '<a href="x" tabindex=">',
            "<<<>>>",
            'style="color:',
            "\t\t",
        ],
    )
    def test_malformed_input_never_raises(self, text):
        AccessibilityAuditor().check_issues(text)

    def test_crlf_matches_lf(self):
        lf = '<img src="a.png">\n<p>ok</p>'
        crlf = lf.replace("\n", "\r\n")
        auditor = AccessibilityAuditor(families=["image"])

        issues = auditor.check_issues(crlf)

        assert [i.issue_text for i in issues] == [
            i.issue_text for i in auditor.check_issues(lf)
        ]
        assert issues[0].span.end_column == len('<img src="a.png">')

    def test_failing_family_skipped_for_that_line(self, monkeypatch):
        real_run_family = auditor_module.run_family

        def flaky(checks, context):
            if context.index == 0:
                raise RuntimeError("family failed")
            return real_run_family(checks, context)

        monkeypatch.setattr(auditor_module, "run_family", flaky)
        auditor = AccessibilityAuditor(families=["image"])

        issues = auditor.check_issues('<img src="a.png">\n<img src="b.png">')

        assert [i.line for i in issues] == [2]


class TestDiagnostics:
    def test_to_diagnostic(self):
        issue = create_issue("<html>", 0, "Missing lang", Severity.HIGH)
        diagnostic = to_diagnostic(issue)

        assert diagnostic.range == issue.span
        assert diagnostic.message == "Missing lang"
        assert diagnostic.severity_level == DiagnosticLevel.ERROR
        assert diagnostic.source == DIAGNOSTIC_SOURCE

    def test_update_replaces_previous_entry(self):
        auditor = AccessibilityAuditor(families=["image"])
        collection = DiagnosticCollection()

        auditor.update_diagnostics("file:///a.html", '<img src="a.png">\n<img src="b.png">', collection)
        auditor.update_diagnostics("file:///a.html", '<img src="a.png" alt="A">', collection)

        assert collection.get("file:///a.html") == ()
        assert "file:///a.html" in collection

    def test_update_only_touches_its_uri(self):
        auditor = AccessibilityAuditor(families=["image"])
        collection = DiagnosticCollection()

        auditor.update_diagnostics("a", '<img src="a.png">', collection)
        auditor.update_diagnostics("b", "<p>", collection)

        assert len(collection.get("a")) == 1
        assert collection.uris() == ["a", "b"]

        collection.delete("a")
        assert "a" not in collection
        collection.clear()
        assert len(collection) == 0

    def test_stored_diagnostics_are_immutable(self):
        collection = DiagnosticCollection()
        AccessibilityAuditor(families=["image"]).update_diagnostics(
            "a", '<img src="a.png">', collection
        )

        stored = collection.get("a")
        assert isinstance(stored, tuple)
        with pytest.raises(Exception):
            stored[0].message = "changed"
