# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the semantic HTML check family.
"""

from html_accessibility_checker.audit.checks import semantic_checks as sc
from html_accessibility_checker.utils.report_models import Severity


class TestDocumentLevel:
    def test_missing_lang(self):
        result = sc.check_html_lang_attribute("<html>", 0)

        assert result is not None
        assert "Missing lang attribute" in result.issue_text
        assert result.severity == Severity.HIGH

    def test_lang_present(self):
        assert sc.check_html_lang_attribute('<html lang="en">', 0) is None

    def test_family_reports_missing_lang(self, run_checks):
        results = run_checks(sc.SEMANTIC_CHECKS, "<html>", "<html><body></body></html>")

        assert any("Missing lang attribute" in r.issue_text for r in results)

    def test_head_without_title(self):
        result = sc.check_document_structure("<head>", 0, "<html>\n<head>\n</head>")

        assert result.severity == Severity.HIGH
        assert "missing title" in result.issue_text

    def test_head_without_viewport(self):
        full_text = "<head>\n<title>x</title>\n</head>"
        result = sc.check_document_structure("<head>", 0, full_text)

        assert result.severity == Severity.MEDIUM
        assert "viewport" in result.issue_text

    def test_header_is_not_head(self):
        assert sc.check_document_structure("<header>", 0, "<header>") is None


class TestHeadings:
    def test_lower_heading_flagged_for_review(self):
        result = sc.check_heading_hierarchy("<h3>Heading</h3>", 0, "<h1>Main</h1><h3>Sub</h3>")

        assert result is not None
        assert "Heading h3 detected" in result.issue_text
        assert result.severity == Severity.MEDIUM

    def test_h2_after_h1_is_still_flagged(self):
        result = sc.check_heading_hierarchy("<h2>Sub</h2>", 1, "<h1>Main</h1>\n<h2>Sub</h2>")

        assert result.severity == Severity.MEDIUM

    def test_multiple_h1(self):
        full_text = "<h1>One</h1>\n<h1>Two</h1>"
        result = sc.check_heading_hierarchy("<h1>Two</h1>", 1, full_text)

        assert result.severity == Severity.HIGH
        assert "Multiple h1" in result.issue_text

    def test_single_h1_is_clean(self):
        assert sc.check_heading_hierarchy("<h1>Main</h1>", 0, "<h1>Main</h1>") is None


class TestStructure:
    def test_orphan_list_item(self):
        result = sc.check_list_structure("<li>Item</li>", 0)

        assert "List item (li) found without proper list container" in result.issue_text

    def test_list_with_container(self):
        assert sc.check_list_structure("<ul><li>Item</li></ul>", 0) is None

    def test_link_element_is_not_list_item(self):
        assert sc.check_list_structure('<link rel="stylesheet" href="a.css">', 0) is None

    def test_orphan_table_cell(self):
        result = sc.check_table_structure("<td>Cell</td>", 0)

        assert "Table cell (td) found without proper table structure" in result.issue_text

    def test_table_without_caption(self):
        result = sc.check_table_structure("<table>", 0)

        assert "Table missing caption or summary" in result.issue_text

    def test_input_without_label(self):
        result = sc.check_form_structure('<input type="text" />', 0)

        assert "Form control missing label" in result.issue_text

    def test_fieldset_without_legend(self):
        result = sc.check_form_structure("<fieldset>", 0)

        assert "Fieldset missing legend" in result.issue_text


class TestButtonsAndLinks:
    def test_div_with_onclick(self):
        result = sc.check_button_usage('<div onclick="doSomething()">Click me</div>', 0)

        assert "Use semantic button element instead of div/span with onclick" in result.issue_text

    def test_empty_button(self):
        result = sc.check_button_usage("<button></button>", 0)

        assert "Button missing accessible text" in result.issue_text

    def test_button_with_nested_markup_text(self):
        line = '<button><span class="icon"></span> Save</button>'

        assert sc.check_button_usage(line, 0) is None

    def test_empty_link(self):
        result = sc.check_link_usage('<a href="#"></a>', 0)

        assert "Link missing accessible text" in result.issue_text

    def test_generic_link_text(self):
        result = sc.check_link_usage('<a href="#">click here</a>', 0)

        assert "Link text is not descriptive" in result.issue_text
        assert result.severity == Severity.MEDIUM

    def test_article_is_not_link(self):
        assert sc.check_link_usage("<article>", 0) is None


class TestLandmarks:
    def test_body_without_main(self):
        result = sc.check_landmark_usage("<body>", 0)

        assert "Page missing main landmark" in result.issue_text

    def test_main_landmark_reminder(self):
        result = sc.check_landmark_usage("<main>", 0)

        assert "Main landmark detected" in result.issue_text

    def test_section_without_heading(self):
        assert sc.check_sectioning_elements("<section>", 0) is not None
        assert sc.check_sectioning_elements("<section><h2>Intro</h2>", 0) is None

    def test_nav_without_list(self):
        assert sc.check_navigation_structure("<nav>", 0) is not None
        assert sc.check_navigation_structure("<nav><ul>", 0) is None
