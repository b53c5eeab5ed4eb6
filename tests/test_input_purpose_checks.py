# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the input purpose check family.
"""

import pytest

from html_accessibility_checker.audit.checks import input_purpose_checks as ip
from html_accessibility_checker.utils.report_models import Severity


class TestAutocompleteAttribute:
    def test_missing_autocomplete(self):
        issue = ip.check_missing_autocomplete('<input type="text" name="q">', 0)

        assert issue.severity == Severity.HIGH

    @pytest.mark.parametrize(
        "line",
        [
            '<input type="text" name="q" disabled>',
            '<input type="text" name="q" readonly>',
            '<input type="text" name="q" autocomplete="off">',
        ],
    )
    def test_missing_autocomplete_exemptions(self, line):
        assert ip.check_missing_autocomplete(line, 0) is None

    def test_invalid_autocomplete(self):
        issue = ip.check_invalid_autocomplete('<input autocomplete="firstname">', 0)

        assert issue.severity == Severity.HIGH
        assert 'Invalid autocomplete value "firstname"' in issue.issue_text

    @pytest.mark.parametrize("value", ["email", "off", "street-address", "one-time-code"])
    def test_valid_autocomplete_values(self, value):
        assert ip.check_invalid_autocomplete(f'<input autocomplete="{value}">', 0) is None

    @pytest.mark.parametrize(
        "value",
        ["on", "shipping", "shipping street-address", "section-blue email", "Email", "zip"],
    )
    def test_values_outside_token_list(self, value):
        issue = ip.check_invalid_autocomplete(f'<input type="text" autocomplete="{value}">', 0)

        assert issue is not None
        assert issue.severity == Severity.HIGH
        assert f'Invalid autocomplete value "{value}"' in issue.issue_text

    def test_email_type_mismatch(self):
        issue = ip.check_type_autocomplete_mismatch('<input type="email" autocomplete="name">', 0)

        assert issue.severity == Severity.MEDIUM
        assert "Email input" in issue.issue_text

    def test_password_type_mismatch(self):
        line = '<input type="password" autocomplete="username">'

        assert "Password input" in ip.check_type_autocomplete_mismatch(line, 0).issue_text
        assert (
            ip.check_type_autocomplete_mismatch(
                '<input type="password" autocomplete="current-password">', 0
            )
            is None
        )


class TestFieldCategories:
    @pytest.mark.parametrize(
        "check, line, severity",
        [
            (ip.check_personal_information_field, '<input type="text" name="first_name">', Severity.HIGH),
            (ip.check_financial_field, '<input type="text" name="card_number">', Severity.HIGH),
            (ip.check_authentication_field, '<input type="password" id="pwd">', Severity.HIGH),
            (ip.check_contact_field, '<input type="tel" name="mobile">', Severity.MEDIUM),
            (ip.check_address_field, '<input type="text" name="street">', Severity.HIGH),
        ],
    )
    def test_category_without_autocomplete(self, check, line, severity):
        issue = check(line, 0)

        assert issue is not None
        assert issue.severity == severity

    def test_category_with_autocomplete(self):
        line = '<input type="text" name="first_name" autocomplete="given-name">'

        assert ip.check_personal_information_field(line, 0) is None

    def test_visible_text_does_not_set_category(self):
        line = '<label>Your name <input type="text" name="q"></label>'

        assert ip.check_personal_information_field(line, 0) is None

    def test_autocomplete_off_on_user_field(self):
        line = '<input type="email" name="email" autocomplete="off">'

        assert ip.check_autocomplete_off_on_user_field(line, 0).severity == Severity.MEDIUM


def test_family_on_well_formed_input(run_checks):
    line = '<input type="email" name="email" autocomplete="email">'

    assert run_checks(ip.INPUT_PURPOSE_CHECKS, line) == []
