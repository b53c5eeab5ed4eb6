# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Input purpose checks (WCAG 1.3.5 Identify Input Purpose).

Field categories are inferred from the name, id and type of an input; the
text content of the line is not considered.
"""

from typing import Iterable, Optional

from html_accessibility_checker.audit.base_check import (
    contains_any,
    create_issue,
    get_attribute,
    has_element,
)
from html_accessibility_checker.utils.report_models import Issue, Severity

# Autofill field names from the HTML standard
AUTOCOMPLETE_VALUES = frozenset(
    [
        "name", "honorific-prefix", "given-name", "additional-name",
        "family-name", "honorific-suffix", "nickname", "email", "username",
        "new-password", "current-password", "one-time-code",
        "organization-title", "organization", "street-address",
        "address-line1", "address-line2", "address-line3", "address-level1",
        "address-level2", "address-level3", "address-level4", "country",
        "country-name", "postal-code", "cc-name", "cc-given-name",
        "cc-additional-name", "cc-family-name", "cc-number", "cc-exp",
        "cc-exp-month", "cc-exp-year", "cc-csc", "cc-type",
        "transaction-currency", "transaction-amount", "language", "bday",
        "bday-day", "bday-month", "bday-year", "sex", "tel",
        "tel-country-code", "tel-national", "tel-area-code", "tel-local",
        "tel-local-prefix", "tel-local-suffix", "tel-extension", "url",
        "photo", "webauthn",
    ]
)

PERSONAL_KEYWORDS = (
    "name", "email", "phone", "address", "city", "state", "zip", "country",
    "birth", "gender", "age",
)
FINANCIAL_KEYWORDS = (
    "card", "credit", "debit", "cvv", "cvc", "expiry", "amount", "currency",
)
AUTHENTICATION_KEYWORDS = (
    "username", "login", "password", "otp", "verification", "code",
)
CONTACT_KEYWORDS = ("phone", "tel", "mobile", "fax", "website", "url")
ADDRESS_KEYWORDS = (
    "street", "address", "city", "state", "province", "zip", "postal", "country",
)
USER_INFO_KEYWORDS = ("name", "email", "phone", "address", "birth", "gender")


def _field_identity(text: str) -> str:
    """Return the lowercased name, id and type of a field joined by spaces."""
    values = (get_attribute(text, attribute) for attribute in ("name", "id", "type"))
    return " ".join(value.lower() for value in values if value)


def _is_unlabelled_field(text: str, keywords: Iterable[str]) -> bool:
    """Return True for a named input without autocomplete whose identity matches a keyword."""
    if not has_element(text, "input") or "autocomplete=" in text:
        return False
    if "name=" not in text and "id=" not in text:
        return False
    return contains_any(_field_identity(text), keywords)


def check_missing_autocomplete(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if (
        has_element(text, "input", "select", "textarea")
        and "autocomplete=" not in text
        and not contains_any(text, ("disabled", "readonly"))
    ):
        return create_issue(
            line,
            line_number,
            "Form input missing autocomplete attribute - add autocomplete for user information fields",
            Severity.HIGH,
        )

    return None


def check_invalid_autocomplete(line: str, line_number: int) -> Optional[Issue]:
    """
    Check for autocomplete values outside the standard token list.

    The whole value must be a single listed field name or "off".
    """
    value = get_attribute(line.strip(), "autocomplete")

    if value is not None and value != "off" and value not in AUTOCOMPLETE_VALUES:
        return create_issue(
            line,
            line_number,
            f'Invalid autocomplete value "{value}" - use standard autocomplete values or "off"',
            Severity.HIGH,
        )

    return None


def check_type_autocomplete_mismatch(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if not has_element(text, "input"):
        return None

    input_type = get_attribute(text, "type")
    value = get_attribute(text, "autocomplete")
    if not input_type or not value:
        return None

    if input_type == "email" and "email" not in value:
        return create_issue(
            line,
            line_number,
            'Email input should have autocomplete="email" or related email field',
            Severity.MEDIUM,
        )

    if input_type == "password" and "password" not in value:
        return create_issue(
            line,
            line_number,
            'Password input should have autocomplete="current-password" or "new-password"',
            Severity.MEDIUM,
        )

    return None


def check_personal_information_field(line: str, line_number: int) -> Optional[Issue]:
    if _is_unlabelled_field(line.strip(), PERSONAL_KEYWORDS):
        return create_issue(
            line,
            line_number,
            "Personal information field missing autocomplete attribute - add appropriate autocomplete value",
            Severity.HIGH,
        )

    return None


def check_financial_field(line: str, line_number: int) -> Optional[Issue]:
    if _is_unlabelled_field(line.strip(), FINANCIAL_KEYWORDS):
        return create_issue(
            line,
            line_number,
            "Financial field missing autocomplete attribute - add appropriate autocomplete value",
            Severity.HIGH,
        )

    return None


def check_authentication_field(line: str, line_number: int) -> Optional[Issue]:
    if _is_unlabelled_field(line.strip(), AUTHENTICATION_KEYWORDS):
        return create_issue(
            line,
            line_number,
            "Authentication field missing autocomplete attribute - add appropriate autocomplete value",
            Severity.HIGH,
        )

    return None


def check_contact_field(line: str, line_number: int) -> Optional[Issue]:
    if _is_unlabelled_field(line.strip(), CONTACT_KEYWORDS):
        return create_issue(
            line,
            line_number,
            "Contact field missing autocomplete attribute - add appropriate autocomplete value",
            Severity.MEDIUM,
        )

    return None


def check_address_field(line: str, line_number: int) -> Optional[Issue]:
    if _is_unlabelled_field(line.strip(), ADDRESS_KEYWORDS):
        return create_issue(
            line,
            line_number,
            "Address field missing autocomplete attribute - add appropriate autocomplete value",
            Severity.HIGH,
        )

    return None


def check_autocomplete_off_on_user_field(line: str, line_number: int) -> Optional[Issue]:
    text = line.strip()

    if get_attribute(text, "autocomplete") == "off" and contains_any(
        _field_identity(text), USER_INFO_KEYWORDS
    ):
        return create_issue(
            line,
            line_number,
            'User information field has autocomplete="off" - consider using appropriate autocomplete value',
            Severity.MEDIUM,
        )

    return None


INPUT_PURPOSE_CHECKS = (
    check_missing_autocomplete,
    check_invalid_autocomplete,
    check_type_autocomplete_mismatch,
    check_personal_information_field,
    check_financial_field,
    check_authentication_field,
    check_contact_field,
    check_address_field,
    check_autocomplete_off_on_user_field,
)
