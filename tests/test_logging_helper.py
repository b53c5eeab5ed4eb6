# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the logging and exception helpers.
"""

import logging

import pytest

from html_accessibility_checker.utils.logging_helper import (
    AccessibilityAuditError,
    handle_exception,
    setup_logger,
)


@pytest.fixture
def logger():
    return setup_logger("html_accessibility_checker.tests")


def test_wraps_in_custom_exception(logger, caplog):
    error = ValueError("bad input")

    with caplog.at_level(logging.ERROR, logger=logger.name):
        with pytest.raises(AccessibilityAuditError) as exc:
            handle_exception(
                error, logger, custom_message="Audit failed", custom_exception=AccessibilityAuditError
            )

    assert str(exc.value) == "Audit failed: bad input"
    assert exc.value.__cause__ is error
    assert "Audit failed" in caplog.text


def test_reraises_caught_exception(logger):
    error = KeyError("missing")

    with pytest.raises(KeyError) as exc:
        handle_exception(error, logger)

    assert exc.value is error
