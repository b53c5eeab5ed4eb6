# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Accessibility checks package.

This package contains the detector families. Each module exposes its checks as
an ordered tuple; declaration order is run order.
"""

from html_accessibility_checker.audit.checks.image_checks import IMAGE_CHECKS
from html_accessibility_checker.audit.checks.form_checks import FORM_CHECKS
from html_accessibility_checker.audit.checks.other_checks import OTHER_CHECKS
from html_accessibility_checker.audit.checks.aria_checks import ARIA_CHECKS
from html_accessibility_checker.audit.checks.tab_index_checks import TAB_INDEX_CHECKS
from html_accessibility_checker.audit.checks.semantic_checks import SEMANTIC_CHECKS
from html_accessibility_checker.audit.checks.keyboard_checks import KEYBOARD_CHECKS
from html_accessibility_checker.audit.checks.focus_checks import FOCUS_CHECKS
from html_accessibility_checker.audit.checks.input_purpose_checks import (
    INPUT_PURPOSE_CHECKS,
)
from html_accessibility_checker.audit.checks.label_name_checks import (
    LABEL_NAME_CHECKS,
)
from html_accessibility_checker.audit.checks.color_contrast_checks import (
    COLOR_CONTRAST_CHECKS,
)

__all__ = [
    "IMAGE_CHECKS",
    "FORM_CHECKS",
    "OTHER_CHECKS",
    "ARIA_CHECKS",
    "TAB_INDEX_CHECKS",
    "SEMANTIC_CHECKS",
    "KEYBOARD_CHECKS",
    "FOCUS_CHECKS",
    "INPUT_PURPOSE_CHECKS",
    "LABEL_NAME_CHECKS",
    "COLOR_CONTRAST_CHECKS",
]
