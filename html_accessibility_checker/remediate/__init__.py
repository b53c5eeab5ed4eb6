# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Remediation module for adding missing alt text with Amazon Bedrock.
"""

from html_accessibility_checker.remediate.alt_text_fixer import (
    AltTextFixer,
    apply_edits,
    build_alt_text_request,
    compute_alt_text_edit,
    find_image_source,
)
from html_accessibility_checker.remediate.services.bedrock_client import (
    AltTextGenerationError,
    BedrockClient,
)

__all__ = [
    "AltTextFixer",
    "AltTextGenerationError",
    "BedrockClient",
    "apply_edits",
    "build_alt_text_request",
    "compute_alt_text_edit",
    "find_image_source",
]
