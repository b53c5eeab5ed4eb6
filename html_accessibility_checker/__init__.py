# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Checker Package.

This package provides tools for checking HTML source text for accessibility
issues line by line and for adding missing image alt text with Amazon Bedrock.

Main Components:
- Accessibility checks grouped into families
- Diagnostic generation and audit reports
- Assisted alt text repair
"""

__version__ = "0.1.0"
