# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Checker API.

This module provides the primary entry points for the package: auditing HTML
source for accessibility issues and adding missing alt text with Amazon
Bedrock.
"""

import asyncio
import os
from typing import Any, Dict, Optional

from html_accessibility_checker.audit.auditor import AccessibilityAuditor
from html_accessibility_checker.audit.report_generator import (
    build_audit_report,
    generate_report,
)
from html_accessibility_checker.remediate.alt_text_fixer import (
    AltTextFixer,
    apply_edits,
)
from html_accessibility_checker.utils.config import (
    AUDIT_OPTIONAL_FIELDS,
    AUDIT_REQUIRED_FIELDS,
    config_manager,
    validate_options,
)
from html_accessibility_checker.utils.logging_helper import (
    AccessibilityAuditError,
    AccessibilityRemediationError,
    handle_exception,
    setup_logger,
)

# Set up module-level logger
logger = setup_logger(__name__)


def _read_text(path: str) -> str:
    # newline="" keeps CRLF line endings intact
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: str, content: str) -> None:
    output_dir = os.path.dirname(path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def audit_html_accessibility(
    html_path: Optional[str] = None,
    html_content: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
    output_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Audit HTML source for accessibility issues.

    Args:
        html_path: Path to the HTML file.
        html_content: HTML text to audit instead of reading a file.
        options: Audit options including:
            - families (list): Check families to run. Default: None (all).
            - min_severity (str): Lowest severity to report. Default: 'low'.
            - report_format (str): 'text' or 'json'. Default: 'text'.
        output_path: Path to save the rendered report.

    Returns:
        Dictionary containing audit results:
            - 'issues': List of reported issues.
            - 'summary': Summary of audit results.
            - 'report': The rendered report.
            - 'report_path': Path to the saved report file, if any.

    Raises:
        FileNotFoundError: If the HTML file doesn't exist.
        AccessibilityAuditError: If there's an error during auditing.
    """
    try:
        if html_content is None:
            if not html_path:
                raise ValueError("Either html_path or html_content is required")
            if not os.path.exists(html_path):
                raise FileNotFoundError(f"HTML path not found: {html_path}")
            html_content = _read_text(html_path)

        # Get configuration with user options merged
        audit_config = config_manager.get_config(user_options=options, section="audit")
        validate_options(
            audit_config,
            required_fields=AUDIT_REQUIRED_FIELDS,
            optional_fields=AUDIT_OPTIONAL_FIELDS,
        )

        families = audit_config.get("families")
        if isinstance(families, str):
            families = [f.strip() for f in families.split(",") if f.strip()]

        auditor = AccessibilityAuditor(families=families)
        issues_by_family = auditor.check_issues_by_family(html_content)

        report = build_audit_report(
            issues_by_family,
            file_path=html_path,
            min_severity=audit_config.get("min_severity", "low"),
        )

        if output_path:
            output_dir = os.path.dirname(output_path)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)

        rendered = generate_report(
            report,
            output_path=output_path,
            report_format=audit_config.get("report_format", "text"),
        )

        return {
            "issues": [issue.model_dump(mode="json") for issue in report.issues],
            "summary": report.summary.model_dump(mode="json"),
            "report": rendered,
            "report_path": output_path,
        }

    except FileNotFoundError:
        raise
    except Exception as e:
        handle_exception(
            e,
            logger,
            custom_message="Error auditing HTML accessibility",
            custom_exception=AccessibilityAuditError,
        )


def fix_missing_alt_text(
    html_path: str,
    options: Optional[Dict[str, Any]] = None,
    output_path: Optional[str] = None,
    line: Optional[int] = None,
    dry_run: bool = False,
    client: Any = None,
) -> Dict[str, Any]:
    """
    Generate alt text for images that lack it.

    Args:
        html_path: Path to the HTML file.
        options: Remediation options (see the ``remediate`` config section).
        output_path: Where to write the patched HTML. Defaults to html_path.
        line: 1-based line to fix. Default: None (every image missing alt text).
        dry_run: Return suggestions without writing anything.
        client: Text generation client to use instead of Bedrock.

    Returns:
        Dictionary containing remediation results:
            - 'results': One entry per attempted image.
            - 'fixed': Number of images that received alt text.
            - 'failed': Number of images that could not be fixed.
            - 'output_path': Path of the written file, or None on dry runs.

    Raises:
        FileNotFoundError: If the HTML file doesn't exist.
        AccessibilityRemediationError: If there's an error during remediation.
    """
    try:
        if not os.path.exists(html_path):
            raise FileNotFoundError(f"HTML path not found: {html_path}")

        text = _read_text(html_path)
        fixer = AltTextFixer(client=client, options=options)

        if dry_run:
            results = asyncio.run(fixer.preview_document(text))
        elif line is not None:
            results = [asyncio.run(fixer.fix_line(text, line - 1))]
        else:
            results = asyncio.run(fixer.fix_document(text))

        edits = [result.edit for result in results if result.edit is not None]
        written_path = None
        if edits and not dry_run:
            written_path = output_path or html_path
            _write_text(written_path, apply_edits(text, edits))
            logger.info(f"Added alt text to {len(edits)} image(s) in {written_path}")

        fixed = sum(1 for result in results if result.success)
        return {
            "results": [result.model_dump(mode="json") for result in results],
            "fixed": fixed,
            "failed": len(results) - fixed,
            "output_path": written_path,
        }

    except FileNotFoundError:
        raise
    except Exception as e:
        handle_exception(
            e,
            logger,
            custom_message="Error fixing missing alt text",
            custom_exception=AccessibilityRemediationError,
        )
