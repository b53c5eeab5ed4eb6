# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Auditor.

This module runs every check family over every line of a document and turns
the resulting issues into diagnostics. Issues are ordered by line, then family
order, then check order within the family.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from html_accessibility_checker.audit.registry import (
    DEFAULT_REGISTRY,
    CheckRegistry,
    run_family,
)
from html_accessibility_checker.audit.standards import (
    DIAGNOSTIC_SOURCE,
    get_diagnostic_level,
)
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import (
    Diagnostic,
    DocumentSnapshot,
    Issue,
)

# Set up module-level logger
logger = setup_logger(__name__)


class DiagnosticCollection:
    """
    Diagnostic store keyed by document URI.

    Each update replaces the whole entry for a document; entries are immutable
    tuples, so readers never see a partially written set.
    """

    def __init__(self, name: str = DIAGNOSTIC_SOURCE):
        self.name = name
        self._entries: Dict[str, Tuple[Diagnostic, ...]] = {}

    def set(self, uri: str, diagnostics: Sequence[Diagnostic]) -> None:
        self._entries[uri] = tuple(diagnostics)

    def get(self, uri: str) -> Tuple[Diagnostic, ...]:
        return self._entries.get(uri, ())

    def delete(self, uri: str) -> None:
        self._entries.pop(uri, None)

    def clear(self) -> None:
        self._entries = {}

    def uris(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class AccessibilityAuditor:
    """Class for auditing HTML source text line by line."""

    def __init__(
        self,
        registry: Optional[CheckRegistry] = None,
        families: Optional[Sequence[str]] = None,
    ):
        """
        Initialize the accessibility auditor.

        Args:
            registry: Check registry to use (defaults to the built-in families)
            families: Optional subset of family names to run

        Raises:
            KeyError: If a requested family is not registered
        """
        self.registry = (registry or DEFAULT_REGISTRY).select(families)

    def check_issues_by_family(self, text: str) -> List[Tuple[str, Issue]]:
        """
        Run all families over a document.

        Args:
            text: Document text

        Returns:
            (family name, issue) pairs in report order
        """
        snapshot = DocumentSnapshot.from_text(text)
        results: List[Tuple[str, Issue]] = []

        for index in range(len(snapshot.lines)):
            context = snapshot.line_context(index)
            for family, checks in self.registry.families.items():
                try:
                    issues = run_family(checks, context)
                except Exception as e:
                    logger.error(
                        "Error running %s checks on line %d: %s", family, index + 1, str(e)
                    )
                    continue
                results.extend((family, issue) for issue in issues)

        logger.debug(
            "Checked %d lines, found %d issues", len(snapshot.lines), len(results)
        )
        return results

    def check_issues(self, text: str) -> Tuple[Issue, ...]:
        """
        Get the ordered issues for a document.

        Args:
            text: Document text

        Returns:
            Issues ordered by line, family and check
        """
        return tuple(issue for _, issue in self.check_issues_by_family(text))

    def check_document(self, text: str) -> Tuple[Diagnostic, ...]:
        """Get the ordered diagnostics for a document."""
        return tuple(to_diagnostic(issue) for issue in self.check_issues(text))

    def update_diagnostics(
        self, uri: str, text: str, collection: DiagnosticCollection
    ) -> Tuple[Diagnostic, ...]:
        """
        Re-check a document and replace its diagnostics.

        The previous entry for ``uri`` is discarded, never merged.

        Args:
            uri: Document identifier
            text: Current document text
            collection: Diagnostic store to update

        Returns:
            The diagnostics now stored for the document
        """
        diagnostics = self.check_document(text)
        collection.set(uri, diagnostics)
        logger.debug("Stored %d diagnostics for %s", len(diagnostics), uri)
        return diagnostics


def to_diagnostic(issue: Issue) -> Diagnostic:
    """Convert an issue into a diagnostic."""
    return Diagnostic(
        range=issue.span,
        message=issue.issue_text,
        severity_level=get_diagnostic_level(issue.severity),
        source=DIAGNOSTIC_SOURCE,
    )
