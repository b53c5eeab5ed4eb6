# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Check family registry.

A registry maps family names to ordered tuples of check functions. It is built
once by ``build_default_registry`` and is read-only afterwards; tests can build
their own registries from any family mapping.
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from html_accessibility_checker.audit.base_check import Check, run_check
from html_accessibility_checker.audit.checks import (
    ARIA_CHECKS,
    COLOR_CONTRAST_CHECKS,
    FOCUS_CHECKS,
    FORM_CHECKS,
    IMAGE_CHECKS,
    INPUT_PURPOSE_CHECKS,
    KEYBOARD_CHECKS,
    LABEL_NAME_CHECKS,
    OTHER_CHECKS,
    SEMANTIC_CHECKS,
    TAB_INDEX_CHECKS,
)
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import Issue, LineContext

# Set up module-level logger
logger = setup_logger(__name__)

# Family invocation order
FAMILY_ORDER = (
    "image",
    "form",
    "other",
    "aria",
    "tab_index",
    "semantic",
    "keyboard",
    "focus",
    "input_purpose",
    "label_name",
    "color_contrast",
)


class CheckRegistry:
    """Immutable, ordered mapping of family name to check functions."""

    def __init__(self, families: Mapping[str, Sequence[Check]]):
        """
        Initialize the registry.

        Args:
            families: Family name to checks, in invocation order
        """
        frozen: Dict[str, Tuple[Check, ...]] = {}
        for name, checks in families.items():
            if not name:
                raise ValueError("Family name must not be empty")
            for check in checks:
                if not callable(check):
                    raise TypeError(f"Check in family '{name}' is not callable: {check!r}")
            frozen[name] = tuple(checks)
        self._families = MappingProxyType(frozen)

    @property
    def families(self) -> Mapping[str, Tuple[Check, ...]]:
        return self._families

    def family_names(self) -> List[str]:
        return list(self._families)

    def get_family(self, name: str) -> Tuple[Check, ...]:
        """
        Get the checks of a family.

        Raises:
            KeyError: If the family is not registered
        """
        return self._families[name]

    def select(self, names: Optional[Sequence[str]] = None) -> "CheckRegistry":
        """
        Create a registry restricted to the named families.

        Registry order is kept regardless of the order of ``names``.

        Args:
            names: Families to keep; None keeps all

        Returns:
            A new registry

        Raises:
            KeyError: If a name is not registered
        """
        if names is None:
            return self

        unknown = [name for name in names if name not in self._families]
        if unknown:
            raise KeyError(
                f"Unknown check families: {', '.join(unknown)}. "
                f"Available: {', '.join(self._families)}"
            )
        return CheckRegistry(
            {name: checks for name, checks in self._families.items() if name in names}
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self._families)

    def __len__(self) -> int:
        return len(self._families)

    def __contains__(self, name: object) -> bool:
        return name in self._families


def build_default_registry() -> CheckRegistry:
    """Build the registry of all built-in check families."""
    return CheckRegistry(
        {
            "image": IMAGE_CHECKS,
            "form": FORM_CHECKS,
            "other": OTHER_CHECKS,
            "aria": ARIA_CHECKS,
            "tab_index": TAB_INDEX_CHECKS,
            "semantic": SEMANTIC_CHECKS,
            "keyboard": KEYBOARD_CHECKS,
            "focus": FOCUS_CHECKS,
            "input_purpose": INPUT_PURPOSE_CHECKS,
            "label_name": LABEL_NAME_CHECKS,
            "color_contrast": COLOR_CONTRAST_CHECKS,
        }
    )


def run_family(checks: Sequence[Check], context: LineContext) -> List[Issue]:
    """
    Run every check of a family against one line.

    Results are concatenated in check order. A failing check is logged and
    skipped by ``run_check``.

    Args:
        checks: The family's checks
        context: The line being analysed

    Returns:
        Issues reported by the family
    """
    issues: List[Issue] = []
    for check in checks:
        issues.extend(run_check(check, context))
    return issues


DEFAULT_REGISTRY = build_default_registry()
