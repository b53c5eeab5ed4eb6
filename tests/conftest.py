# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import time
from typing import List, Optional

import pytest

from html_accessibility_checker.audit.registry import run_family
from html_accessibility_checker.utils.report_models import LineContext


class FakeClient:
    """Stands in for BedrockClient; records every call."""

    def __init__(
        self,
        response: Optional[str] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        responses: Optional[List[str]] = None,
    ):
        self.response = response
        self.error = error
        self.delay = delay
        self.responses = list(responses) if responses else None
        self.calls = []

    def generate_text(self, prompt, system_prompt=None, max_tokens=150, temperature=0.3):
        self.calls.append(
            {
                "prompt": prompt,
                "system_prompt": system_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.responses is not None:
            return self.responses.pop(0)
        return self.response


@pytest.fixture
def fake_client():
    """Return the FakeClient class so tests can configure instances."""
    return FakeClient


@pytest.fixture
def run_checks():
    """Run a family of checks over one line, as the auditor does."""

    def _run(checks, line: str, full_text: str = "", index: int = 0):
        context = LineContext(text=line, index=index, full_text=full_text or line)
        return run_family(checks, context)

    return _run


@pytest.fixture
def sample_html() -> str:
    return "\n".join(
        [
            "<html>",
            "<head>",
            "<title>Sample</title>",
            "</head>",
            "<body>",
            '<img src="hero.png">',
            '<img src="logo.png" alt="">',
            '<button onclick="save()"></button>',
            "</body>",
            "</html>",
        ]
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep HTML_A11Y_* variables from the developer's shell out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("HTML_A11Y_"):
            monkeypatch.delenv(name, raising=False)
