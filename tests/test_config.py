# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for configuration management.
"""

import json

import pytest

from html_accessibility_checker.utils.config import (
    AUDIT_OPTIONAL_FIELDS,
    AUDIT_REQUIRED_FIELDS,
    REMEDIATE_OPTIONAL_FIELDS,
    REMEDIATE_REQUIRED_FIELDS,
    ConfigManager,
    config_manager,
    load_config_file,
    validate_options,
)
from html_accessibility_checker.utils.logging_helper import ConfigurationError


@pytest.fixture
def manager():
    return ConfigManager(
        {
            "audit": {"min_severity": "low", "families": None},
            "remediate": {"timeout_seconds": 30.0, "context_lines": 2, "profile": None},
        }
    )


def test_global_defaults():
    remediate = config_manager.get_config(section="remediate")

    assert remediate["model_id"] == "us.amazon.nova-lite-v1:0"
    assert remediate["max_tokens"] == 150
    assert config_manager.get_config(section="audit")["report_format"] == "text"


def test_section_defaults_are_copies(manager):
    manager.get_config(section="audit")["min_severity"] = "high"

    assert manager.get_config(section="audit")["min_severity"] == "low"


def test_precedence(manager, monkeypatch):
    manager.set_user_config({"timeout_seconds": 10.0, "context_lines": 4}, "remediate")
    monkeypatch.setenv("HTML_A11Y_REMEDIATE_TIMEOUT_SECONDS", "5")

    config = manager.get_config({"context_lines": 1}, "remediate")

    assert config["timeout_seconds"] == 5.0
    assert config["context_lines"] == 1


def test_env_values_are_converted(manager, monkeypatch):
    monkeypatch.setenv("HTML_A11Y_REMEDIATE_CONTEXT_LINES", "3")
    monkeypatch.setenv("HTML_A11Y_REMEDIATE_PROFILE", "dev")

    config = manager.get_config(section="remediate")

    assert config["context_lines"] == 3
    assert config["profile"] == "dev"


def test_none_runtime_options_are_ignored(manager):
    config = manager.get_config({"min_severity": None}, "audit")

    assert config["min_severity"] == "low"


def test_load_yaml_file(tmp_path, manager):
    path = tmp_path / "a11y.yaml"
    path.write_text("audit:\n  min_severity: high\nremediate:\n  profile: dev\n")

    manager.load_user_config(load_config_file(str(path)))

    assert manager.get_config(section="audit")["min_severity"] == "high"
    assert manager.get_config(section="remediate")["profile"] == "dev"


def test_load_json_file(tmp_path):
    path = tmp_path / "a11y.json"
    path.write_text(json.dumps({"audit": {"families": ["image"]}}))

    assert load_config_file(str(path)) == {"audit": {"families": ["image"]}}


@pytest.mark.parametrize(
    "name, content",
    [
        ("a11y.toml", "x = 1"),
        ("a11y.yaml", "audit: [unclosed"),
        ("a11y.yaml", "- just\n- a list\n"),
    ],
)
def test_bad_config_files(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)

    with pytest.raises(ConfigurationError):
        load_config_file(str(path))


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config_file(str(tmp_path / "missing.yaml"))


def test_section_must_be_mapping(manager):
    with pytest.raises(ConfigurationError):
        manager.load_user_config({"audit": ["image"]})


def test_validate_options():
    validate_options({"timeout_seconds": 1.0}, required_fields={"timeout_seconds": float})

    with pytest.raises(ConfigurationError):
        validate_options({}, required_fields={"timeout_seconds": float})
    with pytest.raises(ConfigurationError):
        validate_options({"profile": 3}, optional_fields={"profile": str})


def test_validate_options_with_type_alternatives():
    validate_options({"timeout_seconds": 5}, required_fields={"timeout_seconds": (int, float)})

    with pytest.raises(ConfigurationError, match="Expected int or float, got str"):
        validate_options({"timeout_seconds": "5"}, required_fields={"timeout_seconds": (int, float)})


def test_default_sections_pass_validation():
    validate_options(
        config_manager.get_config(section="audit"),
        required_fields=AUDIT_REQUIRED_FIELDS,
        optional_fields=AUDIT_OPTIONAL_FIELDS,
    )
    validate_options(
        config_manager.get_config(section="remediate"),
        required_fields=REMEDIATE_REQUIRED_FIELDS,
        optional_fields=REMEDIATE_OPTIONAL_FIELDS,
    )
