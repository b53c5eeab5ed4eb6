# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the Bedrock client, using botocore's Stubber instead of the network.
"""

import pytest
from botocore.stub import Stubber

from html_accessibility_checker.remediate.services.bedrock_client import (
    AltTextGenerationError,
    BedrockClient,
)
from html_accessibility_checker.utils.logging_helper import MissingCredentialsError


def _converse_response(content):
    return {
        "output": {"message": {"role": "assistant", "content": content}},
        "stopReason": "end_turn",
        "usage": {"inputTokens": 10, "outputTokens": 5, "totalTokens": 15},
        "metrics": {"latencyMs": 12},
    }


@pytest.fixture
def aws_env(monkeypatch, tmp_path):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_SESSION_TOKEN", raising=False)


@pytest.fixture
def no_aws_credentials(monkeypatch, tmp_path):
    for name in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_PROFILE",
        "AWS_WEB_IDENTITY_TOKEN_FILE",
        "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
        "AWS_CONTAINER_CREDENTIALS_FULL_URI",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")


def test_generate_text(aws_env):
    client = BedrockClient(model_id="test-model")
    expected_params = {
        "modelId": "test-model",
        "messages": [{"role": "user", "content": [{"text": "Describe"}]}],
        "inferenceConfig": {"maxTokens": 150, "temperature": 0.3},
        "system": [{"text": "Be brief"}],
    }

    with Stubber(client.client) as stubber:
        stubber.add_response(
            "converse", _converse_response([{"text": " A lighthouse at dusk \n"}]), expected_params
        )
        text = client.generate_text("Describe", system_prompt="Be brief")

    assert text == "A lighthouse at dusk"


def test_empty_response_is_error(aws_env):
    client = BedrockClient()

    with Stubber(client.client) as stubber:
        stubber.add_response("converse", _converse_response([]))
        with pytest.raises(AltTextGenerationError):
            client.generate_text("Describe")


def test_service_error_is_wrapped(aws_env):
    client = BedrockClient()

    with Stubber(client.client) as stubber:
        stubber.add_client_error("converse", service_error_code="ThrottlingException")
        with pytest.raises(AltTextGenerationError):
            client.generate_text("Describe")


def test_unknown_profile_falls_back_to_default_session(aws_env):
    client = BedrockClient(profile="does-not-exist")

    assert client.profile == "does-not-exist"
    assert client.client.meta.region_name == "us-east-1"


def test_region_override(aws_env):
    assert BedrockClient(region="us-west-2").client.meta.region_name == "us-west-2"


def test_missing_credentials(no_aws_credentials):
    with pytest.raises(MissingCredentialsError):
        BedrockClient()
