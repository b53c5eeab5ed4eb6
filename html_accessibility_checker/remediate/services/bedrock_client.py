# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Bedrock client for alt text generation.

This module wraps the Amazon Bedrock Converse API. Calls are blocking; the
repair workflow runs them in a worker thread.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from html_accessibility_checker.utils.logging_helper import (
    AccessibilityRemediationError,
    MissingCredentialsError,
    setup_logger,
)

# Set up module-level logger
logger = setup_logger(__name__)

DEFAULT_MODEL_ID = "us.amazon.nova-lite-v1:0"


class AltTextGenerationError(AccessibilityRemediationError):
    """Exception raised when alt text generation fails."""


class BedrockClient:
    """Client for generating text with AWS Bedrock.

    Attributes:
        model_id: The Bedrock model ID to use
        profile: AWS credentials profile name
        region: AWS region override
        client: Boto3 Bedrock runtime client
    """

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL_ID,
        profile: Optional[str] = None,
        region: Optional[str] = None,
    ):
        """
        Initialize the Bedrock client.

        Args:
            model_id: The ID of the Bedrock model to use
            profile: AWS profile name to use for authentication
            region: AWS region name (defaults to the session's region)

        Raises:
            MissingCredentialsError: If no AWS credentials can be resolved
        """
        self.model_id = model_id
        self.profile = profile
        self.region = region

        if profile:
            try:
                session = boto3.Session(profile_name=profile)
                logger.debug(f"Using AWS profile: {profile}")
            except ProfileNotFound as profile_error:
                logger.warning(
                    f"Couldn't use AWS profile '{profile}', falling back to default credentials: {profile_error}"
                )
                session = boto3.Session()
        else:
            session = boto3.Session()

        if session.get_credentials() is None:
            raise MissingCredentialsError(
                "No AWS credentials found. Configure a profile or set AWS credentials "
                "in the environment to use alt text generation."
            )

        client_kwargs = {"region_name": region} if region else {}
        self.client = session.client("bedrock-runtime", **client_kwargs)
        logger.debug(
            f"Initialized Bedrock client with model: {model_id}, profile: {profile}"
        )

    def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 150,
        temperature: float = 0.3,
    ) -> str:
        """
        Generate text using the Bedrock model.

        Args:
            prompt: The user message to send to the model
            system_prompt: Optional system instruction
            max_tokens: Maximum number of tokens to generate
            temperature: Sampling temperature

        Returns:
            The generated text

        Raises:
            AltTextGenerationError: If text generation fails or returns nothing
        """
        request = {
            "modelId": self.model_id,
            "messages": [
                {
                    "role": "user",
                    "content": [{"text": prompt}],
                }
            ],
            "inferenceConfig": {
                "maxTokens": max_tokens,
                "temperature": temperature,
            },
        }
        if system_prompt:
            request["system"] = [{"text": system_prompt}]

        try:
            response = self.client.converse(**request)
        except (BotoCoreError, ClientError) as e:
            logger.warning(f"Error generating text with Bedrock: {e}")
            raise AltTextGenerationError(
                f"Failed to generate text with Bedrock: {str(e)}"
            ) from e

        content = response.get("output", {}).get("message", {}).get("content", [])
        generated_text = content[0].get("text", "") if content else ""

        if not generated_text or not generated_text.strip():
            logger.warning("No content in Bedrock response")
            raise AltTextGenerationError("No content in Bedrock response")

        return generated_text.strip()
