# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Alt text generator module.

This module builds the prompts sent to the text generator and cleans up what
comes back.
"""

import re

DECORATIVE_KEYWORD = "decorative"

SYSTEM_PROMPT = (
    "You are an accessibility expert. Generate concise, descriptive alt text "
    "for images. Keep it under 125 characters. If the image is decorative, "
    f'return "{DECORATIVE_KEYWORD}".'
)


def build_alt_text_prompt(image_src: str, context: str = "") -> str:
    """
    Build the user message asking for alt text.

    Args:
        image_src: The image's src attribute
        context: Text from the lines around the image

    Returns:
        str: Prompt for generating alt text
    """
    return (
        f"Generate alt text for this image: {image_src}\n\n"
        f"Context: {context}\n\n"
        "Provide a concise, descriptive alt text that describes what the image "
        "shows. If the image is purely decorative, return "
        f'"{DECORATIVE_KEYWORD}".'
    )


def is_decorative_response(response: str) -> bool:
    """Check whether the generator answered that the image is decorative."""
    return response.strip().strip("\"'").rstrip(".").strip().lower() == DECORATIVE_KEYWORD


def clean_alt_text(alt_text: str) -> str:
    """
    Clean up generated alt text.

    Args:
        alt_text: The generated alt text

    Returns:
        Cleaned alt text
    """
    alt_text = alt_text.strip()

    # Remove any quotes that might be around the text
    alt_text = alt_text.strip("\"'").strip()

    # Remove phrases like "Image of" or "Picture of" from the beginning
    alt_text = re.sub(
        r"^(image|picture|photo|photograph|illustration|graphic|icon)\s+of\s+",
        "",
        alt_text,
        flags=re.IGNORECASE,
    )

    # Remove any trailing periods
    alt_text = alt_text.rstrip(".")

    # Collapse line breaks; an attribute value must stay on one line
    alt_text = " ".join(alt_text.split())

    if alt_text:
        alt_text = alt_text[0].upper() + alt_text[1:]

    return alt_text
