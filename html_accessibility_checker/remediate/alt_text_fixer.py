# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Assisted repair of images without alt text.

For an image line the workflow collects the image source and nearby text,
asks Bedrock for a description, and proposes a whole-line edit that inserts
the alt attribute. Nothing is written here: edits are returned to the caller,
and any failure yields a result without an edit.
"""

import asyncio
import html
import re
from typing import Any, Dict, List, Optional, Sequence

from bs4 import BeautifulSoup

from html_accessibility_checker.audit.base_check import has_element
from html_accessibility_checker.remediate.prompt_generators.alt_text_generator import (
    SYSTEM_PROMPT,
    build_alt_text_prompt,
    clean_alt_text,
    is_decorative_response,
)
from html_accessibility_checker.remediate.services.bedrock_client import (
    AltTextGenerationError,
    BedrockClient,
)
from html_accessibility_checker.utils.config import (
    REMEDIATE_OPTIONAL_FIELDS,
    REMEDIATE_REQUIRED_FIELDS,
    config_manager,
    validate_options,
)
from html_accessibility_checker.utils.logging_helper import (
    MissingCredentialsError,
    log_exception,
    setup_logger,
)
from html_accessibility_checker.utils.report_models import (
    AltFixResult,
    AltTextRequest,
    DocumentSnapshot,
    Span,
    TextEdit,
)

# Set up module-level logger
logger = setup_logger(__name__)

MAX_CONTEXT_LENGTH = 200

_IMG_SRC_PATTERN = re.compile(
    r"<img[^>]*src=[\"']([^\"']+)[\"'][^>]*>", re.IGNORECASE
)
_IMG_TAG_PATTERN = re.compile(r"<img(?=[\s>/])[^>]*>")


def find_image_source(line: str) -> Optional[str]:
    """
    Get the src of an image on the line that has no alt attribute.

    Args:
        line: Line text

    Returns:
        The image src, or None if the line is not a repair candidate
    """
    if not has_element(line, "img") or "alt=" in line:
        return None

    match = _IMG_SRC_PATTERN.search(line)
    if match:
        return match.group(1)
    return None


def build_alt_text_request(
    snapshot: DocumentSnapshot, line_index: int, context_lines: int = 2
) -> Optional[AltTextRequest]:
    """
    Build a generation request for the image on a line.

    The context is the text of ``context_lines`` lines either side of the
    image line, joined with spaces and cut to 200 characters.

    Args:
        snapshot: Document snapshot
        line_index: Zero-based index of the image line
        context_lines: Number of neighbouring lines to include on each side

    Returns:
        AltTextRequest, or None if the line is out of range or not a candidate
    """
    if line_index < 0 or line_index >= len(snapshot.lines):
        return None

    line = snapshot.lines[line_index]
    image_src = find_image_source(line)
    if image_src is None:
        return None

    start = max(0, line_index - context_lines)
    end = line_index + context_lines + 1
    context = " ".join(snapshot.lines[start:end])[:MAX_CONTEXT_LENGTH]

    return AltTextRequest(
        line_index=line_index, line=line, image_src=image_src, context=context
    )


def compute_alt_text_edit(
    line: str, line_index: int, alt_text: str
) -> Optional[TextEdit]:
    """
    Compute the edit that adds an alt attribute to the first image on a line.

    The attribute goes right before the tag's closing ``>``, or before ``/>``
    for a self-closing tag. The rewritten tag is re-parsed and the edit is
    dropped unless it yields an ``<img>`` carrying exactly ``alt_text``.

    Args:
        line: Current line text
        line_index: Zero-based line index
        alt_text: Alt text to insert (empty for decorative images)

    Returns:
        TextEdit replacing the whole line, or None if no safe edit exists
    """
    if "alt=" in line:
        return None

    match = _IMG_TAG_PATTERN.search(line)
    if not match:
        return None

    tag_start = match.start()
    tag_end = match.end()
    insert_at = tag_end - 1
    if line[insert_at - 1] == "/":
        insert_at -= 1
    while insert_at > tag_start and line[insert_at - 1].isspace():
        insert_at -= 1

    attribute = f' alt="{html.escape(alt_text, quote=True)}"'
    new_tag = line[tag_start:insert_at] + attribute + line[insert_at:tag_end]

    img = BeautifulSoup(new_tag, "html.parser").find("img")
    if img is None or img.get("alt") != alt_text:
        logger.warning(f"Rewritten image tag on line {line_index + 1} did not validate")
        return None

    new_line = line[:tag_start] + new_tag + line[tag_end:]
    return TextEdit(range=Span.for_line(line_index, line), new_text=new_line)


def apply_edits(text: str, edits: Sequence[TextEdit]) -> str:
    """
    Apply whole-line edits to a document.

    A line ending in '\\r' keeps it after replacement.

    Args:
        text: Document text
        edits: Edits to apply; at most one per line

    Returns:
        The edited document

    Raises:
        ValueError: If an edit targets a missing line or two edits share a line
    """
    lines = text.split("\n")
    seen = set()

    for edit in edits:
        index = edit.line_index
        if index < 0 or index >= len(lines):
            raise ValueError(f"Edit targets line {index + 1}, document has {len(lines)}")
        if index in seen:
            raise ValueError(f"More than one edit for line {index + 1}")
        seen.add(index)

        line_ending = "\r" if lines[index].endswith("\r") else ""
        lines[index] = edit.new_text + line_ending

    return "\n".join(lines)


class AltTextFixer:
    """
    Generates alt text for images and proposes edits.

    Attributes:
        options: Resolved ``remediate`` configuration
        client: Text generation client; created on first use when not given
    """

    def __init__(self, client: Any = None, options: Optional[Dict[str, Any]] = None):
        """
        Initialize the fixer.

        Args:
            client: Object with a BedrockClient-compatible ``generate_text``
            options: Overrides for the ``remediate`` configuration section

        Raises:
            ConfigurationError: If a resolved option has the wrong type
        """
        self.options = config_manager.get_config(user_options=options, section="remediate")
        validate_options(
            self.options,
            required_fields=REMEDIATE_REQUIRED_FIELDS,
            optional_fields=REMEDIATE_OPTIONAL_FIELDS,
        )
        self.client = client

    def _get_client(self) -> Any:
        if self.client is None:
            self.client = BedrockClient(
                model_id=self.options["model_id"],
                profile=self.options.get("profile"),
                region=self.options.get("region"),
            )
        return self.client

    def _generate_blocking(self, request: AltTextRequest) -> str:
        client = self._get_client()
        prompt = build_alt_text_prompt(request.image_src, request.context)
        return client.generate_text(
            prompt,
            system_prompt=SYSTEM_PROMPT,
            max_tokens=int(self.options["max_tokens"]),
            temperature=float(self.options["temperature"]),
        )

    async def generate_alt_text(self, request: AltTextRequest) -> str:
        """
        Ask the generator for alt text without blocking the event loop.

        Args:
            request: The generation request

        Returns:
            The raw generated text

        Raises:
            asyncio.TimeoutError: If the call exceeds ``timeout_seconds``
            MissingCredentialsError: If no AWS credentials are available
            AltTextGenerationError: If generation fails
        """
        return await asyncio.wait_for(
            asyncio.to_thread(self._generate_blocking, request),
            timeout=float(self.options["timeout_seconds"]),
        )

    async def fix_line(self, text: str, line_index: int) -> AltFixResult:
        """
        Generate alt text for the image on one line.

        Args:
            text: Current document text
            line_index: Zero-based index of the image line

        Returns:
            AltFixResult; ``edit`` is set only on success
        """
        snapshot = DocumentSnapshot.from_text(text)
        return await self._fix(snapshot, line_index)

    async def _fix(self, snapshot: DocumentSnapshot, line_index: int) -> AltFixResult:
        request = build_alt_text_request(
            snapshot, line_index, int(self.options["context_lines"])
        )
        if request is None:
            return AltFixResult(
                success=False,
                line_index=line_index,
                error=f"No image without alt text on line {line_index + 1}",
            )

        def failure(message: str) -> AltFixResult:
            return AltFixResult(
                success=False,
                line_index=line_index,
                image_src=request.image_src,
                error=message,
            )

        try:
            raw = await self.generate_alt_text(request)
        except asyncio.TimeoutError:
            logger.warning(f"Alt text generation timed out for {request.image_src}")
            return failure(
                f"Alt text generation timed out after {self.options['timeout_seconds']}s"
            )
        except MissingCredentialsError as e:
            logger.error(str(e))
            return failure(str(e))
        except AltTextGenerationError as e:
            logger.warning(f"Failed to generate alt text for {request.image_src}: {e}")
            return failure(str(e))
        except Exception as e:
            log_exception(logger, e, f"Unexpected error generating alt text for {request.image_src}")
            return failure(f"Failed to generate alt text: {e}")

        decorative = is_decorative_response(raw)
        alt_text = "" if decorative else clean_alt_text(raw)
        if not decorative and not alt_text:
            return failure("Generated alt text was empty")

        edit = compute_alt_text_edit(request.line, line_index, alt_text)
        if edit is None:
            return failure("Could not insert alt attribute into image tag")

        logger.info(f"Generated alt text for {request.image_src}: {alt_text!r}")
        return AltFixResult(
            success=True,
            line_index=line_index,
            image_src=request.image_src,
            alt_text=alt_text,
            decorative=decorative,
            edit=edit,
        )

    async def fix_document(self, text: str) -> List[AltFixResult]:
        """
        Generate alt text for every image line missing it.

        Lines are handled one after another, in document order.

        Args:
            text: Document text

        Returns:
            One result per candidate image line
        """
        snapshot = DocumentSnapshot.from_text(text)
        results = []
        for index, line in enumerate(snapshot.lines):
            if find_image_source(line) is None:
                continue
            results.append(await self._fix(snapshot, index))
        return results

    async def preview_document(self, text: str) -> List[AltFixResult]:
        """Return successful suggestions for the document, without edits."""
        results = await self.fix_document(text)
        return [
            result.model_copy(update={"edit": None})
            for result in results
            if result.success
        ]
