"""README generation for scanned Drupal modules.

Sends the README prompt through a chat client and recovers the document
from the model's free-text reply. Generation never raises: transport
failures and replies without the marker come back as error strings so
that a README file is always produced.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from readme_generator.generators.llm_client import NO_README, ChatClient
from readme_generator.generators.prompt import MARKER, PromptRequest, build_prompt
from readme_generator.generators.template_manager import TemplateManager
from readme_generator.scanner.structure import ModuleRecord

logger = logging.getLogger(__name__)

MARKER_MISSING_MESSAGE = f'Error: "{MARKER}" not found in AI response.'

_MARKER_RE = re.compile(re.escape(MARKER), re.IGNORECASE)


class ExtractionError(str, Enum):
    """Why no README could be recovered."""

    MARKER_MISSING = "marker_missing"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of a README generation.

    Attributes:
        content: The README body, or the error string on failure.
        error: None on success, otherwise the failure kind.
    """

    content: str
    error: Optional[ExtractionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def transport_error_message(error: Exception) -> str:
    return f"Error: {error}"


def find_marker(text: str) -> Optional[int]:
    """Offset of the first case-insensitive marker match, if any."""
    match = _MARKER_RE.search(text)
    return match.start() if match else None


def extract(raw_text: str) -> str:
    """Cut the README out of a model reply.

    Everything before the marker (e.g. "Here is your README:") is
    dropped and the rest is stripped. Without a marker the
    MARKER_MISSING_MESSAGE string is returned.

    Args:
        raw_text: The model's reply.

    Returns:
        The README body or MARKER_MISSING_MESSAGE.
    """
    start = find_marker(raw_text)
    if start is None:
        return MARKER_MISSING_MESSAGE
    return raw_text[start:].strip()


class ReadmeGenerator:
    """Generates README content for a ModuleRecord via a chat client."""

    def __init__(
        self,
        client: ChatClient,
        model: str,
        template_manager: Optional[TemplateManager] = None,
    ) -> None:
        """Initialize the README generator.

        Args:
            client: Transport used for the single chat request.
            model: Model name sent with the request.
            template_manager: Template manager for the prompt.
        """
        self.client = client
        self.model = model
        self.templates = template_manager or TemplateManager()

    def build_request(self, record: ModuleRecord) -> PromptRequest:
        return build_prompt(record, self.model, self.templates)

    def generate(self, record: ModuleRecord) -> ExtractionResult:
        """Request a README for ``record`` and extract it from the reply.

        Args:
            record: Scanned module metadata.

        Returns:
            An ExtractionResult; ``content`` is always a string.
        """
        request = self.build_request(record)

        try:
            raw = self.client.complete(request)
        except Exception as e:
            logger.error("README request failed: %s", e)
            return ExtractionResult(
                content=transport_error_message(e).strip(),
                error=ExtractionError.TRANSPORT,
            )

        if not isinstance(raw, str):
            logger.warning("Model reply was %s, not text", type(raw).__name__)
            raw = NO_README

        if find_marker(raw) is None:
            logger.warning("Model reply did not contain %r", MARKER)
            return ExtractionResult(
                content=MARKER_MISSING_MESSAGE,
                error=ExtractionError.MARKER_MISSING,
            )

        content = extract(raw)
        logger.info("Generated README for %s (%d chars)", record.name, len(content))
        return ExtractionResult(content=content)
