"""Prompt construction for README generation.

Serializes a ModuleRecord and splices it into the fixed README
instruction template.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from readme_generator.generators.template_manager import README_TEMPLATE, TemplateManager
from readme_generator.scanner.structure import ModuleRecord

MARKER = "CONTENTS OF THIS FILE"

README_SECTIONS: tuple[str, ...] = (
    "Introduction",
    "Requirements",
    "Installation",
    "Recommended modules",
    "Configuration",
    "Maintainers",
)

MAX_TOKENS = 500


@dataclass(frozen=True)
class PromptRequest:
    """A fully built chat request.

    Attributes:
        model: Model name to send.
        prompt: Rendered user message.
        serialized_record: The JSON record embedded in ``prompt``.
        template: Name of the instruction template used.
        max_tokens: Completion token bound.
    """

    model: str
    prompt: str
    serialized_record: str
    template: str = README_TEMPLATE
    max_tokens: int = MAX_TOKENS

    def payload(self) -> dict[str, Any]:
        """Chat-completion JSON body for this request."""
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": self.prompt}],
            "max_tokens": self.max_tokens,
        }


def serialize_record(record: ModuleRecord) -> str:
    """Pretty-print a record as JSON, keeping field order."""
    return json.dumps(record.to_dict(), indent=4, ensure_ascii=False)


def build_prompt(
    record: ModuleRecord,
    model: str,
    templates: Optional[TemplateManager] = None,
) -> PromptRequest:
    """Build the README request for a scanned module.

    Args:
        record: The scanned module.
        model: Model name for the request.
        templates: Template manager; a default one is created if omitted.

    Returns:
        The PromptRequest.
    """
    templates = templates or TemplateManager()
    serialized = serialize_record(record)
    prompt = templates.render_readme_prompt(
        module_data=serialized,
        marker=MARKER,
        sections=README_SECTIONS,
    )
    return PromptRequest(model=model, prompt=prompt, serialized_record=serialized)
