"""Template manager for loading and rendering Jinja2 prompt templates.

Provides a centralized interface for rendering the README prompt from
the Jinja2 templates shipped in the package's templates/ directory.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

README_TEMPLATE = "readme.j2"


class TemplateManager:
    """Loads and renders Jinja2 prompt templates.

    Templates are loaded from a configurable directory. Undefined
    variables raise instead of rendering as empty strings.
    """

    def __init__(self, templates_dir: Optional[str] = None) -> None:
        """Initialize the template manager.

        Args:
            templates_dir: Path to the templates directory. Uses the
                packaged templates/ directory if not specified.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        logger.debug("Template manager initialized with: %s", self._templates_path)

    def render_readme_prompt(
        self,
        module_data: str,
        marker: str,
        sections: Sequence[str],
    ) -> str:
        """Render the README generation prompt.

        Args:
            module_data: Serialized module record, spliced in verbatim.
            marker: Line the model must start its answer with.
            sections: README section titles, in order.

        Returns:
            Rendered prompt string ready for LLM submission.
        """
        return self._render(
            README_TEMPLATE,
            module_data=module_data,
            marker=marker,
            sections=list(sections),
        )

    def _render(self, template_name: str, **kwargs: Any) -> str:
        """Render a template with the given context variables.

        Raises:
            TemplateNotFound: If the template file does not exist.
        """
        template = self._env.get_template(template_name)
        rendered = template.render(**kwargs)
        logger.debug("Rendered template %s (%d chars)", template_name, len(rendered))
        return rendered

    def list_templates(self) -> list[str]:
        """List all available template files."""
        return self._env.list_templates()
