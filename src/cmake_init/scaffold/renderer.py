"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``scaffold/templates/`` directory and renders them with the data mapping
of a ResolvedConfiguration. Rendering is a pure function of the template
and the data; nothing is kept between calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders the ``.j2`` templates that make up a scaffold.

    Undefined variables are errors rather than empty strings, and output
    is never escaped, so the project name reaches every file verbatim.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, data: dict[str, Any]) -> str:
        """Render a single template with the provided data.

        Args:
            template_name: Path relative to the template directory (e.g.
                ``"CMakeLists.txt.j2"``).
            data: Variables available inside the template.

        Returns:
            The rendered template content.
        """
        template = self.env.get_template(template_name)
        return template.render(**data)

    def render_string(self, template_text: str, data: dict[str, Any]) -> str:
        """Render an inline template string with the provided data."""
        template = self.env.from_string(template_text)
        return template.render(**data)
