"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering. Generators
keep their fixed text (such as the generated-file banner) as in-memory
templates that a template directory can override.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        builtin_templates: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize template engine.

        Args:
            template_dir: Directory whose templates take precedence
            builtin_templates: In-memory templates used as fallback
        """
        self.template_dir = Path(template_dir) if template_dir else None
        self._builtins = DictLoader(dict(builtin_templates or {}))
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment."""
        loaders = []
        if self.template_dir:
            if not self.template_dir.is_dir():
                raise TemplateError(f"Template directory not found: {self.template_dir}")
            loaders.append(FileSystemLoader(str(self.template_dir)))
        loaders.append(self._builtins)

        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._env.filters["csharp_string"] = csharp_string_literal

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """Add or replace an in-memory template."""
        self._builtins.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.list_templates()


def csharp_string_literal(value: Any) -> str:
    """Quote a value as a regular C# string literal."""
    text = str(value)
    text = text.replace("\\", "\\\\").replace('"', '\\"')
    text = text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
    return f'"{text}"'


def create_template_engine(
    template_dir: Optional[Path] = None,
    builtin_templates: Optional[Dict[str, str]] = None,
) -> TemplateEngine:
    """Create a template engine instance."""
    return TemplateEngine(template_dir, builtin_templates)
