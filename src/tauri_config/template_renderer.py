"""
Jinja2 rendering of generated source files.

Templates live in the package's `templates/` directory. Autoescaping is off
since the output is Python source, not markup.
"""

import textwrap
from typing import Any, Dict

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from .utils import pascal_case, python_identifier, snake_case


class CodeTemplateRenderer:
    """Renders the package's code templates with source-oriented filters"""

    def __init__(self, package: str = "tauri_config", folder: str = "templates"):
        self.env = Environment(
            loader=PackageLoader(package, folder),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._add_code_filters()

    def _add_code_filters(self):
        """Add filters for emitting docstrings, comments and identifiers"""

        def docstring(text: str, indent: int = 0) -> str:
            """Triple-quoted docstring, indented to sit under a class or attribute"""
            body = text.strip().replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
            if body.endswith('"'):
                body += " "
            prefix = " " * indent
            lines = body.splitlines() or [""]
            if len(lines) == 1:
                return f'{prefix}"""{lines[0]}"""'
            rest = "\n".join((prefix + line) if line.strip() else "" for line in lines[1:])
            return f'{prefix}"""{lines[0]}\n{rest}\n{prefix}"""'

        def comment(text: str, indent: int = 0, width: int = 88) -> str:
            """`# ` prefixed lines, wrapped to `width`"""
            prefix = " " * indent + "# "
            lines = []
            for paragraph in text.strip().splitlines():
                wrapped = textwrap.wrap(
                    paragraph, width - len(prefix), break_long_words=False, break_on_hyphens=False
                ) or [""]
                lines.extend((prefix + line).rstrip() for line in wrapped)
            return "\n".join(lines)

        self.env.filters['docstring'] = docstring
        self.env.filters['comment'] = comment
        self.env.filters['pascal_case'] = pascal_case
        self.env.filters['snake_case'] = snake_case
        self.env.filters['python_identifier'] = python_identifier

    def render_file(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render one of the package templates.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateError(f"Rendering {template_name} failed: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        return self.env.from_string(template_string).render(**context)


# Global renderer instance
_renderer = None

def get_template_renderer() -> CodeTemplateRenderer:
    """Get the global template renderer instance"""
    global _renderer
    if _renderer is None:
        _renderer = CodeTemplateRenderer()
    return _renderer
