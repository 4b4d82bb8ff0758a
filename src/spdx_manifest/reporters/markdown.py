"""Markdown reporter for license attribution files.

This module provides a reporter that lists each dependency with its license
names and each distinct license with its text URL and SPDX identifier,
using Jinja2 templates.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from spdx_manifest.licenses import to_spdx_id
from spdx_manifest.models import PackageDocument
from spdx_manifest.reporters.base import BaseReporter, load_bundled_template


def table_cell(value: object) -> str:
    """Escape pipes so a value stays inside its Markdown table cell."""
    return str(value).replace("|", "\\|")


class MarkdownReporter(BaseReporter):
    """Reporter that generates Markdown license attribution files.

    Attributes:
        template: The Jinja2 template to use for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the Markdown reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the default bundled template.
        """
        options = dict(autoescape=True, trim_blocks=True, lstrip_blocks=True)
        loader = FileSystemLoader(template_path.parent) if template_path else None
        env = Environment(loader=loader, **options)
        env.filters["spdx_id"] = to_spdx_id
        env.filters["md_cell"] = table_cell

        if template_path:
            self.template = env.get_template(template_path.name)
        else:
            self.template = load_bundled_template(env, "licenses.md.j2")

    def render(self, document: PackageDocument) -> str:
        return self.template.render(document=document)

    @property
    def format_name(self) -> str:
        return "markdown"

    @property
    def default_extension(self) -> str:
        return ".md"
