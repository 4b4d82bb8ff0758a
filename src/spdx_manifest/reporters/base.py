"""Base interface for output reporters.

Reporters render an assembled PackageDocument to text (SPDX RDF/XML,
Markdown, ...) and write it to disk.
"""

from abc import ABC, abstractmethod
from importlib.resources import files
from pathlib import Path

from jinja2 import Environment, Template

from spdx_manifest.models import PackageDocument


class BaseReporter(ABC):
    """Abstract base class for output reporters."""

    @abstractmethod
    def render(self, document: PackageDocument) -> str:
        """Render a package document.

        Args:
            document: The assembled document.

        Returns:
            Rendered output as a string.
        """
        ...

    def write(self, document: PackageDocument, output_path: Path) -> None:
        """Render and write output to a file, creating parent directories.

        Raises:
            OSError: If the file cannot be written.
        """
        content = self.render(document)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")

    def default_filename(self, document: PackageDocument) -> str:
        """Return the conventional filename for a document in this format."""
        return f"{document.package_name}{self.default_extension}"

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name, like "spdx-rdf" or "markdown"."""
        ...

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Return the default file extension, like ".rdf" or ".md"."""
        ...


def load_bundled_template(env: Environment, name: str) -> Template:
    """Load a template shipped in the spdx_manifest.templates package."""
    template_content = (
        files("spdx_manifest.templates").joinpath(name).read_text(encoding="utf-8")
    )
    return env.from_string(template_content)
