"""SPDX RDF/XML reporter.

Renders a PackageDocument as an SPDX 1.2 document in RDF/XML using the
bundled ``spdx.rdf.j2`` template. Values are XML-escaped.
"""

from jinja2 import Environment

from spdx_manifest.models import PackageDocument
from spdx_manifest.reporters.base import BaseReporter, load_bundled_template


class SpdxRdfReporter(BaseReporter):
    """Reporter that generates SPDX RDF/XML package documents."""

    def __init__(self) -> None:
        env = Environment(
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = load_bundled_template(env, "spdx.rdf.j2")

    def render(self, document: PackageDocument) -> str:
        return self.template.render(document=document)

    def default_filename(self, document: PackageDocument) -> str:
        return document.filename

    @property
    def format_name(self) -> str:
        return "spdx-rdf"

    @property
    def default_extension(self) -> str:
        return ".rdf"
