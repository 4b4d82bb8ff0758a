"""Output reporters for rendering package documents.

This module provides reporters for writing the assembled document as SPDX
RDF/XML and as a Markdown attribution file.
"""

from spdx_manifest.reporters.base import BaseReporter
from spdx_manifest.reporters.markdown import MarkdownReporter
from spdx_manifest.reporters.spdx_rdf import SpdxRdfReporter

__all__ = ["BaseReporter", "MarkdownReporter", "SpdxRdfReporter"]
