"""Scanner for Maven pom.xml files."""

import logging
from pathlib import Path

from spdx_manifest.models import ProjectModel
from spdx_manifest.pom import parse_pom
from spdx_manifest.scanners.base import BaseScanner

logger = logging.getLogger(__name__)


class PomScanner(BaseScanner):
    """Scanner for Maven POM files.

    Reads the project's own coordinates, name and licenses and the
    dependencies declared in its ``<dependencies>`` section. Dependencies
    whose version cannot be determined are kept with an empty version; the
    resolver then pins them to the newest available one.
    """

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        """Return True for ``pom.xml`` and ``*.pom`` files."""
        return path.name == "pom.xml" or path.suffix == ".pom"

    @property
    def source_name(self) -> str:
        return "pom.xml"

    def scan(self) -> ProjectModel:
        """Scan the POM and extract the project model.

        Raises:
            FileNotFoundError: If the POM does not exist.
            ValueError: If source_path is not provided or the POM is invalid.
        """
        pom = parse_pom(self._read_source(), source=str(self.source_path))

        for dep in pom.dependencies:
            if not dep.version:
                logger.warning("No version declared for %s:%s", dep.group_id, dep.artifact_id)

        return ProjectModel(metadata=pom.to_metadata(), dependencies=pom.dependencies)
