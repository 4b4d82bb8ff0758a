"""Resolver for the local Maven repository (``~/.m2/repository``)."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from spdx_manifest.errors import ProjectBuildError, VersionResolutionError
from spdx_manifest.resolvers.pom_resolver import PomResolver, artifact_path, pom_path

logger = logging.getLogger(__name__)

DEFAULT_LOCAL_REPOSITORY = Path.home() / ".m2" / "repository"


class LocalRepositoryResolver(PomResolver):
    """Resolver reading POMs from a local Maven repository.

    The local repository does not always carry a ``maven-metadata.xml``;
    when it is missing, the version directories that contain a POM are
    listed instead.

    Attributes:
        root: Root directory of the repository.
    """

    METADATA_FILES = ("maven-metadata.xml", "maven-metadata-local.xml", "maven-metadata-central.xml")

    def __init__(self, root: Path = DEFAULT_LOCAL_REPOSITORY) -> None:
        self.root = root

    @property
    def name(self) -> str:
        return f"local repository {self.root}"

    async def fetch_metadata(self, group_id: str, artifact_id: str) -> Optional[bytes]:
        directory = self.root / artifact_path(group_id, artifact_id)
        if not directory.is_dir():
            return None

        try:
            for filename in self.METADATA_FILES:
                path = directory / filename
                if path.is_file():
                    return path.read_bytes()

            versions = sorted(
                child.name
                for child in directory.iterdir()
                if child.is_dir() and (child / f"{artifact_id}-{child.name}.pom").is_file()
            )
        except OSError as e:
            raise VersionResolutionError(f"{group_id}:{artifact_id}", str(e)) from e

        if not versions:
            return None
        return self._metadata_document(versions)

    async def fetch_pom(self, group_id: str, artifact_id: str, version: str) -> Optional[bytes]:
        path = self.root / pom_path(group_id, artifact_id, version)
        if not path.is_file():
            return None

        try:
            return path.read_bytes()
        except OSError as e:
            raise ProjectBuildError(f"{group_id}:{artifact_id}:{version}", str(e)) from e

    @staticmethod
    def _metadata_document(versions: list[str]) -> bytes:
        metadata = ET.Element("metadata")
        versions_element = ET.SubElement(ET.SubElement(metadata, "versioning"), "versions")
        for version in versions:
            ET.SubElement(versions_element, "version").text = version
        return ET.tostring(metadata)
