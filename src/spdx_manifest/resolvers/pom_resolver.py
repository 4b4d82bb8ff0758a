"""Shared logic for resolvers backed by Maven repository layouts.

Both the local repository and remote repositories store an artifact's
``maven-metadata.xml`` and POM files at predictable paths. Subclasses only
provide the fetching; parsing, version ordering and license inheritance
from parent POMs live here.
"""

import logging
import xml.etree.ElementTree as ET
from abc import abstractmethod
from typing import Optional

from spdx_manifest.errors import ProjectBuildError, VersionResolutionError
from spdx_manifest.models import DependencyRef, LicenseInfo, ProjectMetadata
from spdx_manifest.pom import Pom, parse_pom
from spdx_manifest.resolvers.base import BaseResolver, version_sort_key

logger = logging.getLogger(__name__)

MAX_PARENT_DEPTH = 5


def artifact_path(group_id: str, artifact_id: str) -> str:
    """Return the repository-relative directory of an artifact."""
    return f"{group_id.replace('.', '/')}/{artifact_id}"


def pom_path(group_id: str, artifact_id: str, version: str) -> str:
    """Return the repository-relative path of an artifact's POM."""
    return f"{artifact_path(group_id, artifact_id)}/{version}/{artifact_id}-{version}.pom"


def parse_metadata_versions(content: bytes) -> list[str]:
    """Parse the version list of a ``maven-metadata.xml`` document.

    Returns:
        Versions ordered oldest to newest.

    Raises:
        ValueError: If the document is not valid XML.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ValueError(f"Invalid maven-metadata.xml: {e}") from e

    versions = {
        element.text.strip()
        for element in root.iterfind("versioning/versions/version")
        if element.text and element.text.strip()
    }
    return sorted(versions, key=version_sort_key)


class PomResolver(BaseResolver):
    """Resolver reading metadata and POMs from a Maven repository layout."""

    @abstractmethod
    async def fetch_metadata(self, group_id: str, artifact_id: str) -> Optional[bytes]:
        """Fetch an artifact's maven-metadata.xml.

        Returns:
            The raw document, or None if the repository has none.

        Raises:
            VersionResolutionError: If the repository cannot be read.
        """
        ...

    @abstractmethod
    async def fetch_pom(self, group_id: str, artifact_id: str, version: str) -> Optional[bytes]:
        """Fetch an artifact's POM.

        Returns:
            The raw POM, or None if the repository has none.

        Raises:
            ProjectBuildError: If the repository cannot be read.
        """
        ...

    async def available_versions(self, dep: DependencyRef) -> list[str]:
        """Return the versions listed in the artifact's metadata.

        A missing metadata document yields an empty list, so the declared
        version is used as is.
        """
        content = await self.fetch_metadata(dep.group_id, dep.artifact_id)
        if content is None:
            logger.debug("%s: no version metadata for %s", self.name, dep.coordinate)
            return []

        try:
            return parse_metadata_versions(content)
        except ValueError as e:
            raise VersionResolutionError(dep.coordinate, str(e)) from e

    async def build_project(self, dep: DependencyRef) -> ProjectMetadata:
        """Build project metadata from the artifact's POM.

        Licenses missing from the POM are inherited from the nearest parent
        POM that declares some.
        """
        if not dep.version:
            raise ProjectBuildError(dep.coordinate, "no version to resolve")

        pom = await self._load_pom(dep.group_id, dep.artifact_id, dep.version)
        if pom is None:
            raise ProjectBuildError(dep.coordinate, f"POM not found in {self.name}")

        metadata = pom.to_metadata()
        if not metadata.licenses:
            metadata.licenses = await self._inherited_licenses(pom)
        return metadata

    async def _load_pom(self, group_id: str, artifact_id: str, version: str) -> Optional[Pom]:
        coordinate = f"{group_id}:{artifact_id}:{version}"
        content = await self.fetch_pom(group_id, artifact_id, version)
        if content is None:
            return None

        try:
            return parse_pom(content, source=coordinate)
        except ValueError as e:
            raise ProjectBuildError(coordinate, str(e)) from e

    async def _inherited_licenses(self, pom: Pom) -> list[LicenseInfo]:
        parent = pom.parent
        for _ in range(MAX_PARENT_DEPTH):
            if parent is None:
                break
            try:
                parent_pom = await self._load_pom(
                    parent.group_id, parent.artifact_id, parent.version
                )
            except ProjectBuildError as e:
                logger.debug("Unable to read parent POM: %s", e)
                break
            if parent_pom is None:
                break
            if parent_pom.licenses:
                return list(parent_pom.licenses)
            parent = parent_pom.parent
        return []
