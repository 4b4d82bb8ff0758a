"""Pytest configuration and fixtures."""

from datetime import UTC, datetime
from typing import Optional

import pytest

from spdx_manifest.errors import ProjectBuildError, VersionResolutionError
from spdx_manifest.models import DependencyRef, LicenseInfo, ProjectMetadata
from spdx_manifest.resolvers.base import BaseResolver

APACHE_URL = "http://www.apache.org/licenses/LICENSE-2.0.txt"
MIT_URL = "https://opensource.org/licenses/MIT"


class FakeResolver(BaseResolver):
    """In-memory resolver recording every lookup.

    Attributes:
        versions: (group, artifact) -> versions, oldest first.
        projects: (group, artifact, version) -> project metadata.
        failing_versions: (group, artifact) pairs whose version lookup fails.
        calls: Lookups performed, in order.
    """

    def __init__(
        self,
        projects: Optional[list[ProjectMetadata]] = None,
        versions: Optional[dict[tuple[str, str], list[str]]] = None,
        failing_versions: Optional[set[tuple[str, str]]] = None,
    ) -> None:
        self.projects = {
            (p.group_id, p.artifact_id, p.version): p for p in (projects or [])
        }
        self.versions = versions or {}
        self.failing_versions = failing_versions or set()
        self.calls: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return "fake"

    async def available_versions(self, dep: DependencyRef) -> list[str]:
        self.calls.append(("versions", dep.coordinate))
        if (dep.group_id, dep.artifact_id) in self.failing_versions:
            raise VersionResolutionError(dep.coordinate, "repository unavailable")
        return list(self.versions.get((dep.group_id, dep.artifact_id), []))

    async def build_project(self, dep: DependencyRef) -> ProjectMetadata:
        self.calls.append(("project", dep.coordinate))
        project = self.projects.get((dep.group_id, dep.artifact_id, dep.version))
        if project is None:
            raise ProjectBuildError(dep.coordinate, "not found")
        return project


@pytest.fixture
def apache() -> LicenseInfo:
    return LicenseInfo(name="The Apache Software License, Version 2.0", url=APACHE_URL)


@pytest.fixture
def mit() -> LicenseInfo:
    return LicenseInfo(name="MIT License", url=MIT_URL)


@pytest.fixture
def fixed_now() -> datetime:
    """Return a fixed creation instant."""
    return datetime(2024, 3, 5, 14, 7, 9, tzinfo=UTC)


@pytest.fixture
def fake_resolver_cls() -> type[FakeResolver]:
    return FakeResolver
