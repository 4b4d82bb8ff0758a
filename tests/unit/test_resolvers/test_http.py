"""Unit tests for the remote Maven repository resolver."""

from typing import AsyncGenerator

import pytest
from aiohttp import ClientConnectionError
from aioresponses import aioresponses

from spdx_manifest.errors import ProjectBuildError, VersionResolutionError
from spdx_manifest.models import DependencyRef, LicenseInfo
from spdx_manifest.resolvers.http import MavenRepositoryResolver

REPO = "https://repo.example.com/maven2"
BASE = f"{REPO}/org/acme/widget"

METADATA = b"""<?xml version="1.0" encoding="UTF-8"?>
<metadata>
  <groupId>org.acme</groupId>
  <artifactId>widget</artifactId>
  <versioning>
    <latest>1.10.0</latest>
    <release>1.10.0</release>
    <versions>
      <version>1.9.0</version>
      <version>1.10.0</version>
      <version>1.10.0-RC1</version>
      <version>1.2.0</version>
    </versions>
  </versioning>
</metadata>
"""

POM = b"""<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <parent>
    <groupId>org.acme</groupId>
    <artifactId>acme-parent</artifactId>
    <version>7</version>
  </parent>
  <artifactId>widget</artifactId>
  <version>1.10.0</version>
  <name>Acme Widget</name>
</project>
"""

PARENT_POM = b"""<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <groupId>org.acme</groupId>
  <artifactId>acme-parent</artifactId>
  <version>7</version>
  <packaging>pom</packaging>
  <licenses>
    <license>
      <name>Apache License, Version 2.0</name>
      <url>https://www.apache.org/licenses/LICENSE-2.0.txt</url>
    </license>
  </licenses>
</project>
"""


@pytest.fixture
async def resolver() -> AsyncGenerator[MavenRepositoryResolver, None]:
    """Return a MavenRepositoryResolver instance for testing."""
    resolver = MavenRepositoryResolver(REPO + "/")
    yield resolver
    await resolver.close()


@pytest.fixture
def dep() -> DependencyRef:
    return DependencyRef(group_id="org.acme", artifact_id="widget", version="1.2.0")


@pytest.mark.asyncio
async def test_available_versions_sorted(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/maven-metadata.xml", body=METADATA)

        versions = await resolver.available_versions(dep)

    assert versions == ["1.2.0", "1.9.0", "1.10.0-RC1", "1.10.0"]


@pytest.mark.asyncio
async def test_missing_metadata_yields_no_versions(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/maven-metadata.xml", status=404)

        assert await resolver.available_versions(dep) == []


@pytest.mark.asyncio
async def test_server_error_raises_version_resolution_error(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/maven-metadata.xml", status=503)

        with pytest.raises(VersionResolutionError):
            await resolver.available_versions(dep)


@pytest.mark.asyncio
async def test_network_error_raises_version_resolution_error(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/maven-metadata.xml", exception=ClientConnectionError("refused"))

        with pytest.raises(VersionResolutionError, match="refused"):
            await resolver.available_versions(dep)


@pytest.mark.asyncio
async def test_build_project_inherits_parent_licenses(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/1.10.0/widget-1.10.0.pom", body=POM)
        mock.get(f"{REPO}/org/acme/acme-parent/7/acme-parent-7.pom", body=PARENT_POM)

        project = await resolver.build_project(dep.with_version("1.10.0"))

    assert project.display_name == "Acme Widget"
    assert project.version == "1.10.0"
    assert project.licenses == [
        LicenseInfo(
            name="Apache License, Version 2.0",
            url="https://www.apache.org/licenses/LICENSE-2.0.txt",
        )
    ]


@pytest.mark.asyncio
async def test_build_project_without_reachable_parent(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/1.10.0/widget-1.10.0.pom", body=POM)
        mock.get(f"{REPO}/org/acme/acme-parent/7/acme-parent-7.pom", status=404)

        project = await resolver.build_project(dep.with_version("1.10.0"))

    assert project.licenses == []


@pytest.mark.asyncio
async def test_build_project_missing_pom(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/1.2.0/widget-1.2.0.pom", status=404)

        with pytest.raises(ProjectBuildError, match="org.acme:widget:1.2.0"):
            await resolver.build_project(dep)


@pytest.mark.asyncio
async def test_build_project_invalid_pom(resolver, dep):
    with aioresponses() as mock:
        mock.get(f"{BASE}/1.2.0/widget-1.2.0.pom", body=b"<html>oops")

        with pytest.raises(ProjectBuildError, match="Invalid XML"):
            await resolver.build_project(dep)


@pytest.mark.asyncio
async def test_build_project_requires_version(resolver):
    with pytest.raises(ProjectBuildError):
        await resolver.build_project(DependencyRef("org.acme", "widget", ""))
