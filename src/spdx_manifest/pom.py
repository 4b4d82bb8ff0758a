"""Minimal Maven POM reader.

Extracts the parts of a ``pom.xml`` needed for license reporting: project
coordinates and name, declared licenses, the parent reference and the
declared dependencies. ``${...}`` placeholders are interpolated from
``<properties>`` and the ``project.*`` built-ins; dependency versions missing
from ``<dependencies>`` are taken from ``<dependencyManagement>``.
"""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

from spdx_manifest.models import DependencyRef, LicenseInfo, ProjectMetadata

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


@dataclass
class ParentRef:
    """Reference to a parent POM."""

    group_id: str
    artifact_id: str
    version: str


@dataclass
class Pom:
    """The license-relevant content of a POM."""

    group_id: str
    artifact_id: str
    version: str
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    packaging: str = "jar"
    licenses: list[LicenseInfo] = field(default_factory=list)
    dependencies: list[DependencyRef] = field(default_factory=list)
    parent: Optional[ParentRef] = None

    def to_metadata(self) -> ProjectMetadata:
        return ProjectMetadata(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self.version,
            name=self.name,
            licenses=list(self.licenses),
            description=self.description,
            url=self.url,
        )


def _strip_namespaces(root: ET.Element) -> None:
    for element in root.iter():
        if isinstance(element.tag, str) and "}" in element.tag:
            element.tag = element.tag.split("}", 1)[1]


def _text(element: Optional[ET.Element], path: str) -> Optional[str]:
    if element is None:
        return None
    child = element.find(path)
    if child is None or child.text is None:
        return None
    text = " ".join(child.text.split())
    return text or None


def _interpolate(value: Optional[str], properties: dict[str, str]) -> Optional[str]:
    if value is None:
        return None

    # Bounded so self-referencing properties cannot loop forever.
    for _ in range(10):
        replaced = _PLACEHOLDER.sub(lambda m: properties.get(m.group(1), m.group(0)), value)
        if replaced == value:
            break
        value = replaced
    return value


def parse_pom(content: bytes, source: str = "pom.xml") -> Pom:
    """Parse POM content.

    Args:
        content: Raw XML of the POM.
        source: Name used in error messages.

    Returns:
        The parsed Pom.

    Raises:
        ValueError: If the XML is invalid or the artifact id is missing.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ValueError(f"Invalid XML in {source}: {e}") from e

    _strip_namespaces(root)
    if root.tag != "project":
        raise ValueError(f"{source} is not a Maven POM (root element <{root.tag}>)")

    parent_element = root.find("parent")
    parent = None
    if parent_element is not None:
        parent_group = _text(parent_element, "groupId")
        parent_artifact = _text(parent_element, "artifactId")
        parent_version = _text(parent_element, "version")
        if parent_group and parent_artifact and parent_version:
            parent = ParentRef(parent_group, parent_artifact, parent_version)

    artifact_id = _text(root, "artifactId")
    if not artifact_id:
        raise ValueError(f"{source} has no <artifactId>")
    group_id = _text(root, "groupId") or (parent.group_id if parent else "")
    version = _text(root, "version") or (parent.version if parent else "")

    properties: dict[str, str] = {}
    props_element = root.find("properties")
    if props_element is not None:
        for prop in props_element:
            if isinstance(prop.tag, str) and prop.text is not None:
                properties[prop.tag] = prop.text.strip()
    properties.update(
        {
            "project.groupId": group_id,
            "project.artifactId": artifact_id,
            "project.version": version,
            "pom.groupId": group_id,
            "pom.artifactId": artifact_id,
            "pom.version": version,
        }
    )
    if parent:
        properties["project.parent.version"] = parent.version
        properties["project.parent.groupId"] = parent.group_id

    licenses = []
    for license_element in root.findall("licenses/license"):
        name = _interpolate(_text(license_element, "name"), properties)
        url = _interpolate(_text(license_element, "url"), properties)
        if name or url:
            licenses.append(LicenseInfo(name=name or url, url=url))

    managed: dict[tuple[str, str], str] = {}
    for dep in root.findall("dependencyManagement/dependencies/dependency"):
        dep_group = _interpolate(_text(dep, "groupId"), properties)
        dep_artifact = _interpolate(_text(dep, "artifactId"), properties)
        dep_version = _interpolate(_text(dep, "version"), properties)
        if dep_group and dep_artifact and dep_version:
            managed[(dep_group, dep_artifact)] = dep_version

    dependencies = []
    for dep in root.findall("dependencies/dependency"):
        dep_group = _interpolate(_text(dep, "groupId"), properties)
        dep_artifact = _interpolate(_text(dep, "artifactId"), properties)
        if not dep_group or not dep_artifact:
            raise ValueError(f"Dependency without groupId/artifactId in {source}")
        dep_version = _interpolate(_text(dep, "version"), properties)
        if not dep_version:
            dep_version = managed.get((dep_group, dep_artifact), "")
        dependencies.append(
            DependencyRef(
                group_id=dep_group,
                artifact_id=dep_artifact,
                version=dep_version,
                scope=_text(dep, "scope"),
            )
        )

    return Pom(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        name=_interpolate(_text(root, "name"), properties),
        description=_text(root, "description"),
        url=_interpolate(_text(root, "url"), properties),
        packaging=_text(root, "packaging") or "jar",
        licenses=licenses,
        dependencies=dependencies,
        parent=parent,
    )
