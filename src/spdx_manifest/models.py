"""Core data models for spdx_manifest.

This module defines the data structures shared by the scanners, resolvers,
the license collection engine and the reporters: dependency coordinates,
license declarations, user overrides, resolved project metadata and the
assembled SPDX package document.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

DEFAULT_SCOPE = "runtime"

# SPDX sentinel values
NONE = "NONE"
NOASSERTION = "NOASSERTION"

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class DependencyRef:
    """Immutable reference to a declared dependency.

    Frozen for hashability so references can be used as dictionary keys.

    Attributes:
        group_id: Maven group identifier (e.g., "org.apache.commons").
        artifact_id: Artifact identifier (e.g., "commons-lang3").
        version: Declared version string.
        scope: Declared scope, or None when the declaration omits it.
    """

    group_id: str
    artifact_id: str
    version: str
    scope: Optional[str] = None

    @property
    def effective_scope(self) -> str:
        """Return the lower-cased scope, defaulting to "runtime"."""
        return self.scope.lower() if self.scope else DEFAULT_SCOPE

    @property
    def coordinate(self) -> str:
        """Return the "group:artifact:version" coordinate."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def with_version(self, version: str) -> "DependencyRef":
        """Return a copy of this reference pinned to another version."""
        return DependencyRef(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=version,
            scope=self.scope,
        )


@dataclass(frozen=True)
class LicenseInfo:
    """A license as declared by a package or by the user.

    Attributes:
        name: Human-readable license name (e.g., "The MIT License").
        url: Optional URL of the license text. Used as the license identity.
        token: Optional identifying token. Set on user-declared licenses so
            overrides can reference them.
    """

    name: str
    url: Optional[str] = None
    token: Optional[str] = None


@dataclass(frozen=True)
class LicenseOverride:
    """User-supplied replacement of a dependency's declared licenses.

    Exactly one of ``artifact_id`` and ``group_id`` is the match key. An
    external override names a library that is not part of the resolved
    dependency graph but must still be listed, so it needs an artifact id.

    Attributes:
        license_tokens: Comma-separated tokens of user-declared licenses.
        artifact_id: Artifact id to match exactly.
        group_id: Group id to match exactly.
        external: True if the override describes a library outside the graph.
    """

    license_tokens: str
    artifact_id: Optional[str] = None
    group_id: Optional[str] = None
    external: bool = False

    def __post_init__(self) -> None:
        if bool(self.artifact_id) == bool(self.group_id):
            raise ValueError(
                "License override must set exactly one of artifact_id or group_id "
                f"(artifact_id={self.artifact_id!r}, group_id={self.group_id!r})"
            )
        if self.external and not self.artifact_id:
            raise ValueError(
                f"External license override for group {self.group_id!r} "
                "must be keyed by artifact_id"
            )

    @property
    def tokens(self) -> frozenset[str]:
        """Return the set of trimmed, non-empty license tokens."""
        return frozenset(
            token.strip() for token in self.license_tokens.split(",") if token.strip()
        )

    def matches(self, group_id: str, artifact_id: str) -> bool:
        """Check whether this override applies to the given artifact.

        Args:
            group_id: Group id of the resolved artifact.
            artifact_id: Artifact id of the resolved artifact.

        Returns:
            True on an exact group match when the override is group-keyed,
            otherwise on an exact artifact match.
        """
        if self.group_id is not None:
            return self.group_id == group_id
        return self.artifact_id == artifact_id


@dataclass
class ProjectMetadata:
    """Metadata of a project as returned by a resolver.

    Attributes:
        group_id: Group id of the project.
        artifact_id: Artifact id of the project.
        version: Resolved version.
        name: Optional human-readable project name.
        licenses: Licenses declared by the project, in declaration order.
        description: Optional project description.
        url: Optional project homepage.
    """

    group_id: str
    artifact_id: str
    version: str
    name: Optional[str] = None
    licenses: list[LicenseInfo] = field(default_factory=list)
    description: Optional[str] = None
    url: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Return the project name, falling back to the artifact id."""
        return self.name or self.artifact_id


@dataclass
class ProjectModel:
    """A scanned root project together with its declared dependencies."""

    metadata: ProjectMetadata
    dependencies: list[DependencyRef] = field(default_factory=list)


@dataclass(frozen=True)
class DependencyRow:
    """One line of the dependency license listing.

    Attributes:
        display_name: Project name of the dependency (or its artifact id).
        licenses: License names joined with ", " in declaration order.
    """

    display_name: str
    licenses: str


@dataclass(frozen=True)
class NotComputed:
    """Marker for a document field this tool does not compute."""

    reason: str


@dataclass(frozen=True)
class DeclaredLicense:
    """Declared license of the root package.

    Rendered as NONE when empty, a single reference for one member, and a
    conjunctive license set otherwise.
    """

    members: tuple[str, ...] = ()

    @property
    def is_none(self) -> bool:
        return not self.members

    @property
    def is_single(self) -> bool:
        return len(self.members) == 1

    @property
    def is_conjunctive(self) -> bool:
        return len(self.members) > 1


@dataclass
class PackageDocument:
    """Assembled SPDX package document, ready to be rendered.

    Attributes:
        package_name: Name of the root package.
        created: Creation instant, in UTC, at second precision.
        tool: Creator tool identifier.
        declared_license: Declared license of the root package.
        license_info_from_files: License names in first-seen order.
        originator: Optional originator ("Person: ..." / "Organization: ...").
        download_location: Download location or the NONE sentinel.
        concluded_license: Always NOASSERTION.
        copyright_text: Copyright text or NOASSERTION.
        verification_code: Package verification code.
        verification_excluded_files: Files excluded from the verification code.
        file_information: Per-file license information.
        reviewers: Reviewer information.
        rows: Dependency license rows.
        license_links: (name, url) pairs in first-seen order.
    """

    package_name: str
    created: datetime
    tool: str
    declared_license: DeclaredLicense
    license_info_from_files: list[str] = field(default_factory=list)
    originator: Optional[str] = None
    download_location: str = NONE
    concluded_license: str = NOASSERTION
    copyright_text: str = NOASSERTION
    verification_code: Union[str, NotComputed] = NotComputed("file hashing is not performed")
    verification_excluded_files: Union[str, NotComputed] = NotComputed(
        "file hashing is not performed"
    )
    file_information: NotComputed = NotComputed("per-file license detection is not performed")
    reviewers: NotComputed = NotComputed("reviewer information is not generated")
    rows: list[DependencyRow] = field(default_factory=list)
    license_links: list[tuple[str, Optional[str]]] = field(default_factory=list)

    @property
    def created_text(self) -> str:
        """Return the creation timestamp as yyyy-MM-ddTHH:mm:ssZ."""
        return self.created.strftime(TIMESTAMP_FORMAT)

    @property
    def filename(self) -> str:
        """Return the conventional output filename for this document."""
        return f"{self.package_name}.rdf"
