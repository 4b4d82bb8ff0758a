"""Assembly of the SPDX package document.

Combines the root project metadata, the collected dependency rows and the
license identity table into a PackageDocument, applying the SPDX fallbacks
for required fields. No I/O happens here; apart from the creation timestamp
the result depends only on the inputs.
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Optional

from spdx_manifest import __version__
from spdx_manifest.config import ManifestConfig
from spdx_manifest.identity import LicenseIdentityTable
from spdx_manifest.models import (
    NONE,
    NOASSERTION,
    DeclaredLicense,
    DependencyRow,
    LicenseInfo,
    PackageDocument,
    ProjectMetadata,
)

TOOL = f"Tool: spdx-manifest-{__version__}"


def declared_license(licenses: Sequence[LicenseInfo]) -> DeclaredLicense:
    """Build the declared license from the project's licenses, in order."""
    return DeclaredLicense(members=tuple(lic.name for lic in licenses))


def utc_now() -> datetime:
    """Return the current instant in UTC, truncated to seconds."""
    return datetime.now(UTC).replace(microsecond=0)


def assemble(
    project: ProjectMetadata,
    rows: Sequence[DependencyRow],
    table: LicenseIdentityTable,
    config: ManifestConfig,
    now: Optional[datetime] = None,
) -> PackageDocument:
    """Assemble the package document for a project.

    Args:
        project: Root project metadata.
        rows: Collected dependency rows.
        table: Identity table populated by the collector.
        config: Run configuration (originator, download location, ...).
        now: Creation instant. Must be timezone-aware. Defaults to the
            current time.

    Returns:
        The assembled document.

    Raises:
        ValueError: If now is a naive datetime.
    """
    if now is not None and now.tzinfo is None:
        raise ValueError("now must be a timezone-aware datetime")
    created = (now or utc_now()).astimezone(UTC).replace(microsecond=0)

    return PackageDocument(
        package_name=project.display_name,
        created=created,
        tool=TOOL,
        declared_license=declared_license(project.licenses),
        license_info_from_files=table.names(),
        originator=config.originator or None,
        download_location=config.download_location or NONE,
        concluded_license=NOASSERTION,
        copyright_text=config.copyright_text or NOASSERTION,
        rows=list(rows),
        license_links=table.links(),
    )
