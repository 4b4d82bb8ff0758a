"""Collection of dependency licenses.

Walks the filtered dependencies in declaration order, resolves each one to
its newest published project model, applies license overrides and records
every license in the identity table. A dependency that cannot be resolved is
reported with its artifact id and no license; it never aborts the run.
"""

import logging
from collections.abc import Iterable, Sequence

from spdx_manifest.errors import ProjectBuildError, VersionResolutionError
from spdx_manifest.identity import LicenseIdentityTable
from spdx_manifest.models import (
    DependencyRef,
    DependencyRow,
    LicenseInfo,
    LicenseOverride,
)
from spdx_manifest.overrides import expand_tokens, resolve_override
from spdx_manifest.resolvers.base import BaseResolver

logger = logging.getLogger(__name__)


def license_string(
    licenses: Iterable[LicenseInfo], table: LicenseIdentityTable
) -> str:
    """Record licenses in the identity table and join their names.

    The joined string keeps each license's own name in declaration order,
    without deduplication; the table keeps the first name seen per URL.

    Args:
        licenses: Licenses of one dependency.
        table: Identity table of the current run.

    Returns:
        License names joined with ", ".
    """
    names = []
    for license_info in licenses:
        table.get_or_insert(license_info.url, license_info.name)
        names.append(license_info.name)
    return ", ".join(names)


async def dependency_row(
    dep: DependencyRef,
    overrides: Sequence[LicenseOverride],
    user_licenses: Sequence[LicenseInfo],
    table: LicenseIdentityTable,
    resolver: BaseResolver,
) -> DependencyRow:
    """Resolve one dependency into a license row.

    Args:
        dep: Dependency to resolve.
        overrides: Non-external overrides, in configured order.
        user_licenses: User-declared licenses.
        table: Identity table of the current run.
        resolver: Resolver for versions and project models.

    Returns:
        The dependency's row. Falls back to the declared artifact id and an
        empty license string when resolution fails.
    """
    fallback = DependencyRow(display_name=dep.artifact_id, licenses="")

    try:
        versions = await resolver.available_versions(dep)
    except VersionResolutionError as e:
        logger.warning("Unable to retrieve versions for %s from repository: %s", dep.coordinate, e)
        return fallback
    except Exception as e:
        logger.error("Unexpected error retrieving versions for %s: %s", dep.coordinate, e)
        return fallback

    artifact = dep.with_version(versions[-1]) if versions else dep

    try:
        project = await resolver.build_project(artifact)
    except ProjectBuildError as e:
        logger.warning("Unable to create project for %s from repository: %s", artifact.coordinate, e)
        return fallback
    except Exception as e:
        logger.error("Unexpected error building project for %s: %s", artifact.coordinate, e)
        return fallback

    licenses = resolve_override(
        project.group_id, project.artifact_id, overrides, user_licenses
    )
    if licenses is None:
        # Only use the project's own licenses when the user defines none.
        licenses = project.licenses

    return DependencyRow(
        display_name=project.display_name,
        licenses=license_string(licenses, table),
    )


async def collect(
    deps: Sequence[DependencyRef],
    overrides: Sequence[LicenseOverride],
    user_licenses: Sequence[LicenseInfo],
    table: LicenseIdentityTable,
    resolver: BaseResolver,
) -> list[DependencyRow]:
    """Collect license rows for dependencies and external overrides.

    Dependencies are resolved sequentially in the given order. External
    overrides are appended afterwards, one row each, in configured order,
    whether or not any dependency matches them.

    Args:
        deps: Filtered dependencies.
        overrides: All overrides, external ones included.
        user_licenses: User-declared licenses.
        table: Identity table to populate.
        resolver: Resolver for versions and project models.

    Returns:
        One row per dependency followed by one row per external override.
    """
    internal = [o for o in overrides if not o.external]
    external = [o for o in overrides if o.external]

    rows = []
    for dep in deps:
        logger.debug("Collecting licenses for %s", dep.coordinate)
        rows.append(await dependency_row(dep, internal, user_licenses, table, resolver))

    for override in external:
        licenses = expand_tokens(override, user_licenses)
        rows.append(
            DependencyRow(
                display_name=override.artifact_id,
                licenses=license_string(licenses, table),
            )
        )

    logger.info(
        "Collected %d dependency row(s) and %d external row(s), %d distinct license(s)",
        len(deps),
        len(external),
        len(table),
    )
    return rows
