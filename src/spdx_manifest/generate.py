"""One manifest run: filter, collect, assemble and write."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from spdx_manifest.assembler import assemble
from spdx_manifest.collector import collect
from spdx_manifest.config import ManifestConfig
from spdx_manifest.filters import filter_dependencies
from spdx_manifest.identity import LicenseIdentityTable
from spdx_manifest.models import PackageDocument, ProjectModel
from spdx_manifest.reporters.base import BaseReporter
from spdx_manifest.resolvers.base import BaseResolver

logger = logging.getLogger(__name__)


async def generate(
    project: ProjectModel,
    config: ManifestConfig,
    resolver: BaseResolver,
    now: Optional[datetime] = None,
) -> PackageDocument:
    """Build the package document of a project.

    Args:
        project: Scanned root project and its declared dependencies.
        config: Run configuration.
        resolver: Resolver for dependency versions and project models.
        now: Timezone-aware creation instant. Defaults to the current time.

    Returns:
        The assembled document.
    """
    deps = filter_dependencies(project.dependencies, config.included_scopes, config.excludes)
    logger.info(
        "Resolving licenses of %d of %d declared dependencies of %s",
        len(deps),
        len(project.dependencies),
        project.metadata.display_name,
    )

    table = LicenseIdentityTable()
    rows = await collect(deps, config.license_mappings, config.licenses, table, resolver)
    return assemble(project.metadata, rows, table, config, now=now)


def write_document(
    document: PackageDocument,
    reporter: BaseReporter,
    output_dir: Path,
    filename: Optional[str] = None,
) -> Optional[Path]:
    """Write a document, logging instead of raising on failure.

    Report generation is advisory, so a failed write is logged and the
    caller carries on.

    Returns:
        The written path, or None if writing failed.
    """
    output_path = output_dir / (filename or reporter.default_filename(document))
    try:
        reporter.write(document, output_path)
    except OSError as e:
        logger.error("Failed to write %s file %s: %s", reporter.format_name, output_path, e)
        return None

    logger.info("Wrote %s", output_path)
    return output_path
