"""SPDX Manifest - License manifests for Maven dependency graphs.

This package resolves the licenses of a project's dependencies and
generates an SPDX package document describing them.
"""

__version__ = "0.1.0"

from spdx_manifest.models import (
    DependencyRef,
    DependencyRow,
    LicenseInfo,
    LicenseOverride,
    PackageDocument,
    ProjectMetadata,
)

__all__ = [
    "__version__",
    "DependencyRef",
    "DependencyRow",
    "LicenseInfo",
    "LicenseOverride",
    "PackageDocument",
    "ProjectMetadata",
]
