"""Project resolvers for fetching dependency metadata.

This module provides resolvers for reading project models (name and
licenses) of dependencies from the local Maven repository and remote Maven
repositories.
"""

from spdx_manifest.resolvers.base import BaseResolver, version_sort_key
from spdx_manifest.resolvers.http import MAVEN_CENTRAL, MavenRepositoryResolver
from spdx_manifest.resolvers.local import LocalRepositoryResolver
from spdx_manifest.resolvers.pom_resolver import PomResolver
from spdx_manifest.resolvers.waterfall import WaterfallResolver

__all__ = [
    "MAVEN_CENTRAL",
    "BaseResolver",
    "LocalRepositoryResolver",
    "MavenRepositoryResolver",
    "PomResolver",
    "WaterfallResolver",
    "version_sort_key",
]
