"""Waterfall resolver chaining several resolvers in order.

The usual chain is the local Maven repository followed by a remote
repository: artifacts already downloaded by the build are read from disk and
only the rest go over the network. Resolved project models are stored in the
optional cache.
"""

import logging
from collections.abc import Sequence
from typing import Optional

from spdx_manifest.cache import ProjectCache
from spdx_manifest.errors import ProjectBuildError, ResolutionError, VersionResolutionError
from spdx_manifest.models import DependencyRef, ProjectMetadata
from spdx_manifest.resolvers.base import BaseResolver, version_sort_key

logger = logging.getLogger(__name__)


class WaterfallResolver(BaseResolver):
    """Tries each resolver in order until one succeeds.

    Attributes:
        resolvers: Resolvers in the order they are tried.
        cache: Optional cache of resolved project metadata.
    """

    def __init__(
        self,
        resolvers: Sequence[BaseResolver],
        cache: Optional[ProjectCache] = None,
    ) -> None:
        if not resolvers:
            raise ValueError("WaterfallResolver needs at least one resolver")
        self.resolvers = list(resolvers)
        self.cache = cache

    @property
    def name(self) -> str:
        return " -> ".join(resolver.name for resolver in self.resolvers)

    async def available_versions(self, dep: DependencyRef) -> list[str]:
        """Return the versions known to any resolver, oldest to newest.

        The local repository usually holds only the versions a build has
        downloaded, so every resolver is asked and the lists are merged.

        Raises:
            VersionResolutionError: If every resolver failed.
        """
        errors: list[ResolutionError] = []
        versions: set[str] = set()
        for resolver in self.resolvers:
            try:
                versions.update(await resolver.available_versions(dep))
            except VersionResolutionError as e:
                logger.debug("%s could not list versions of %s: %s", resolver.name, dep.coordinate, e)
                errors.append(e)

        if len(errors) == len(self.resolvers):
            raise VersionResolutionError(dep.coordinate, "; ".join(str(e) for e in errors))
        return sorted(versions, key=version_sort_key)

    async def build_project(self, dep: DependencyRef) -> ProjectMetadata:
        """Return the cached project or the first successful resolution.

        Raises:
            ProjectBuildError: If every resolver failed.
        """
        if self.cache is not None:
            cached = self.cache.get(dep)
            if cached is not None:
                logger.debug("Cache hit for %s", dep.coordinate)
                return cached

        errors: list[ProjectBuildError] = []
        for resolver in self.resolvers:
            try:
                project = await resolver.build_project(dep)
            except ProjectBuildError as e:
                logger.debug("%s could not build %s: %s", resolver.name, dep.coordinate, e)
                errors.append(e)
                continue

            if self.cache is not None:
                self.cache.set(project)
            return project

        raise ProjectBuildError(dep.coordinate, "; ".join(str(e) for e in errors))

    async def close(self) -> None:
        """Close all chained resolvers."""
        for resolver in self.resolvers:
            await resolver.close()
