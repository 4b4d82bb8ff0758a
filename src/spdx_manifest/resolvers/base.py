"""Base interface for project resolvers.

Resolvers look up the published metadata of a dependency: which versions
of it exist and what its project model (name, licenses) is. They may be
backed by a local Maven repository, a remote registry or a cache.
"""

import re
from abc import ABC, abstractmethod

from spdx_manifest.models import DependencyRef, ProjectMetadata

_QUALIFIER_RANK = {
    "alpha": 1,
    "a": 1,
    "beta": 2,
    "b": 2,
    "milestone": 3,
    "m": 3,
    "rc": 4,
    "cr": 4,
    "snapshot": 5,
    "": 6,
    "ga": 6,
    "final": 6,
    "release": 6,
    "sp": 7,
}


def version_sort_key(version: str) -> tuple:
    """Return a sort key approximating Maven version ordering.

    Numeric segments compare numerically, known qualifiers compare by
    maturity (alpha < beta < milestone < rc < snapshot < release < sp) and
    unknown qualifiers sort after releases, alphabetically.

    Args:
        version: Version string such as "1.10.0-RC1".

    Returns:
        Tuple usable as a ``sorted`` key.
    """
    key = []
    for token in re.split(r"[.\-_]|(?<=\d)(?=[a-zA-Z])|(?<=[a-zA-Z])(?=\d)", version):
        if token.isdigit():
            key.append((0, int(token), ""))
        else:
            lowered = token.lower()
            rank = _QUALIFIER_RANK.get(lowered)
            if rank is None:
                key.append((-1, 8, lowered))
            else:
                key.append((-1, rank, ""))
    # A release ("1.0") sorts after its qualified pre-releases ("1.0-rc1").
    key.append((-1, _QUALIFIER_RANK[""], ""))
    return tuple(key)


class BaseResolver(ABC):
    """Abstract base class for project resolvers.

    Lookups are async so HTTP-backed resolvers can share a session, but
    callers await them one dependency at a time.
    """

    @abstractmethod
    async def available_versions(self, dep: DependencyRef) -> list[str]:
        """Return the published versions of a dependency.

        Args:
            dep: Dependency to look up.

        Returns:
            Versions ordered oldest to newest. May be empty.

        Raises:
            VersionResolutionError: If the versions cannot be retrieved.
        """
        ...

    @abstractmethod
    async def build_project(self, dep: DependencyRef) -> ProjectMetadata:
        """Build the project metadata of a dependency at its version.

        Args:
            dep: Dependency, pinned to the version to look up.

        Returns:
            Resolved project metadata.

        Raises:
            ProjectBuildError: If the project model cannot be built.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resolver name for logging/debugging."""
        ...

    async def close(self) -> None:
        """Release any resources held by the resolver."""

    async def __aenter__(self) -> "BaseResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
