"""Scope and exclusion filtering of declared dependencies."""

import logging
from collections.abc import Iterable, Sequence

from spdx_manifest.models import DependencyRef

logger = logging.getLogger(__name__)

DEFAULT_SCOPES = "compile,runtime"


def parse_scopes(scopes: str = DEFAULT_SCOPES) -> frozenset[str]:
    """Parse a comma-separated scope list into a lower-cased set.

    Args:
        scopes: Scopes to include, e.g. "compile, Runtime".

    Returns:
        Normalized set of scope names, e.g. {"compile", "runtime"}.
    """
    return frozenset(
        scope.strip().lower() for scope in scopes.split(",") if scope.strip()
    )


def is_excluded(group_id: str, exclusion_prefixes: Iterable[str]) -> bool:
    """Check whether a group id starts with any exclusion prefix.

    The test is a plain, case-sensitive prefix match: "com.example" excludes
    "com.example.sub" and also "com.examples".
    """
    return any(group_id.startswith(prefix) for prefix in exclusion_prefixes)


def is_included(
    dep: DependencyRef,
    included_scopes: frozenset[str],
    exclusion_prefixes: Sequence[str],
) -> bool:
    """Decide whether a dependency belongs in the license report.

    Args:
        dep: Declared dependency.
        included_scopes: Lower-cased scopes to include (see parse_scopes).
        exclusion_prefixes: Group id prefixes to exclude.

    Returns:
        True if the effective scope is included and the group is not excluded.
    """
    return dep.effective_scope in included_scopes and not is_excluded(
        dep.group_id, exclusion_prefixes
    )


def filter_dependencies(
    deps: Iterable[DependencyRef],
    included_scopes: frozenset[str],
    exclusion_prefixes: Sequence[str],
) -> list[DependencyRef]:
    """Return the included dependencies, preserving declaration order."""
    included = []
    for dep in deps:
        if is_included(dep, included_scopes, exclusion_prefixes):
            included.append(dep)
        else:
            logger.debug("Skipping %s (scope %s)", dep.coordinate, dep.effective_scope)
    return included
