"""Resolution of user-supplied license overrides.

Overrides are evaluated in configured order and the first match wins, even
when a later override would also match. A group-keyed override listed before
an artifact-keyed one for an artifact of that group therefore shadows it.
"""

import logging
from collections.abc import Sequence
from typing import Optional

from spdx_manifest.models import LicenseInfo, LicenseOverride

logger = logging.getLogger(__name__)


def expand_tokens(
    override: LicenseOverride, user_licenses: Sequence[LicenseInfo]
) -> list[LicenseInfo]:
    """Expand an override's tokens to the user-declared licenses they name.

    Args:
        override: The override whose tokens to expand.
        user_licenses: User-declared licenses, each carrying a token.

    Returns:
        The licenses whose token is listed by the override, in the order the
        licenses were declared (not the order of the tokens).
    """
    tokens = override.tokens
    licenses = [lic for lic in user_licenses if lic.token in tokens]

    unknown = tokens - {lic.token for lic in licenses}
    if unknown:
        logger.warning(
            "License override for %s references undeclared license id(s): %s",
            override.group_id or override.artifact_id,
            ", ".join(sorted(unknown)),
        )
    return licenses


def find_override(
    group_id: str,
    artifact_id: str,
    overrides: Sequence[LicenseOverride],
) -> Optional[LicenseOverride]:
    """Return the first override matching the artifact, or None."""
    for override in overrides:
        if override.matches(group_id, artifact_id):
            return override
    return None


def resolve_override(
    group_id: str,
    artifact_id: str,
    overrides: Sequence[LicenseOverride],
    user_licenses: Sequence[LicenseInfo],
) -> Optional[list[LicenseInfo]]:
    """Resolve the licenses an override assigns to an artifact.

    Args:
        group_id: Group id of the resolved artifact.
        artifact_id: Artifact id of the resolved artifact.
        overrides: Overrides in configured order.
        user_licenses: User-declared licenses.

    Returns:
        The overriding licenses, or None if no override matches and the
        artifact's own licenses should be used.
    """
    override = find_override(group_id, artifact_id, overrides)
    if override is None:
        return None

    logger.debug("Using license override for %s:%s", group_id, artifact_id)
    return expand_tokens(override, user_licenses)
