"""Project scanners for various project description formats.

This module provides scanners for extracting the root project and its
declared dependencies.
"""

from pathlib import Path

from spdx_manifest.scanners.base import BaseScanner
from spdx_manifest.scanners.json_manifest import JsonManifestScanner
from spdx_manifest.scanners.pom import PomScanner

__all__ = [
    "BaseScanner",
    "JsonManifestScanner",
    "PomScanner",
    "get_scanner",
]

# Registry of available scanners in priority order
_SCANNERS: list[type[BaseScanner]] = [
    PomScanner,
    JsonManifestScanner,
]


def get_scanner(path: Path) -> BaseScanner:
    """Get the appropriate scanner for a given file path.

    Args:
        path: Path to the project file.

    Returns:
        Scanner instance configured for the given file.

    Raises:
        ValueError: If no scanner can handle the given file.
    """
    for scanner_cls in _SCANNERS:
        if scanner_cls.can_handle(path):
            return scanner_cls(path)

    raise ValueError(
        f"No scanner available for '{path.name}'. "
        f"Supported files: pom.xml, *.pom, dependencies.json"
    )
