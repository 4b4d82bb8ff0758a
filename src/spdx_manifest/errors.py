"""Exceptions raised by spdx_manifest."""


class ManifestError(Exception):
    """Base class for all spdx_manifest errors."""


class ConfigError(ManifestError, ValueError):
    """Raised when the configuration cannot be loaded or is malformed."""


class ResolutionError(ManifestError):
    """Raised when a resolver cannot produce metadata for a dependency.

    Attributes:
        coordinate: The "group:artifact:version" coordinate that failed.
    """

    def __init__(self, coordinate: str, message: str) -> None:
        super().__init__(f"{coordinate}: {message}")
        self.coordinate = coordinate


class VersionResolutionError(ResolutionError):
    """Raised when the available versions of an artifact cannot be retrieved."""


class ProjectBuildError(ResolutionError):
    """Raised when the project model of an artifact cannot be built."""
