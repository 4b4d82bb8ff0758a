"""Base interface for project scanners.

Scanners read a project description (a ``pom.xml``, a JSON manifest, ...)
and return the root project together with its declared dependencies.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from spdx_manifest.models import ProjectModel


class BaseScanner(ABC):
    """Abstract base class for project scanners.

    Attributes:
        source_path: Optional path to the file being scanned.
    """

    def __init__(self, source_path: Optional[Path] = None) -> None:
        """Initialize the scanner.

        Args:
            source_path: Optional path to the project file.
        """
        self.source_path = source_path

    @abstractmethod
    def scan(self) -> ProjectModel:
        """Scan the source and extract the project model.

        Returns:
            The root project metadata and its dependencies, in declaration order.

        Raises:
            FileNotFoundError: If the source file does not exist.
            ValueError: If the source format is invalid.
        """
        ...

    @classmethod
    @abstractmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given file."""
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's source type."""
        ...

    def _read_source(self) -> bytes:
        if self.source_path is None:
            raise ValueError("source_path must be provided")

        if not self.source_path.exists():
            raise FileNotFoundError(f"File not found: {self.source_path}")

        return self.source_path.read_bytes()
