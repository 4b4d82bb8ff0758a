"""Scanner for JSON dependency manifests.

Some build tools can export their resolved dependency list as JSON. This
scanner reads such an export::

    {
        "project": {
            "groupId": "com.example",
            "artifactId": "app",
            "version": "1.0.0",
            "name": "Example App",
            "licenses": [{"name": "MIT", "url": "https://opensource.org/licenses/MIT"}]
        },
        "dependencies": [
            {"groupId": "junit", "artifactId": "junit", "version": "4.13.2", "scope": "test"}
        ]
    }
"""

import json
from pathlib import Path
from typing import Any, Optional

from spdx_manifest.models import DependencyRef, LicenseInfo, ProjectMetadata, ProjectModel
from spdx_manifest.scanners.base import BaseScanner


class JsonManifestScanner(BaseScanner):
    """Scanner for ``dependencies.json`` manifests."""

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name == "dependencies.json"

    @property
    def source_name(self) -> str:
        return "dependencies.json"

    def scan(self) -> ProjectModel:
        """Scan the manifest and extract the project model.

        Raises:
            FileNotFoundError: If the manifest does not exist.
            ValueError: If source_path is not provided, the JSON is invalid or
                a required field is missing.
        """
        try:
            data = json.loads(self._read_source())
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.source_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.source_path}")

        project = self._object(data.get("project", {}), "project")
        artifact_id = self._string(project, "artifactId", "project")
        if not artifact_id:
            raise ValueError(f"Project missing required field 'artifactId' in {self.source_path}")

        licenses = project.get("licenses", [])
        if not isinstance(licenses, list):
            raise ValueError(f"Field 'licenses' of project must be a list in {self.source_path}")

        metadata = ProjectMetadata(
            group_id=self._string(project, "groupId", "project") or "",
            artifact_id=artifact_id,
            version=self._string(project, "version", "project") or "",
            name=self._string(project, "name", "project"),
            licenses=[self._parse_license(self._object(lic, "license")) for lic in licenses],
            description=self._string(project, "description", "project"),
            url=self._string(project, "url", "project"),
        )

        entries = data.get("dependencies", [])
        if not isinstance(entries, list):
            raise ValueError(f"Field 'dependencies' must be a list in {self.source_path}")

        dependencies = []
        for entry in entries:
            entry = self._object(entry, "dependency")
            for key in ("groupId", "artifactId"):
                if not self._string(entry, key, "dependency"):
                    raise ValueError(
                        f"Dependency missing required field '{key}' in {self.source_path}"
                    )
            dependencies.append(
                DependencyRef(
                    group_id=entry["groupId"],
                    artifact_id=entry["artifactId"],
                    version=self._string(entry, "version", "dependency") or "",
                    scope=self._string(entry, "scope", "dependency"),
                )
            )

        return ProjectModel(metadata=metadata, dependencies=dependencies)

    def _object(self, value: Any, what: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise ValueError(f"Expected {what} to be a JSON object in {self.source_path}")
        return value

    def _string(self, entry: dict[str, Any], key: str, what: str) -> Optional[str]:
        """Return an optional string field, rejecting any other JSON type."""
        value = entry.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(
                f"Field '{key}' of {what} must be a string, got {type(value).__name__} "
                f"in {self.source_path}"
            )
        return value

    def _parse_license(self, entry: dict[str, Any]) -> LicenseInfo:
        name = self._string(entry, "name", "license") or self._string(entry, "url", "license")
        if not name:
            raise ValueError(f"License without name or url in {self.source_path}")
        return LicenseInfo(name=name, url=self._string(entry, "url", "license"))
