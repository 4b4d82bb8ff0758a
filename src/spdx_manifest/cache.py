"""SQLite-based cache of resolved project metadata.

Published POMs do not change, so the project model of a given artifact
version can be reused across runs instead of being fetched again.
"""

import contextlib
import json
import sqlite3
from dataclasses import asdict
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Optional

from spdx_manifest.models import DependencyRef, LicenseInfo, ProjectMetadata


class ProjectCache:
    """SQLite cache for storing resolved project metadata.

    Attributes:
        db_path: Path to the SQLite database file.
        ttl_days: Number of days before cache entries expire (default: 30).
    """

    DEFAULT_TTL_DAYS = 30

    def __init__(
        self,
        db_path: Optional[Path] = None,
        ttl_days: int = DEFAULT_TTL_DAYS,
    ):
        """Initialize the project cache.

        Args:
            db_path: Path to SQLite database. If None, uses
                ~/.cache/spdx_manifest/cache.db.
            ttl_days: Number of days before cache entries expire.
        """
        if db_path is None:
            cache_dir = Path.home() / ".cache" / "spdx_manifest"
            cache_dir.mkdir(parents=True, exist_ok=True)
            db_path = cache_dir / "cache.db"

        self.db_path = db_path
        self.ttl_days = ttl_days
        self._init_database()

    @contextlib.contextmanager
    def _connect(self):
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
        finally:
            conn.close()

    def _init_database(self) -> None:
        """Initialize the database schema if it doesn't exist."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS project_cache (
                    group_id TEXT NOT NULL,
                    artifact_id TEXT NOT NULL,
                    version TEXT NOT NULL,
                    project_data TEXT NOT NULL,
                    resolved_at TEXT NOT NULL,
                    expires_at TEXT NOT NULL,
                    PRIMARY KEY (group_id, artifact_id, version)
                )
                """
            )
            cursor.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_expires
                ON project_cache(expires_at)
                """
            )
            conn.commit()

    def get(self, dep: DependencyRef) -> Optional[ProjectMetadata]:
        """Retrieve cached project metadata for a dependency version.

        Returns:
            The cached ProjectMetadata, or None on a miss, an expired entry
            or corrupted data.
        """
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT project_data, expires_at
                FROM project_cache
                WHERE group_id = ? AND artifact_id = ? AND version = ?
                """,
                (dep.group_id, dep.artifact_id, dep.version),
            )
            row = cursor.fetchone()

        if row is None:
            return None

        project_json, expires_at_str = row
        if datetime.now(UTC) >= datetime.fromisoformat(expires_at_str):
            return None

        try:
            data = json.loads(project_json)
            data["licenses"] = [LicenseInfo(**lic) for lic in data.get("licenses", [])]
            return ProjectMetadata(**data)
        except (json.JSONDecodeError, TypeError, KeyError):
            # Corrupted data is treated as a cache miss
            return None

    def set(self, project: ProjectMetadata) -> None:
        """Store project metadata in the cache."""
        resolved_at = datetime.now(UTC)
        expires_at = resolved_at + timedelta(days=self.ttl_days)

        with self._connect() as conn:
            conn.execute(
                """
                REPLACE INTO project_cache
                (group_id, artifact_id, version, project_data, resolved_at, expires_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    project.group_id,
                    project.artifact_id,
                    project.version,
                    json.dumps(asdict(project)),
                    resolved_at.isoformat(),
                    expires_at.isoformat(),
                ),
            )
            conn.commit()

    def clear(
        self,
        group_id: Optional[str] = None,
        artifact_id: Optional[str] = None,
    ) -> None:
        """Clear cache entries.

        Args:
            group_id: If specified, clear only entries of this group.
            artifact_id: If specified (with group_id), clear only this artifact.
        """
        with self._connect() as conn:
            if group_id is None:
                conn.execute("DELETE FROM project_cache")
            elif artifact_id is None:
                conn.execute("DELETE FROM project_cache WHERE group_id = ?", (group_id,))
            else:
                conn.execute(
                    "DELETE FROM project_cache WHERE group_id = ? AND artifact_id = ?",
                    (group_id, artifact_id),
                )
            conn.commit()

    def info(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with the database ``path``, entry ``count`` and file
            ``size_bytes``.
        """
        with self._connect() as conn:
            count = conn.execute("SELECT COUNT(*) FROM project_cache").fetchone()[0]

        size_bytes = self.db_path.stat().st_size if self.db_path.exists() else 0

        return {
            "path": str(self.db_path),
            "count": count,
            "size_bytes": size_bytes,
        }
