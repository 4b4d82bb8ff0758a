"""Resolver for remote Maven repositories over HTTP."""

import logging
from typing import Optional

import aiohttp

from spdx_manifest.errors import ProjectBuildError, VersionResolutionError
from spdx_manifest.resolvers.pom_resolver import PomResolver, artifact_path, pom_path

logger = logging.getLogger(__name__)

MAVEN_CENTRAL = "https://repo1.maven.org/maven2"


class MavenRepositoryResolver(PomResolver):
    """Resolver fetching metadata and POMs from a remote Maven repository.

    Manages a shared aiohttp.ClientSession for connection reuse. Use as an
    async context manager or call close() when done.

    Attributes:
        base_url: Repository root URL, without trailing slash.
    """

    def __init__(self, base_url: str = MAVEN_CENTRAL, timeout: float = 10) -> None:
        """Initialize the resolver.

        Args:
            base_url: Repository root URL. Defaults to Maven Central.
            timeout: Total timeout per request, in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def name(self) -> str:
        return self.base_url

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(ttl_dns_cache=300)
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _get(self, url: str) -> Optional[bytes]:
        """GET a URL, returning None on 404.

        Raises:
            aiohttp.ClientError: On network errors or unexpected statuses.
        """
        logger.debug("Fetching %s", url)
        session = await self._get_session()
        async with session.get(url) as response:
            if response.status == 404:
                return None
            response.raise_for_status()
            return await response.read()

    async def fetch_metadata(self, group_id: str, artifact_id: str) -> Optional[bytes]:
        url = f"{self.base_url}/{artifact_path(group_id, artifact_id)}/maven-metadata.xml"
        try:
            return await self._get(url)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise VersionResolutionError(
                f"{group_id}:{artifact_id}", f"error fetching {url}: {e}"
            ) from e

    async def fetch_pom(self, group_id: str, artifact_id: str, version: str) -> Optional[bytes]:
        url = f"{self.base_url}/{pom_path(group_id, artifact_id, version)}"
        try:
            return await self._get(url)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise ProjectBuildError(
                f"{group_id}:{artifact_id}:{version}", f"error fetching {url}: {e}"
            ) from e
