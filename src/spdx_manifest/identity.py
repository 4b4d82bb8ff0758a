"""License identity table.

Licenses published by different projects often describe the same legal text
under different names ("Apache 2", "The Apache Software License, Version
2.0", ...). The table deduplicates them by URL and remembers the name seen
first, so the document lists each license once.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LicenseEntry:
    """One license recorded in the identity table."""

    url: Optional[str]
    name: str


class LicenseIdentityTable:
    """Insertion-ordered mapping from license URL to display name.

    The first name recorded for a URL wins; later names for the same URL are
    ignored. Licenses without a URL cannot be deduplicated, so each of them
    is recorded as a separate entry.
    """

    def __init__(self) -> None:
        self._entries: list[LicenseEntry] = []
        self._by_url: dict[str, LicenseEntry] = {}

    def get_or_insert(self, url: Optional[str], name: str) -> str:
        """Record a license and return the name to display for it.

        Args:
            url: License URL, the identity key. May be None.
            name: Name the license was declared with.

        Returns:
            The stored name if the URL was seen before, otherwise ``name``.
        """
        if not url:
            self._entries.append(LicenseEntry(url=None, name=name))
            return name

        known = self._by_url.get(url)
        if known is not None:
            if known.name != name:
                logger.debug("Reusing name %r for %s instead of %r", known.name, url, name)
            return known.name

        entry = LicenseEntry(url=url, name=name)
        self._by_url[url] = entry
        self._entries.append(entry)
        return name

    def names(self) -> list[str]:
        """Return display names in first-seen order."""
        return [entry.name for entry in self._entries]

    def links(self) -> list[tuple[str, Optional[str]]]:
        """Return (name, url) pairs in first-seen order."""
        return [(entry.name, entry.url) for entry in self._entries]

    def __iter__(self) -> Iterator[LicenseEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: object) -> bool:
        return url in self._by_url
