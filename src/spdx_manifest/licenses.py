"""Normalization of declared license names to SPDX identifiers.

POMs declare licenses by free-form name and URL. For the attribution report
the well-known ones are mapped to their SPDX short identifier, first through
a table of common Maven spellings and license URLs, then through the
license-expression parser.
"""

import logging
from functools import lru_cache
from typing import Optional

from license_expression import get_spdx_licensing

logger = logging.getLogger(__name__)

SPDX = get_spdx_licensing()

# Common license names as they appear in POMs
LICENSE_MAP = {
    "The Apache Software License, Version 2.0": "Apache-2.0",
    "Apache License, Version 2.0": "Apache-2.0",
    "Apache License 2.0": "Apache-2.0",
    "Apache 2.0": "Apache-2.0",
    "Apache 2": "Apache-2.0",
    "ASF 2.0": "Apache-2.0",
    "The MIT License": "MIT",
    "MIT License": "MIT",
    "The BSD License": "BSD-3-Clause",
    "BSD License": "BSD-3-Clause",
    "New BSD License": "BSD-3-Clause",
    "BSD 3-Clause License": "BSD-3-Clause",
    "BSD 2-Clause License": "BSD-2-Clause",
    "Eclipse Public License 1.0": "EPL-1.0",
    "Eclipse Public License - v 1.0": "EPL-1.0",
    "Eclipse Public License v2.0": "EPL-2.0",
    "Eclipse Public License - v 2.0": "EPL-2.0",
    "GNU Lesser General Public License": "LGPL-2.1-or-later",
    "GNU Lesser General Public License, Version 2.1": "LGPL-2.1-only",
    "GNU General Public License, version 2": "GPL-2.0-only",
    "CDDL 1.1": "CDDL-1.1",
    "COMMON DEVELOPMENT AND DISTRIBUTION LICENSE (CDDL) Version 1.0": "CDDL-1.0",
    "Mozilla Public License Version 2.0": "MPL-2.0",
    "Public Domain": "CC-PDDC",
}

# License text URLs, matched after stripping scheme and trailing slash
URL_MAP = {
    "www.apache.org/licenses/LICENSE-2.0": "Apache-2.0",
    "www.apache.org/licenses/LICENSE-2.0.txt": "Apache-2.0",
    "www.apache.org/licenses/LICENSE-2.0.html": "Apache-2.0",
    "opensource.org/licenses/MIT": "MIT",
    "www.opensource.org/licenses/mit-license.php": "MIT",
    "opensource.org/licenses/BSD-3-Clause": "BSD-3-Clause",
    "www.eclipse.org/legal/epl-v10.html": "EPL-1.0",
    "www.eclipse.org/legal/epl-2.0": "EPL-2.0",
    "www.mozilla.org/MPL/2.0": "MPL-2.0",
}


def _url_key(url: str) -> str:
    key = url.strip()
    for prefix in ("https://", "http://"):
        if key.startswith(prefix):
            key = key[len(prefix):]
    return key.rstrip("/")


@lru_cache(maxsize=1024)
def to_spdx_id(name: str, url: Optional[str] = None) -> Optional[str]:
    """Map a declared license to its SPDX identifier.

    Args:
        name: Declared license name.
        url: Declared license URL, if any.

    Returns:
        SPDX identifier (e.g., "Apache-2.0"), or None if not recognized.
    """
    name = name.strip()
    if name in LICENSE_MAP:
        return LICENSE_MAP[name]

    if url:
        spdx_id = URL_MAP.get(_url_key(url))
        if spdx_id:
            return spdx_id

    try:
        parsed = SPDX.parse(name, validate=True, strict=True)
    except Exception:
        logger.debug("Could not normalize license: %s", name)
        return None
    return str(parsed) if parsed is not None else None
