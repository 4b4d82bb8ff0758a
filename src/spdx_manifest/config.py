"""Configuration for SPDX manifest generation.

Settings are read from a TOML file, either a standalone file or the
``[tool.spdx-manifest]`` table of a ``pyproject.toml``. Example::

    scopes = "compile,runtime"
    excludes = ["se.extenda"]
    originator = "Organization: Extenda AB"
    download-location = "https://example.com/download"

    [[licenses]]
    id = "L1"
    name = "Custom License"
    url = "https://example.com/LICENSE"

    [[license-mappings]]
    artifact-id = "legacy-lib"
    license-id = "L1"

Order matters in two places: the first license mapping matching an artifact
wins, and the first name seen for a license URL is the one reported.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from spdx_manifest.errors import ConfigError
from spdx_manifest.filters import DEFAULT_SCOPES, parse_scopes
from spdx_manifest.models import LicenseInfo, LicenseOverride

DEFAULT_OUTPUT_DIRECTORY = Path("target") / "site" / "rdf" / "spdx"


@dataclass
class ManifestConfig:
    """Parsed settings of one manifest run.

    Attributes:
        included_scopes: Lower-cased dependency scopes to include.
        excludes: Group id prefixes to exclude.
        licenses: User-declared licenses, referenced by token.
        license_mappings: License overrides, in configured order.
        originator: Optional package originator.
        download_location: Optional package download location.
        copyright_text: Optional package copyright text.
        output_directory: Directory the document is written to.
    """

    included_scopes: frozenset[str] = field(default_factory=lambda: parse_scopes(DEFAULT_SCOPES))
    excludes: list[str] = field(default_factory=list)
    licenses: list[LicenseInfo] = field(default_factory=list)
    license_mappings: list[LicenseOverride] = field(default_factory=list)
    originator: Optional[str] = None
    download_location: Optional[str] = None
    copyright_text: Optional[str] = None
    output_directory: Path = DEFAULT_OUTPUT_DIRECTORY

    def with_overrides(self, **values: Any) -> "ManifestConfig":
        """Return a copy with the given non-None values replaced."""
        changes = {key: value for key, value in values.items() if value is not None}
        if "included_scopes" in changes and isinstance(changes["included_scopes"], str):
            changes["included_scopes"] = parse_scopes(changes["included_scopes"])
        return replace(self, **changes)


class LicenseEntry(BaseModel):
    """A ``[[licenses]]`` entry: a license the user declares by token."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1, description="Token referenced by license mappings")
    name: str = Field(min_length=1, description="License name shown in the document")
    url: Optional[str] = Field(default=None, description="URL of the license text")

    def to_license(self) -> LicenseInfo:
        return LicenseInfo(name=self.name, url=self.url, token=self.id.strip())


class LicenseMapping(BaseModel):
    """A ``[[license-mappings]]`` entry overriding an artifact's licenses."""

    model_config = ConfigDict(extra="forbid")

    license_id: str = Field(alias="license-id", min_length=1)
    artifact_id: Optional[str] = Field(default=None, alias="artifact-id")
    group_id: Optional[str] = Field(default=None, alias="group-id")
    external: bool = False

    @model_validator(mode="after")
    def _check_match_key(self) -> "LicenseMapping":
        if bool(self.artifact_id) == bool(self.group_id):
            raise ValueError("set exactly one of 'artifact-id' or 'group-id'")
        if self.external and not self.artifact_id:
            raise ValueError("an external mapping must set 'artifact-id'")
        return self

    def to_override(self) -> LicenseOverride:
        return LicenseOverride(
            license_tokens=self.license_id,
            artifact_id=self.artifact_id,
            group_id=self.group_id,
            external=self.external,
        )


class SettingsFile(BaseModel):
    """The settings table of a config file. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    scopes: Union[str, list[str]] = DEFAULT_SCOPES
    excludes: list[str] = Field(default_factory=list)
    licenses: list[LicenseEntry] = Field(default_factory=list)
    license_mappings: list[LicenseMapping] = Field(
        default_factory=list, alias="license-mappings"
    )
    originator: Optional[str] = None
    download_location: Optional[str] = Field(default=None, alias="download-location")
    copyright_text: Optional[str] = Field(default=None, alias="copyright-text")
    output_directory: Optional[str] = Field(default=None, alias="output-directory")

    def to_config(self) -> ManifestConfig:
        scopes = self.scopes if isinstance(self.scopes, str) else ",".join(self.scopes)
        return ManifestConfig(
            included_scopes=parse_scopes(scopes),
            excludes=list(self.excludes),
            licenses=[entry.to_license() for entry in self.licenses],
            license_mappings=[mapping.to_override() for mapping in self.license_mappings],
            originator=self.originator,
            download_location=self.download_location,
            copyright_text=self.copyright_text,
            output_directory=(
                Path(self.output_directory) if self.output_directory else DEFAULT_OUTPUT_DIRECTORY
            ),
        )


def _describe(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        location = ""
        for part in detail["loc"]:
            if isinstance(part, int):
                location += f"[{part}]"
            else:
                location += f".{part}" if location else str(part)
        messages.append(f"{location or 'config'}: {detail['msg']}")
    return "; ".join(messages)


def parse_config(data: dict[str, Any]) -> ManifestConfig:
    """Build a ManifestConfig from a parsed TOML table.

    Args:
        data: The settings table.

    Returns:
        The parsed configuration.

    Raises:
        ConfigError: If a key is unknown, a value has the wrong type or a
            license mapping is malformed.
    """
    try:
        settings = SettingsFile.model_validate(data)
    except ValidationError as e:
        raise ConfigError(_describe(e)) from e
    return settings.to_config()


def load_config(path: Optional[Path] = None) -> ManifestConfig:
    """Load configuration from a TOML file.

    Args:
        path: Config file. A ``pyproject.toml`` is read from its
            ``[tool.spdx-manifest]`` table. If None, defaults are returned.

    Returns:
        The parsed configuration.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    if path is None:
        return ManifestConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("spdx-manifest", {})

    return parse_config(data)
