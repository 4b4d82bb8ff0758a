"""Tests for package document assembly."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from spdx_manifest.assembler import TOOL, assemble, declared_license
from spdx_manifest.config import ManifestConfig
from spdx_manifest.identity import LicenseIdentityTable
from spdx_manifest.models import (
    NOASSERTION,
    NONE,
    DependencyRow,
    LicenseInfo,
    NotComputed,
    ProjectMetadata,
)


@pytest.fixture
def project() -> ProjectMetadata:
    return ProjectMetadata(
        group_id="com.example",
        artifact_id="app",
        version="1.0",
        name="Example App",
        licenses=[LicenseInfo(name="MIT", url="https://opensource.org/licenses/MIT")],
    )


class TestDeclaredLicense:
    def test_empty(self):
        assert declared_license([]).is_none

    def test_single(self):
        declared = declared_license([LicenseInfo(name="MIT")])
        assert declared.is_single
        assert declared.members == ("MIT",)

    def test_conjunctive_keeps_order(self):
        declared = declared_license([LicenseInfo(name="MIT"), LicenseInfo(name="Apache-2.0")])
        assert declared.is_conjunctive
        assert declared.members == ("MIT", "Apache-2.0")


def test_defaults_use_sentinels(project, fixed_now):
    document = assemble(project, [], LicenseIdentityTable(), ManifestConfig(), now=fixed_now)

    assert document.package_name == "Example App"
    assert document.download_location == NONE
    assert document.originator is None
    assert document.concluded_license == NOASSERTION
    assert document.copyright_text == NOASSERTION
    assert document.tool == TOOL
    assert isinstance(document.verification_code, NotComputed)
    assert isinstance(document.reviewers, NotComputed)


def test_configured_values_are_used(project, fixed_now):
    config = ManifestConfig(
        originator="Organization: Example",
        download_location="https://example.com/app.zip",
        copyright_text="Copyright Example",
    )

    document = assemble(project, [], LicenseIdentityTable(), config, now=fixed_now)

    assert document.originator == "Organization: Example"
    assert document.download_location == "https://example.com/app.zip"
    assert document.copyright_text == "Copyright Example"


def test_empty_download_location_falls_back_to_none(project, fixed_now):
    config = ManifestConfig(download_location="")
    document = assemble(project, [], LicenseIdentityTable(), config, now=fixed_now)
    assert document.download_location == NONE


def test_license_info_follows_table_order(project, fixed_now):
    table = LicenseIdentityTable()
    table.get_or_insert("z", "Zeta License")
    table.get_or_insert("a", "Alpha License")
    rows = [DependencyRow("dep", "Zeta License, Alpha License")]

    document = assemble(project, rows, table, ManifestConfig(), now=fixed_now)

    assert document.license_info_from_files == ["Zeta License", "Alpha License"]
    assert document.license_links == [("Zeta License", "z"), ("Alpha License", "a")]
    assert document.rows == rows


def test_timestamp_is_utc_at_second_precision(project):
    local = datetime(2024, 6, 1, 12, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2)))

    document = assemble(project, [], LicenseIdentityTable(), ManifestConfig(), now=local)

    assert document.created == datetime(2024, 6, 1, 10, 0, 0, tzinfo=UTC)
    assert document.created_text == "2024-06-01T10:00:00Z"


def test_default_timestamp_is_current_utc(project):
    document = assemble(project, [], LicenseIdentityTable(), ManifestConfig())
    assert document.created.tzinfo == UTC
    assert document.created.microsecond == 0


def test_naive_timestamp_is_rejected(project):
    with pytest.raises(ValueError, match="timezone-aware"):
        assemble(project, [], LicenseIdentityTable(), ManifestConfig(), now=datetime(2024, 6, 1, 12, 0))
