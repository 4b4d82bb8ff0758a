from datetime import UTC, datetime

import pytest

from spdx_manifest.models import (
    DeclaredLicense,
    DependencyRef,
    LicenseOverride,
    PackageDocument,
    ProjectMetadata,
)


def test_effective_scope_defaults_to_runtime():
    """Test that a dependency without scope is treated as runtime."""
    dep = DependencyRef(group_id="a", artifact_id="x", version="1.0")
    assert dep.effective_scope == "runtime"


def test_effective_scope_is_lower_cased():
    dep = DependencyRef(group_id="a", artifact_id="x", version="1.0", scope="Compile")
    assert dep.effective_scope == "compile"


def test_with_version_keeps_coordinates():
    dep = DependencyRef(group_id="a", artifact_id="x", version="1.0", scope="test")
    pinned = dep.with_version("2.0")
    assert pinned == DependencyRef(group_id="a", artifact_id="x", version="2.0", scope="test")
    assert pinned.coordinate == "a:x:2.0"


def test_override_requires_exactly_one_match_key():
    """Test that overrides with neither or both match keys are rejected."""
    with pytest.raises(ValueError):
        LicenseOverride(license_tokens="L1")
    with pytest.raises(ValueError):
        LicenseOverride(license_tokens="L1", artifact_id="x", group_id="a")


def test_external_override_requires_artifact_id():
    with pytest.raises(ValueError):
        LicenseOverride(license_tokens="L1", group_id="a", external=True)


def test_override_tokens_are_trimmed():
    override = LicenseOverride(license_tokens=" L1, L2 ,,", artifact_id="x")
    assert override.tokens == {"L1", "L2"}


def test_project_display_name_falls_back_to_artifact_id():
    assert ProjectMetadata(group_id="a", artifact_id="x", version="1").display_name == "x"
    assert (
        ProjectMetadata(group_id="a", artifact_id="x", version="1", name="X Lib").display_name
        == "X Lib"
    )


def test_declared_license_kinds():
    assert DeclaredLicense().is_none
    assert DeclaredLicense(("MIT",)).is_single
    assert DeclaredLicense(("MIT", "Apache-2.0")).is_conjunctive


def test_document_timestamp_and_filename():
    document = PackageDocument(
        package_name="My App",
        created=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
        tool="Tool: test",
        declared_license=DeclaredLicense(),
    )
    assert document.created_text == "2024-01-02T03:04:05Z"
    assert document.filename == "My App.rdf"
