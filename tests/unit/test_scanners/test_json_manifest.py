"""Tests for the JsonManifestScanner."""

import json
from pathlib import Path

import pytest

from spdx_manifest.models import DependencyRef, LicenseInfo
from spdx_manifest.scanners.json_manifest import JsonManifestScanner

FIXTURE = Path(__file__).parent.parent.parent / "fixtures" / "dependencies.json"


def test_scan_fixture():
    project = JsonManifestScanner(source_path=FIXTURE).scan()

    assert project.metadata.display_name == "Example App"
    assert project.metadata.licenses == [
        LicenseInfo(name="MIT", url="https://opensource.org/licenses/MIT")
    ]
    assert project.dependencies == [
        DependencyRef("org.slf4j", "slf4j-api", "2.0.12"),
        DependencyRef("junit", "junit", "4.13.2", scope="test"),
    ]


def test_invalid_json(tmp_path: Path):
    path = tmp_path / "dependencies.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        JsonManifestScanner(source_path=path).scan()


def test_dependency_missing_artifact_id(tmp_path: Path):
    path = tmp_path / "dependencies.json"
    path.write_text(
        json.dumps({"project": {"artifactId": "app"}, "dependencies": [{"groupId": "g"}]}),
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="artifactId"):
        JsonManifestScanner(source_path=path).scan()


def test_project_requires_artifact_id(tmp_path: Path):
    path = tmp_path / "dependencies.json"
    path.write_text(json.dumps({"dependencies": []}), encoding="utf-8")

    with pytest.raises(ValueError, match="artifactId"):
        JsonManifestScanner(source_path=path).scan()


@pytest.mark.parametrize(
    "data, match",
    [
        ({"project": "app"}, "project to be a JSON object"),
        ({"project": {"artifactId": 7}}, "'artifactId' of project must be a string"),
        ({"project": {"artifactId": "app", "groupId": ["g"]}}, "'groupId' of project"),
        ({"project": {"artifactId": "app", "licenses": {"name": "MIT"}}}, "'licenses'"),
        ({"project": {"artifactId": "app"}, "dependencies": {}}, "'dependencies' must be a list"),
        ({"project": {"artifactId": "app"}, "dependencies": ["g:a:1"]}, "dependency to be"),
        (
            {"project": {"artifactId": "app"}, "dependencies": [{"groupId": "g", "artifactId": "a", "scope": 1}]},
            "'scope' of dependency must be a string, got int",
        ),
    ],
)
def test_wrongly_typed_fields_are_rejected(tmp_path: Path, data, match):
    path = tmp_path / "dependencies.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ValueError, match=match):
        JsonManifestScanner(source_path=path).scan()
