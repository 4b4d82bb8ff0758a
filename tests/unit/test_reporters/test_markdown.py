"""Tests for the Markdown reporter."""

import pytest

from spdx_manifest.assembler import assemble
from spdx_manifest.config import ManifestConfig
from spdx_manifest.identity import LicenseIdentityTable
from spdx_manifest.models import DependencyRow, ProjectMetadata
from spdx_manifest.reporters.markdown import MarkdownReporter


@pytest.fixture
def reporter():
    """Create a MarkdownReporter instance."""
    return MarkdownReporter()


@pytest.fixture
def document(fixed_now):
    table = LicenseIdentityTable()
    table.get_or_insert("http://www.apache.org/licenses/LICENSE-2.0.txt", "Apache 2")
    table.get_or_insert(None, "Custom Terms")
    rows = [
        DependencyRow("Commons Lang", "Apache 2"),
        DependencyRow("legacy-lib", ""),
    ]
    project = ProjectMetadata("com.example", "app", "1.0", name="Example App")
    return assemble(project, rows, table, ManifestConfig(), now=fixed_now)


def test_render_lists_dependencies(reporter, document):
    output = reporter.render(document)

    assert "# Third-Party Licenses: Example App" in output
    assert "| Commons Lang | Apache 2 |" in output
    assert "| legacy-lib | Unknown |" in output


def test_render_lists_licenses_with_spdx_ids(reporter, document):
    output = reporter.render(document)

    url = "http://www.apache.org/licenses/LICENSE-2.0.txt"
    assert f"| Apache 2 | [{url}]({url}) | Apache-2.0 |" in output
    assert "| Custom Terms | - | - |" in output


def test_xss_protection_with_autoescape(reporter, fixed_now):
    """Test that dependency names containing HTML are escaped."""
    rows = [DependencyRow('<script>alert("xss")</script>', "MIT")]
    project = ProjectMetadata("com.example", "app", "1.0")
    document = assemble(project, rows, LicenseIdentityTable(), ManifestConfig(), now=fixed_now)

    output = reporter.render(document)

    assert "&lt;script&gt;alert(&#34;xss&#34;)&lt;/script&gt;" in output
    assert '<script>alert("xss")</script>' not in output


def test_custom_template(tmp_path, document):
    template = tmp_path / "custom.md.j2"
    template.write_text(
        "{% for row in document.rows %}{{ row.display_name }};{% endfor %}", encoding="utf-8"
    )

    output = MarkdownReporter(template_path=template).render(document)

    assert output == "Commons Lang;legacy-lib;"


def test_default_filename(reporter, document):
    assert reporter.default_filename(document) == "Example App.md"


def test_pipes_are_escaped_in_table_cells(reporter, fixed_now):
    table = LicenseIdentityTable()
    table.get_or_insert(None, "GPL | Classpath")
    rows = [DependencyRow("a|b", "GPL | Classpath")]
    project = ProjectMetadata("com.example", "app", "1.0")
    document = assemble(project, rows, table, ManifestConfig(), now=fixed_now)

    output = reporter.render(document)

    assert r"| a\|b | GPL \| Classpath |" in output
    assert r"| GPL \| Classpath | - |" in output
