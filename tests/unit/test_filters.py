"""Tests for scope and exclusion filtering."""

from spdx_manifest.filters import filter_dependencies, is_excluded, is_included, parse_scopes
from spdx_manifest.models import DependencyRef


def test_parse_scopes_normalizes():
    assert parse_scopes(" Compile, RUNTIME ,") == {"compile", "runtime"}


def test_parse_scopes_default():
    assert parse_scopes() == {"compile", "runtime"}


def test_unset_scope_is_included_as_runtime():
    dep = DependencyRef(group_id="a", artifact_id="x", version="1")
    assert is_included(dep, frozenset({"runtime"}), [])
    assert not is_included(dep, frozenset({"compile"}), [])


def test_scope_comparison_is_case_insensitive():
    dep = DependencyRef(group_id="a", artifact_id="x", version="1", scope="COMPILE")
    assert is_included(dep, parse_scopes("compile"), [])


def test_exclusion_is_a_prefix_match():
    """Test that exclusion prefixes apply to sub groups only by prefix."""
    assert is_excluded("com.example.sub", ["com.example"])
    assert not is_excluded("com.example.sub", ["com.example2"])


def test_exclusion_is_case_sensitive():
    assert not is_excluded("com.Example.sub", ["com.example"])


def test_filter_keeps_only_included_scopes():
    deps = [
        DependencyRef(group_id="a", artifact_id="x", version="1", scope="compile"),
        DependencyRef(group_id="b", artifact_id="y", version="1", scope="test"),
    ]

    included = filter_dependencies(deps, parse_scopes("compile,runtime"), [])

    assert [d.artifact_id for d in included] == ["x"]


def test_filter_preserves_order_and_applies_exclusions():
    deps = [
        DependencyRef(group_id="org.c", artifact_id="c", version="1"),
        DependencyRef(group_id="se.extenda.core", artifact_id="internal", version="1"),
        DependencyRef(group_id="org.a", artifact_id="a", version="1", scope="compile"),
    ]

    included = filter_dependencies(deps, parse_scopes(), ["se.extenda"])

    assert [d.artifact_id for d in included] == ["c", "a"]
