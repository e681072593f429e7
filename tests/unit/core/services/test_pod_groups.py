from __future__ import annotations

"""
Unit tests for the Pod and Specification Group Registry.

Verifies:
1. Pod group registration under 'Pods' / 'Development Pods' and duplicate rejection.
2. Lookup semantics across both roots.
3. Nested subspec groups and fixed-name subgroups created exactly once.
4. Lazy 'Support Files' groups.
"""

import pytest

from podproject.core.services.pod_groups import PodGroupRegistry, spec_root_name
from podproject.domain.errors import (
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidArgumentError,
)
from podproject.domain.tree_models import Group, SourceTree


def test_spec_root_name() -> None:
    assert spec_root_name("Foo") == "Foo"
    assert spec_root_name("Foo/Sub1/Sub2") == "Foo"


def test_add_pod_group_under_pods(project, foo_group) -> None:
    assert foo_group.parent is project.pods
    assert foo_group.name == "Foo"
    assert foo_group.source_tree is SourceTree.GROUP
    assert foo_group.path == "Foo"
    assert foo_group.real_path == "/work/Pods/Foo"


def test_add_development_pod_with_absolute_path(project) -> None:
    group = project.add_pod_group("Local", "/src/Local", development=True, absolute=True)

    assert group.parent is project.development_pods
    assert group.source_tree is SourceTree.ABSOLUTE
    assert group.path == "/src/Local"
    assert group.real_path == "/src/Local"


def test_duplicate_pod_group_is_rejected(project, foo_group) -> None:
    with pytest.raises(DuplicateGroupError) as exc_info:
        project.add_pod_group("Foo", "/work/Pods/Foo")
    assert exc_info.value.name == "Foo"

    # Uniqueness spans both roots
    with pytest.raises(DuplicateGroupError):
        project.add_pod_group("Foo", "/src/Foo", development=True)


def test_pod_group_lookup(project) -> None:
    assert project.pod_group("Bar") is None

    foo = project.add_pod_group("Foo", "/work/Pods/Foo")
    local = project.add_pod_group("Local", "/src/Local", development=True)

    assert project.pod_group("Foo") is foo
    assert project.pod_group("Local") is local
    assert project.pod_group("Bar") is None
    assert project.pod_groups() == [foo, local]


def test_first_match_wins_when_names_collide() -> None:
    pods = Group(name="Pods", path="/p", source_tree=SourceTree.ABSOLUTE)
    dev = Group(name="Development Pods", path="/d", source_tree=SourceTree.ABSOLUTE)
    first = pods.new_group("Foo")
    dev.new_group("Foo")

    assert PodGroupRegistry(pods, dev).pod_group("Foo") is first


def test_group_for_root_spec_is_the_pod_group(project, foo_group) -> None:
    assert project.group_for_spec("Foo") is foo_group


def test_group_for_spec_creates_nested_groups_once(project, foo_group) -> None:
    resources = project.group_for_spec("Foo/Sub1/Sub2", "resources")

    sub2 = resources.parent
    sub1 = sub2.parent
    assert resources.name == "Resources"
    assert sub2.name == "Sub2"
    assert sub1.name == "Sub1"
    assert sub1.parent is foo_group

    assert project.group_for_spec("Foo/Sub1/Sub2", "resources") is resources
    assert project.group_for_spec("Foo/Sub1/Sub2") is sub2
    assert project.group_for_spec("Foo/Sub1") is sub1
    assert len(foo_group.groups) == 1
    assert len(sub1.groups) == 1
    assert len(sub2.groups) == 1


def test_group_for_spec_ignores_same_named_variant_group(project, foo_group) -> None:
    project.add_file_reference("/work/Pods/Foo/en.lproj/Resources.strings", foo_group)

    first = project.group_for_spec("Foo", "resources")
    second = project.group_for_spec("Foo", "resources")

    assert second is first
    assert foo_group.groups == [first]


def test_group_for_spec_skips_empty_components(project, foo_group) -> None:
    assert project.group_for_spec("Foo/") is foo_group

    bar = project.group_for_spec("Foo//Bar")
    assert bar.name == "Bar"
    assert bar.parent is foo_group
    assert [g.name for g in foo_group.groups] == ["Bar"]


def test_support_files_group_ignores_same_named_file(project, foo_group) -> None:
    foo_group.new_file("/work/Pods/Foo/Support Files")

    first = project.pod_support_files_group("Foo", "/work/Pods/Support")
    second = project.pod_support_files_group("Foo", "/work/Pods/Support")

    assert second is first
    assert foo_group.groups == [first]


def test_group_for_spec_frameworks_subgroup(project, foo_group) -> None:
    frameworks = project.group_for_spec("Foo", "frameworks")

    assert frameworks.name == "Frameworks"
    assert frameworks.parent is foo_group


def test_group_for_spec_without_pod_group(project) -> None:
    with pytest.raises(GroupNotFoundError) as exc_info:
        project.group_for_spec("Bar/Sub")
    assert exc_info.value.name == "Bar"


def test_group_for_spec_rejects_unknown_subgroup(project, foo_group) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        project.group_for_spec("Foo", "bogus")
    assert exc_info.value.key == "bogus"
    assert foo_group.children == []


def test_support_files_group_is_created_lazily(project, foo_group) -> None:
    support_dir = "/work/Pods/Target Support Files/Foo"

    group = project.pod_support_files_group("Foo", support_dir)

    assert group.name == "Support Files"
    assert group.parent is foo_group
    assert group.real_path == support_dir
    assert project.pod_support_files_group("Foo", "/ignored") is group
    assert len(foo_group.groups) == 1


def test_support_files_group_requires_pod_group(project) -> None:
    with pytest.raises(GroupNotFoundError):
        project.pod_support_files_group("Missing", "/tmp")
