from __future__ import annotations

"""
Unit tests for the Group Resolver.

Verifies filesystem mirroring (mkdir -p semantics), the localization folder
boundary and the folding of localized files into variant groups.
"""

import pytest

from podproject.core.services.group_resolver import GroupResolver
from podproject.core.services.path_cache import PathCache
from podproject.domain.errors import InvalidPathError
from podproject.domain.tree_models import Group, SourceTree, VariantGroup


@pytest.fixture
def root() -> Group:
    return Group(name="Root", path="/root", source_tree=SourceTree.ABSOLUTE)


@pytest.fixture
def resolver() -> GroupResolver:
    return GroupResolver(PathCache())


def test_relative_path_is_rejected(root: Group, resolver: GroupResolver) -> None:
    with pytest.raises(InvalidPathError):
        resolver.group_for_path_in_group("a/b/file.m", root)


def test_without_mirroring_returns_starting_group(root: Group, resolver: GroupResolver) -> None:
    group = resolver.group_for_path_in_group("/root/a/b/file.m", root)

    assert group is root
    assert root.children == []


def test_mirroring_creates_nested_groups_once(root: Group, resolver: GroupResolver) -> None:
    b = resolver.group_for_path_in_group("/root/a/b/file.m", root, True)

    assert b.name == "b"
    assert b.path == "b"
    assert b.parent.name == "a"
    assert b.parent.path == "a"
    assert b.parent.parent is root
    assert b.real_path == "/root/a/b"

    # Shared prefix reuses 'a' and 'a/b'
    again = resolver.group_for_path_in_group("/root/a/b/other.m", root, True)
    sibling = resolver.group_for_path_in_group("/root/a/c/third.m", root, True)

    assert again is b
    assert len(root.groups) == 1
    assert [g.name for g in root.groups[0].groups] == ["b", "c"]
    assert sibling.real_path == "/root/a/c"


def test_mirrored_group_is_not_shadowed_by_same_named_variant(root: Group, resolver: GroupResolver) -> None:
    variant = resolver.group_for_path_in_group("/root/en.lproj/Localizable.strings", root, True)

    first = resolver.group_for_path_in_group("/root/Localizable/a.m", root, True)
    second = resolver.group_for_path_in_group("/root/Localizable/b.m", root, True)

    assert isinstance(first, Group)
    assert second is first
    assert root.children == [variant, first]


def test_file_at_group_root_creates_no_group(root: Group, resolver: GroupResolver) -> None:
    group = resolver.group_for_path_in_group("/root/file.m", root, True)

    assert group is root
    assert root.children == []


def test_localized_variants_fold_into_one_variant_group(root: Group, resolver: GroupResolver) -> None:
    en = resolver.group_for_path_in_group("/root/en.lproj/Main.strings", root, True)
    fr = resolver.group_for_path_in_group("/root/fr.lproj/Main.strings", root, True)

    assert isinstance(en, VariantGroup)
    assert fr is en
    assert en.name == "Main"
    assert en.real_path == "/root"
    # The walk stops at the localization folder: no 'en.lproj' group
    assert root.groups == []
    assert root.children == [en]


def test_same_name_with_other_extension_folds_together(root: Group, resolver: GroupResolver) -> None:
    strings = resolver.group_for_path_in_group("/root/en.lproj/Main.strings", root)
    xib = resolver.group_for_path_in_group("/root/Base.lproj/Main.xib", root)

    assert xib is strings


def test_distinct_base_names_get_distinct_variant_groups(root: Group, resolver: GroupResolver) -> None:
    main = resolver.group_for_path_in_group("/root/en.lproj/Main.strings", root)
    other = resolver.group_for_path_in_group("/root/en.lproj/Other.strings", root)

    assert main is not other
    assert [c.name for c in root.children] == ["Main", "Other"]


def test_non_localized_file_is_never_folded(root: Group, resolver: GroupResolver) -> None:
    resolver.group_for_path_in_group("/root/en.lproj/Main.strings", root)

    assert resolver.group_for_path_in_group("/root/Main.strings", root) is root


def test_localization_suffix_must_end_the_folder_name(root: Group, resolver: GroupResolver) -> None:
    assert resolver.is_localization_folder("en.lproj")
    assert not resolver.is_localization_folder("x.lproj.bak")

    assert resolver.group_for_path_in_group("/root/x.lproj.bak/A.txt", root) is root

    group = resolver.group_for_path_in_group("/root/x.lproj.bak/A.txt", root, True)
    assert isinstance(group, Group)
    assert group.name == "x.lproj.bak"


def test_localized_file_below_mirrored_directories(root: Group, resolver: GroupResolver) -> None:
    variant = resolver.group_for_path_in_group("/root/Resources/en.lproj/Help.strings", root, True)

    resources = root.child("Resources")
    assert isinstance(resources, Group)
    assert variant.parent is resources
    assert variant.real_path == "/root/Resources"


def test_variant_group_is_shared_across_starting_groups(root: Group, resolver: GroupResolver) -> None:
    other_start = root.new_group("Other")

    first = resolver.group_for_path_in_group("/root/en.lproj/Main.strings", root)
    second = resolver.group_for_path_in_group("/root/de.lproj/Main.strings", other_start)

    assert second is first
    assert other_start.children == []


def test_custom_localization_pattern() -> None:
    resolver = GroupResolver(PathCache(), localization_pattern=r"\.locale$")
    root = Group(path="/root", source_tree=SourceTree.ABSOLUTE)

    assert resolver.is_localization_folder("en.locale")
    assert not resolver.is_localization_folder("en.lproj")
    assert isinstance(resolver.group_for_path_in_group("/root/en.locale/A.txt", root), VariantGroup)
