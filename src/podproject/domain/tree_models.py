from __future__ import annotations

"""
Project Tree Data Models.

Defines the closed set of nodes that make up the project tree: groups,
variant groups (one logical localized resource) and file references. Parents
own their children; every node keeps a non-owning back-reference to its
parent which is used to compute the absolute directory it is bound to.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union

from podproject.domain import constants as const
from podproject.domain.errors import InvalidPathError
from podproject.infra.fs import PathLike, extension_of, to_str_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class SourceTree(str, Enum):
    """Anchor against which the path of a node is resolved."""
    GROUP = "<group>"
    ABSOLUTE = "<absolute>"
    SOURCE_ROOT = "SOURCE_ROOT"

    @classmethod
    def coerce(cls, value: Union["SourceTree", str]) -> "SourceTree":
        """Accept enum members, raw values or the short keys 'group', 'absolute', 'project'."""
        if isinstance(value, SourceTree):
            return value
        shortcuts = {
            "group": cls.GROUP,
            "absolute": cls.ABSOLUTE,
            "project": cls.SOURCE_ROOT,
        }
        if value in shortcuts:
            return shortcuts[value]
        return cls(value)


class NodeKind(str, Enum):
    GROUP = "group"
    VARIANT_GROUP = "variant_group"
    FILE_REFERENCE = "file_reference"


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class _PathMixin:
    """Path handling shared by every node kind."""

    name: Optional[str]
    path: Optional[str]
    source_tree: SourceTree
    parent: Optional["Container"]

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        if self.path:
            return os.path.basename(self.path)
        return ""

    @property
    def real_path(self) -> str:
        """
        Absolute directory (or file) this node is bound to.

        Group-relative nodes without a path inherit the real path of their
        parent.
        """
        if self.source_tree is SourceTree.ABSOLUTE:
            base = ""
        elif self.source_tree is SourceTree.SOURCE_ROOT:
            root = self.root
            base = "" if root is self else root.real_path
        else:
            base = self.parent.real_path if self.parent is not None else ""

        if not self.path:
            return base
        if not base:
            return self.path
        return os.path.normpath(os.path.join(base, self.path))

    @property
    def root(self) -> "_PathMixin":
        node: _PathMixin = self
        while node.parent is not None:
            node = node.parent
        return node

    def set_path(self, path: Optional[PathLike], source_tree: Union[SourceTree, str] = SourceTree.GROUP) -> None:
        """
        Bind the node to a path using the given source tree.

        With the group source tree an absolute path is stored relative to the
        parent's real path. The absolute source tree only accepts absolute paths.
        """
        tree = SourceTree.coerce(source_tree)
        self.source_tree = tree
        if path is None:
            self.path = None
            return

        raw = to_str_path(path)
        if tree is SourceTree.ABSOLUTE:
            if not os.path.isabs(raw):
                raise InvalidPathError(raw)
            self.path = os.path.normpath(raw)
            return

        if not os.path.isabs(raw):
            self.path = raw
            return

        if tree is SourceTree.SOURCE_ROOT:
            base = self.root.real_path
        else:
            base = self.parent.real_path if self.parent is not None else ""
        self.path = os.path.relpath(raw, base) if base else raw


class _ContainerMixin(_PathMixin):
    """Child management shared by groups and variant groups."""

    children: List["Node"]

    def child(self, name: str) -> Optional["Node"]:
        """Return the first direct child whose display name matches, or None."""
        for node in self.children:
            if node.display_name == name:
                return node
        return None

    def new_file(self, path: PathLike, source_tree: Union[SourceTree, str] = SourceTree.GROUP) -> "FileReference":
        """Create a file reference for `path` as the last child of this node."""
        ref = FileReference(parent=self)
        ref.set_path(path, source_tree)
        ref.last_known_file_type = const.FILE_TYPES_BY_EXTENSION.get(
            extension_of(path), const.DEFAULT_FILE_TYPE
        )
        self.children.append(ref)
        logger.debug(f"New file reference '{ref.display_name}' in '{self.display_name}'")
        return ref

    @property
    def groups(self) -> List["Group"]:
        return [n for n in self.children if isinstance(n, Group)]

    @property
    def files(self) -> List["FileReference"]:
        return [n for n in self.children if isinstance(n, FileReference)]


@dataclass(eq=False)
class FileReference(_PathMixin):
    """
    Leaf node pointing at one physical file.

    Attributes:
        name: Optional explicit display name.
        path: Path relative to the source tree anchor.
        source_tree: Anchor used to resolve `path`.
        last_known_file_type: Xcode file type identifier derived from the extension.
        xc_language_specification_identifier: Optional editor language override.
    """
    name: Optional[str] = None
    path: Optional[str] = None
    source_tree: SourceTree = SourceTree.GROUP
    last_known_file_type: Optional[str] = None
    xc_language_specification_identifier: Optional[str] = None
    parent: Optional["Container"] = field(default=None, repr=False)

    kind = NodeKind.FILE_REFERENCE


@dataclass(eq=False)
class VariantGroup(_ContainerMixin):
    """Group-like node holding one file reference per language of a localized resource."""
    name: Optional[str] = None
    path: Optional[str] = None
    source_tree: SourceTree = SourceTree.GROUP
    children: List["Node"] = field(default_factory=list, repr=False)
    parent: Optional["Container"] = field(default=None, repr=False)

    kind = NodeKind.VARIANT_GROUP


@dataclass(eq=False)
class Group(_ContainerMixin):
    """Named container optionally bound to a directory."""
    name: Optional[str] = None
    path: Optional[str] = None
    source_tree: SourceTree = SourceTree.GROUP
    children: List["Node"] = field(default_factory=list, repr=False)
    parent: Optional["Container"] = field(default=None, repr=False)

    kind = NodeKind.GROUP

    def child_group(self, name: str) -> Optional["Group"]:
        """Return the first plain subgroup named `name`, ignoring variant groups and files."""
        for node in self.groups:
            if node.display_name == name:
                return node
        return None

    def new_group(
            self,
            name: str,
            path: Optional[PathLike] = None,
            source_tree: Union[SourceTree, str] = SourceTree.GROUP,
    ) -> "Group":
        """Create a subgroup as the last child of this group."""
        group = Group(name=name, parent=self)
        group.set_path(path, source_tree)
        self.children.append(group)
        logger.debug(f"New group '{name}' in '{self.display_name}'")
        return group

    def new_variant_group(
            self,
            name: str,
            path: Optional[PathLike] = None,
            source_tree: Union[SourceTree, str] = SourceTree.GROUP,
    ) -> VariantGroup:
        """Create a variant group as the last child of this group."""
        group = VariantGroup(name=name, parent=self)
        group.set_path(path, source_tree)
        self.children.append(group)
        logger.debug(f"New variant group '{name}' in '{self.display_name}'")
        return group


Container = Union[Group, VariantGroup]
Node = Union[Group, VariantGroup, FileReference]

# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def iter_nodes(container: Container) -> Iterator[Node]:
    """Depth-first, pre-order iteration over every descendant of `container`."""
    for node in container.children:
        yield node
        if not isinstance(node, FileReference):
            yield from iter_nodes(node)


def iter_file_references(container: Container) -> Iterator[FileReference]:
    for node in iter_nodes(container):
        if isinstance(node, FileReference):
            yield node
