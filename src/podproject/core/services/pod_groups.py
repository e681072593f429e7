from __future__ import annotations

"""
Pod and Specification Group Registry.

Creates and locates the top-level group of every installed Pod, the nested
groups of its subspecs, the fixed-name spec subgroups and the per-Pod
'Support Files' group.
"""

import logging
from typing import List, Optional

from podproject.domain import constants as const
from podproject.domain.errors import (
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidArgumentError,
)
from podproject.domain.tree_models import Group, SourceTree
from podproject.infra.fs import PathLike

logger = logging.getLogger(__name__)


def spec_root_name(spec_name: str) -> str:
    """Return the name of the root specification ('Foo/Sub' -> 'Foo')."""
    return spec_name.split("/", 1)[0]


class PodGroupRegistry:
    """
    Registry of the Pod groups living under the 'Pods' and 'Development Pods'
    root groups.
    """

    def __init__(self, pods: Group, development_pods: Group) -> None:
        self.pods = pods
        self.development_pods = development_pods

    def add_pod_group(
            self,
            pod_name: str,
            path: PathLike,
            development: bool = False,
            absolute: bool = False,
    ) -> Group:
        """
        Create the group for the Pod with the given name and configure its path.

        Args:
            pod_name: Name of the Pod.
            path: Path to the root of the Pod.
            development: Add the group to 'Development Pods' instead of 'Pods'.
            absolute: Store the group path as absolute instead of group-relative.

        Returns:
            Group: The new group.

        Raises:
            DuplicateGroupError: If a group for the Pod already exists.
        """
        if self.pod_group(pod_name) is not None:
            raise DuplicateGroupError(pod_name)

        parent_group = self.development_pods if development else self.pods
        source_tree = SourceTree.ABSOLUTE if absolute else SourceTree.GROUP

        group = parent_group.new_group(pod_name, path, source_tree)
        logger.debug(f"Registered Pod group '{pod_name}' under '{parent_group.display_name}'")
        return group

    def pod_groups(self) -> List[Group]:
        return self.pods.groups + self.development_pods.groups

    def pod_group(self, pod_name: str) -> Optional[Group]:
        """Return the first Pod group named `pod_name`, or None."""
        for group in self.pod_groups():
            if group.name == pod_name:
                return group
        return None

    def group_for_spec(self, spec_name: str, subgroup_key: Optional[str] = None) -> Group:
        """
        Return the group for the specification, creating nested groups as needed.

        Args:
            spec_name: Full name of the specification ('Pod/Subspec/...').
            subgroup_key: Optional fixed subgroup ('resources' or 'frameworks').

        Raises:
            GroupNotFoundError: If the root Pod has no group yet.
            InvalidArgumentError: If `subgroup_key` is not recognized.
        """
        pod_name = spec_root_name(spec_name)
        group = self.pod_group(pod_name)
        if group is None:
            raise GroupNotFoundError(pod_name)

        if spec_name != pod_name:
            subspec_names = [n for n in spec_name[len(pod_name) + 1:].split("/") if n]
            for name in subspec_names:
                group = _child_group(group, name)

        if subgroup_key is not None:
            subgroup_name = const.SPEC_SUBGROUPS.get(str(subgroup_key))
            if subgroup_name is None:
                raise InvalidArgumentError(subgroup_key)
            group = _child_group(group, subgroup_name)

        return group

    def pod_support_files_group(self, pod_name: str, dir: PathLike) -> Group:
        """
        Return the 'Support Files' group of the Pod, creating it bound to `dir`.

        Raises:
            GroupNotFoundError: If the Pod group has not been registered.
        """
        group = self.pod_group(pod_name)
        if group is None:
            raise GroupNotFoundError(pod_name)

        support_files_group = group.child_group(const.SUPPORT_FILES_GROUP_NAME)
        if support_files_group is not None:
            return support_files_group
        return group.new_group(const.SUPPORT_FILES_GROUP_NAME, dir)


def _child_group(group: Group, name: str) -> Group:
    existing = group.child_group(name)
    if existing is not None:
        return existing
    return group.new_group(name)
