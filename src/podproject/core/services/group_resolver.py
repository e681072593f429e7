from __future__ import annotations

"""
Group Resolver.

Computes the group under which the file reference for an absolute path has to
live. Optionally mirrors the on-disk directory structure as nested groups
(similar to `mkdir -p`) and folds files found inside localization folders
(`*.lproj`) into a single variant group per logical resource.
"""

import logging
import os
import re
from typing import Pattern, Union

from podproject.core.services.path_cache import PathCache
from podproject.domain import constants as const
from podproject.domain.errors import InvalidPathError
from podproject.domain.tree_models import Group, VariantGroup
from podproject.infra.fs import (
    PathLike,
    is_absolute_path,
    normalize_abs_path,
    relative_path_from,
    split_segments,
    strip_extension,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class GroupResolver:
    """
    Resolves destination groups using the variant-group table of a PathCache.

    Args:
        cache: Identity cache owned by the project.
        localization_pattern: Regex identifying localization folder names.
    """

    def __init__(
            self,
            cache: PathCache,
            localization_pattern: str = const.LOCALIZATION_FOLDER_PATTERN,
    ) -> None:
        self._cache = cache
        self._lproj_rx: Pattern[str] = re.compile(localization_pattern)

    def is_localization_folder(self, name: str) -> bool:
        return bool(self._lproj_rx.search(name))

    def group_for_path_in_group(
            self,
            absolute_path: PathLike,
            group: Group,
            reflect_file_system_structure: bool = False,
    ) -> Union[Group, VariantGroup]:
        """
        Return the group for an absolute file path relative to `group`.

        The same variant group is returned for files sharing a name inside
        sibling localization folders, even if their extensions differ.

        Args:
            absolute_path: Path of the file being registered.
            group: Starting group used as the base of the relative path.
            reflect_file_system_structure: Create intermediate groups for
                each directory segment between `group` and the file.

        Returns:
            Union[Group, VariantGroup]: The destination, a VariantGroup for localized files.

        Raises:
            InvalidPathError: If `absolute_path` is not absolute.
        """
        if not is_absolute_path(absolute_path):
            raise InvalidPathError(absolute_path)

        file_path = normalize_abs_path(absolute_path)
        relative_dir = os.path.dirname(relative_path_from(file_path, group.real_path))

        # 1. Subgroups for folders; a localization folder ends the walk
        if reflect_file_system_structure:
            group = self._mirror_segments(group, relative_dir)

        # 2. Localized file: fold into its variant group
        parent_dir = os.path.dirname(file_path)
        if self.is_localization_folder(os.path.basename(parent_dir)):
            group = self._variant_group_for(file_path, group)

        return group

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _mirror_segments(self, group: Group, relative_dir: str) -> Group:
        for name in split_segments(relative_dir):
            if self.is_localization_folder(name):
                break
            if name == const.CURRENT_DIR_MARKER:
                continue
            group = _subgroup(group, name)
        return group

    def _variant_group_for(self, file_path: str, group: Group) -> VariantGroup:
        file_name = strip_extension(os.path.basename(file_path))
        lproj_parent_dir = os.path.dirname(os.path.dirname(file_path))

        variant_group = self._cache.lookup_variant_group(lproj_parent_dir, file_name)
        if variant_group is None:
            variant_group = group.new_variant_group(file_name, lproj_parent_dir)
            self._cache.record_variant_group(lproj_parent_dir, file_name, variant_group)
            logger.debug(f"Variant group '{file_name}' bound to {lproj_parent_dir}")
        return variant_group


def _subgroup(group: Group, name: str) -> Group:
    """Look up the child group named `name`, creating it bound to `name` if absent."""
    existing = group.child_group(name)
    if existing is not None:
        return existing
    return group.new_group(name, name)
