from __future__ import annotations

"""
Path Identity Cache.

Two in-memory lookup tables guaranteeing at most one tree node per physical
identity: absolute path -> file reference, and (parent directory, base name)
-> variant group. The cache holds non-owning references and never evicts on
its own; callers removing a node from the tree purge the entry themselves.
"""

import logging
from typing import Dict, Optional, Tuple

from podproject.domain.tree_models import FileReference, VariantGroup
from podproject.infra.fs import PathLike, normalize_abs_path

logger = logging.getLogger(__name__)

VariantKey = Tuple[str, str]


class PathCache:
    """Identity index of file references and variant groups for one project."""

    def __init__(self) -> None:
        self._refs_by_absolute_path: Dict[str, FileReference] = {}
        self._variant_groups_by_path_and_name: Dict[VariantKey, VariantGroup] = {}

    def __len__(self) -> int:
        return len(self._refs_by_absolute_path)

    # -------------------------------------------------------------------------
    # File references
    # -------------------------------------------------------------------------

    def record_file_reference(self, path: PathLike, ref: FileReference) -> None:
        self._refs_by_absolute_path[normalize_abs_path(path)] = ref

    def lookup_file_reference(self, path: PathLike) -> Optional[FileReference]:
        return self._refs_by_absolute_path.get(normalize_abs_path(path))

    def forget_file_reference(self, path: PathLike) -> Optional[FileReference]:
        """
        Drop the entry for `path` so a new reference can be created for it.

        Returns:
            Optional[FileReference]: The evicted reference, if any.
        """
        ref = self._refs_by_absolute_path.pop(normalize_abs_path(path), None)
        if ref is not None:
            logger.debug(f"PathCache: Forgot file reference for {path}")
        return ref

    # -------------------------------------------------------------------------
    # Variant groups
    # -------------------------------------------------------------------------

    def record_variant_group(self, parent_dir: PathLike, base_name: str, group: VariantGroup) -> None:
        self._variant_groups_by_path_and_name[self._variant_key(parent_dir, base_name)] = group

    def lookup_variant_group(self, parent_dir: PathLike, base_name: str) -> Optional[VariantGroup]:
        return self._variant_groups_by_path_and_name.get(self._variant_key(parent_dir, base_name))

    @staticmethod
    def _variant_key(parent_dir: PathLike, base_name: str) -> VariantKey:
        return normalize_abs_path(parent_dir), base_name
