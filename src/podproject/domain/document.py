from __future__ import annotations

"""
Project Document.

Root object of the project model: owns the main group and the list of build
configurations. Persistence is out of scope; the document only lives in
memory for the duration of an installation run.
"""

import logging
import os
from typing import List, Optional, Union

from podproject.domain import constants as const
from podproject.domain.build_models import (
    BuildConfiguration,
    BuildConfigurationList,
    baseline_build_settings,
)
from podproject.domain.tree_models import FileReference, Group, SourceTree
from podproject.infra.fs import PathLike, to_str_path

logger = logging.getLogger(__name__)


class ProjectDocument:
    """
    In-memory project file.

    The main group is bound to the directory containing the project file, so
    every group-relative path in the tree resolves against it.
    """

    def __init__(self, path: PathLike, skip_initialization: bool = False) -> None:
        """
        Args:
            path: Location of the project file (e.g. '/src/Pods/Pods.xcodeproj').
            skip_initialization: When True the document starts without the
                default Products/Frameworks groups and build configurations.
        """
        self.path = os.path.abspath(to_str_path(path))
        self.main_group = Group(path=self.project_dir, source_tree=SourceTree.ABSOLUTE)
        self.build_configuration_list = BuildConfigurationList()

        if not skip_initialization:
            self._initialize_from_scratch()

    @property
    def project_dir(self) -> str:
        return os.path.dirname(self.path)

    @property
    def build_configurations(self) -> List[BuildConfiguration]:
        return list(self.build_configuration_list)

    # -------------------------------------------------------------------------
    # Tree helpers
    # -------------------------------------------------------------------------

    def new_group(
            self,
            name: str,
            path: Optional[PathLike] = None,
            source_tree: Union[SourceTree, str] = SourceTree.GROUP,
    ) -> Group:
        """Create a group as the last child of the main group."""
        return self.main_group.new_group(name, path, source_tree)

    def new_file(
            self,
            path: PathLike,
            source_tree: Union[SourceTree, str] = SourceTree.GROUP,
    ) -> FileReference:
        """Create a file reference as the last child of the main group."""
        return self.main_group.new_file(path, source_tree)

    # -------------------------------------------------------------------------
    # Build configurations
    # -------------------------------------------------------------------------

    def add_build_configuration(self, name: str, kind: str) -> BuildConfiguration:
        """
        Add a build configuration populated with the baseline settings of `kind`.

        Returns the existing configuration unchanged when one with the same
        name is already present.

        Raises:
            InvalidArgumentError: If `kind` is neither 'debug' nor 'release'.
        """
        existing = self.build_configuration_list.get(name)
        if existing is not None:
            return existing

        config = BuildConfiguration(name=name, build_settings=baseline_build_settings(kind))
        self.build_configuration_list.build_configurations.append(config)
        logger.debug(f"Added build configuration '{name}' ({kind})")
        return config

    def _initialize_from_scratch(self) -> None:
        self.main_group.new_group(const.PRODUCTS_GROUP_NAME)
        self.main_group.new_group(const.FRAMEWORKS_GROUP_NAME)
        self.add_build_configuration("Debug", "debug")
        self.add_build_configuration("Release", "release")
