from __future__ import annotations

"""
Pods Project.

Model class providing the helpers used to populate the Pods project during an
installation: Pod and spec groups, deduplicated file references, localized
variant groups and build configuration tweaks. One installation run owns one
instance; nothing here is shared between instances.
"""

import logging
import re
from typing import List, Optional, Union

from podproject.core.services.group_resolver import GroupResolver
from podproject.core.services.path_cache import PathCache
from podproject.core.services.pod_groups import PodGroupRegistry
from podproject.domain import constants as const
from podproject.domain.build_models import BuildConfiguration
from podproject.domain.document import ProjectDocument
from podproject.domain.errors import InvalidPathError
from podproject.domain.tree_models import FileReference, Group, SourceTree, VariantGroup
from podproject.infra.fs import PathLike, is_absolute_path

logger = logging.getLogger(__name__)

_NON_IDENTIFIER_RX = re.compile(r"[^a-zA-Z0-9_]")
_LEADING_DIGIT_RX = re.compile(r"^([0-9])")


def preprocessor_definition_for(configuration_name: str) -> str:
    """
    Derive the preprocessor definition named after a build configuration.

    'My Config!' -> 'MY_CONFIG_=1', '1abc' -> '_1ABC=1'.
    """
    token = _NON_IDENTIFIER_RX.sub("_", configuration_name)
    token = _LEADING_DIGIT_RX.sub(r"_\1", token)
    return f"{token.upper()}=1"


class Project(ProjectDocument):
    """
    The Pods project.

    Args:
        path: Location of the project file.
        skip_initialization: Start from an empty document (no default groups
            or configurations).
    """

    def __init__(self, path: PathLike, skip_initialization: bool = False) -> None:
        super().__init__(path, skip_initialization)
        self.support_files_group = self.new_group(const.TARGETS_SUPPORT_FILES_GROUP_NAME)
        self._cache = PathCache()
        self._resolver = GroupResolver(self._cache)
        self.pods = self.new_group(const.PODS_GROUP_NAME)
        self.development_pods = self.new_group(const.DEVELOPMENT_PODS_GROUP_NAME)
        self._registry = PodGroupRegistry(self.pods, self.development_pods)
        self.symroot = const.LEGACY_BUILD_ROOT

    # -------------------------------------------------------------------------
    # Legacy Xcode build root
    # -------------------------------------------------------------------------

    @property
    def symroot(self) -> Optional[str]:
        """Build root of the first configuration, None when there is none."""
        configs = self.build_configurations
        if not configs:
            return None
        return configs[0].build_settings.get(const.SYMROOT_KEY)

    @symroot.setter
    def symroot(self, value: str) -> None:
        self.set_build_output_root(value)

    def set_build_output_root(self, value: str) -> None:
        """Apply `value` as SYMROOT on every build configuration of the project."""
        for config in self.build_configuration_list:
            config.build_settings[const.SYMROOT_KEY] = value

    # -------------------------------------------------------------------------
    # Pod groups
    # -------------------------------------------------------------------------

    def add_pod_group(
            self,
            pod_name: str,
            path: PathLike,
            development: bool = False,
            absolute: bool = False,
    ) -> Group:
        return self._registry.add_pod_group(pod_name, path, development, absolute)

    def pod_groups(self) -> List[Group]:
        return self._registry.pod_groups()

    def pod_group(self, pod_name: str) -> Optional[Group]:
        return self._registry.pod_group(pod_name)

    def group_for_spec(self, spec_name: str, subgroup_key: Optional[str] = None) -> Group:
        return self._registry.group_for_spec(spec_name, subgroup_key)

    def pod_support_files_group(self, pod_name: str, dir: PathLike) -> Group:
        return self._registry.pod_support_files_group(pod_name, dir)

    # -------------------------------------------------------------------------
    # File references
    # -------------------------------------------------------------------------

    def add_file_reference(
            self,
            absolute_path: PathLike,
            group: Group,
            reflect_file_system_structure: bool = False,
    ) -> FileReference:
        """
        Add a file reference to the given path as a descendant of `group`.

        Adding the same path twice returns the reference created the first
        time, whatever group is passed the second time.

        Args:
            absolute_path: Path of the file.
            group: Group under which the reference is placed.
            reflect_file_system_structure: Create intermediate groups mirroring
                the directories between `group` and the file (like `mkdir -p`).

        Returns:
            FileReference: The new or existing file reference.

        Raises:
            InvalidPathError: If `absolute_path` is not absolute.
        """
        if not is_absolute_path(absolute_path):
            raise InvalidPathError(absolute_path)

        destination: Union[Group, VariantGroup] = self._resolver.group_for_path_in_group(
            absolute_path, group, reflect_file_system_structure
        )

        ref = self._cache.lookup_file_reference(absolute_path)
        if ref is not None:
            return ref

        ref = destination.new_file(absolute_path)
        self._cache.record_file_reference(absolute_path, ref)
        return ref

    def reference_for_path(self, absolute_path: PathLike) -> Optional[FileReference]:
        """
        Return the file reference registered for the absolute path, or None.

        Raises:
            InvalidPathError: If `absolute_path` is not absolute.
        """
        if not is_absolute_path(absolute_path):
            raise InvalidPathError(absolute_path)
        return self._cache.lookup_file_reference(absolute_path)

    def add_podfile(self, podfile_path: PathLike) -> FileReference:
        """Add a project-relative file reference to the Podfile."""
        podfile_ref = self.new_file(podfile_path, SourceTree.SOURCE_ROOT)
        podfile_ref.xc_language_specification_identifier = const.PODFILE_LANGUAGE_SPECIFICATION
        podfile_ref.last_known_file_type = const.PODFILE_FILE_TYPE
        return podfile_ref

    # -------------------------------------------------------------------------
    # Build configurations
    # -------------------------------------------------------------------------

    def add_build_configuration(self, name: str, kind: str) -> BuildConfiguration:
        """
        Add a build configuration and define a preprocessor macro named after it.

        The macro lets Pods restrict code to specific build configurations.

        Args:
            name: Name of the build configuration.
            kind: 'debug' or 'release', selects the baseline settings.

        Returns:
            BuildConfiguration: The new (or existing) configuration.
        """
        build_configuration = super().add_build_configuration(name, kind)
        settings = build_configuration.build_settings

        definitions = settings.get(const.PREPROCESSOR_DEFINITIONS_KEY)
        if definitions is None:
            definitions = []
        elif isinstance(definitions, str):
            definitions = [definitions]
        else:
            definitions = list(definitions)

        value = preprocessor_definition_for(name)
        if value not in definitions:
            definitions.append(value)
        settings[const.PREPROCESSOR_DEFINITIONS_KEY] = definitions
        return build_configuration
