from __future__ import annotations

"""
Pod Directory Registration.

Builds a Pods project for one Pod directory from a validated run
configuration: registers the Pod group, adds a reference for every file found
on disk and applies the project-level settings (SYMROOT, Podfile, extra build
configurations).
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

from podproject.core.project import Project
from podproject.core.services.pod_groups import spec_root_name
from podproject.core.services.scanner import compile_patterns, yield_pod_files
from podproject.domain import constants as const
from podproject.domain.tree_models import FileReference, VariantGroup, iter_nodes

logger = logging.getLogger(__name__)

PROJECT_FILE_NAME = "Pods.xcodeproj"


@dataclass
class RegistrationResult:
    """
    Outcome of registering a Pod directory.

    Attributes:
        project: The populated project.
        pod_name: Full spec name the files were registered under.
        files_added: Number of distinct file references created.
        variant_groups: Number of variant groups in the tree.
        groups: Number of plain groups in the tree (root groups included).
        configurations: Preprocessor definitions by build configuration name.
    """
    project: Project
    pod_name: str
    files_added: int = 0
    variant_groups: int = 0
    groups: int = 0
    configurations: Dict[str, List[str]] = field(default_factory=dict)

    def to_summary(self) -> Dict[str, Any]:
        return {
            "pod_name": self.pod_name,
            "project_path": self.project.path,
            "files_added": self.files_added,
            "variant_groups": self.variant_groups,
            "groups": self.groups,
            "symroot": self.project.symroot,
            "configurations": self.configurations,
        }


def register_pod_directory(pod_dir: str, cfg: Dict[str, Any]) -> RegistrationResult:
    """
    Create a project and register every file of `pod_dir` into it.

    Args:
        pod_dir: Root directory of the Pod.
        cfg: Configuration normalized by `validate_config`.

    Returns:
        RegistrationResult: The project and registration counters.

    Raises:
        ProjectError: Propagated unchanged from the project model.
    """
    pod_dir = os.path.abspath(pod_dir)
    pod_name = cfg.get("pod_name") or os.path.basename(pod_dir)
    project_dir = os.path.abspath(cfg.get("project_dir") or os.path.dirname(pod_dir))

    project = Project(os.path.join(project_dir, PROJECT_FILE_NAME))
    for name, kind in cfg.get("configurations", {}).items():
        project.add_build_configuration(name, kind)
    # Extra configurations included
    project.symroot = cfg.get("symroot") or const.LEGACY_BUILD_ROOT

    podfile_path = cfg.get("podfile_path")
    if podfile_path:
        project.add_podfile(podfile_path)

    project.add_pod_group(
        spec_root_name(pod_name),
        pod_dir,
        development=bool(cfg.get("development")),
        absolute=bool(cfg.get("absolute")),
    )
    group = project.group_for_spec(pod_name)
    mirror = bool(cfg.get("reflect_file_system_structure"))

    exclude_rx = compile_patterns(cfg.get("exclude_patterns", []))
    seen = set()
    for file_path in yield_pod_files(pod_dir, exclude_rx):
        ref = project.add_file_reference(file_path, group, mirror)
        seen.add(id(ref))

    result = RegistrationResult(project=project, pod_name=pod_name, files_added=len(seen))
    for node in iter_nodes(project.main_group):
        if isinstance(node, VariantGroup):
            result.variant_groups += 1
        elif not isinstance(node, FileReference):
            result.groups += 1

    for config in project.build_configurations:
        result.configurations[config.name] = list(
            config.build_settings.get(const.PREPROCESSOR_DEFINITIONS_KEY, [])
        )

    logger.info(
        f"Registered {result.files_added} files of '{pod_name}' "
        f"({result.variant_groups} variant groups)"
    )
    return result
