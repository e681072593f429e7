from __future__ import annotations

from .core.project import Project, preprocessor_definition_for
from .domain.errors import (
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidArgumentError,
    InvalidPathError,
    ProjectError,
)
from .domain.tree_models import FileReference, Group, SourceTree, VariantGroup

__version__ = "0.1.0"

__all__ = [
    "Project",
    "preprocessor_definition_for",
    "ProjectError",
    "InvalidPathError",
    "DuplicateGroupError",
    "GroupNotFoundError",
    "InvalidArgumentError",
    "Group",
    "VariantGroup",
    "FileReference",
    "SourceTree",
]
