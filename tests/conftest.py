from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without install.
2. Provides project fixtures rooted at a fixed, purely lexical location.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from podproject.core.project import Project  # noqa: E402

# Project paths are never touched on disk by the model
PROJECT_DIR = "/work/Pods"
PROJECT_PATH = PROJECT_DIR + "/Pods.xcodeproj"


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def project() -> Project:
    """Return a fresh project whose main group is bound to /work/Pods."""
    return Project(PROJECT_PATH)


@pytest.fixture
def foo_group(project: Project):
    """Register the 'Foo' Pod bound to /work/Pods/Foo and return its group."""
    return project.add_pod_group("Foo", PROJECT_DIR + "/Foo")


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a complete, valid run configuration."""
    return {
        "pod_name": "Foo",
        "development": False,
        "absolute": False,
        "reflect_file_system_structure": True,
        "project_dir": "",
        "symroot": "${SRCROOT}/../build",
        "podfile_path": "",
        "configurations": {},
        "exclude_patterns": [r"^\."],
    }
