from __future__ import annotations

"""
Build Configuration Data Models.

A build configuration is a name plus a mutable map of build settings. The
configuration list keeps them in creation order and supports lookup by name.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from podproject.domain import constants as const
from podproject.domain.errors import InvalidArgumentError


@dataclass(eq=False)
class BuildConfiguration:
    """
    Named set of build settings.

    Attributes:
        name: Configuration name (e.g. 'Debug').
        build_settings: Mutable settings map. Values are strings or lists of strings.
    """
    name: str
    build_settings: Dict[str, Any] = field(default_factory=dict)


@dataclass
class BuildConfigurationList:
    build_configurations: List[BuildConfiguration] = field(default_factory=list)

    def __iter__(self) -> Iterator[BuildConfiguration]:
        return iter(self.build_configurations)

    def __len__(self) -> int:
        return len(self.build_configurations)

    def get(self, name: str) -> Optional[BuildConfiguration]:
        for config in self.build_configurations:
            if config.name == name:
                return config
        return None


def baseline_build_settings(kind: str) -> Dict[str, Any]:
    """
    Build the default settings for a new configuration of the given kind.

    Args:
        kind: 'debug' or 'release'.

    Returns:
        Dict[str, Any]: Deep copy of the shared settings merged with the kind-specific ones.

    Raises:
        InvalidArgumentError: If the kind is not recognized.
    """
    key = str(kind).strip().lower()
    if key not in const.BUILD_CONFIGURATION_KINDS:
        raise InvalidArgumentError(kind, f"Unrecognized build configuration type `{kind}`")

    settings = copy.deepcopy(const.PROJECT_DEFAULT_BUILD_SETTINGS["all"])
    settings.update(copy.deepcopy(const.PROJECT_DEFAULT_BUILD_SETTINGS[key]))
    return settings
