from __future__ import annotations

"""
Project Error Taxonomy.

All failures raised by the Pods project layer derive from ProjectError. They
signal programming errors at the call site and are never retried.
"""


class ProjectError(Exception):
    """Base class for every error raised by the project model."""


class InvalidPathError(ProjectError, ValueError):
    """A path argument that must be absolute was not."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Paths must be absolute: {path}")
        self.path = path


class DuplicateGroupError(ProjectError):
    """A pod group with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"A group for the Pod named `{name}` already exists")
        self.name = name


class GroupNotFoundError(ProjectError, LookupError):
    """No pod group exists for the requested pod name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unable to locate group for Pod named `{name}`")
        self.name = name


class InvalidArgumentError(ProjectError, ValueError):
    """An argument is outside of its fixed set of accepted values."""

    def __init__(self, key: object, message: str = "") -> None:
        super().__init__(message or f"Unrecognized subgroup key `{key}`")
        self.key = key
