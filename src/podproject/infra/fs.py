from __future__ import annotations

"""
FileSystem Path Utilities.

Pure string-level path helpers used by the project model. Nothing here touches
the disk or resolves symlinks: paths are compared exactly as the caller
spelled them, after lexical normalization.
"""

import os
from typing import List, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

# -----------------------------------------------------------------------------
# NORMALIZATION API
# -----------------------------------------------------------------------------

def to_str_path(path: PathLike) -> str:
    """Convert str or PathLike objects into a plain string path."""
    return os.fspath(path)


def is_absolute_path(path: Optional[PathLike]) -> bool:
    """
    Check whether the given path is absolute.

    Args:
        path: Raw path value (str or PathLike).

    Returns:
        bool: False for None and empty values.
    """
    if path is None:
        return False
    p = to_str_path(path)
    return bool(p) and os.path.isabs(p)


def normalize_abs_path(path: PathLike) -> str:
    """
    Lexically normalize an absolute path (collapses '..', '.' and duplicate separators).

    Symlinks are intentionally left untouched so the key matches what the
    caller registered.
    """
    return os.path.normpath(to_str_path(path))


def relative_path_from(path: PathLike, base: PathLike) -> str:
    """Compute the path of `path` relative to the directory `base`."""
    return os.path.relpath(to_str_path(path), to_str_path(base))


# -----------------------------------------------------------------------------
# DECOMPOSITION API
# -----------------------------------------------------------------------------

def split_segments(relative_path: str) -> List[str]:
    """
    Split a relative path into its individual segments.

    Empty segments are dropped; '.' and '..' are preserved.
    """
    return [part for part in relative_path.split(os.sep) if part]


def strip_extension(file_name: str) -> str:
    """Return the file name without its last extension ('Main.strings' -> 'Main')."""
    stem, _ = os.path.splitext(file_name)
    return stem


def extension_of(path: PathLike) -> str:
    """Return the lower-cased extension without the leading dot."""
    _, ext = os.path.splitext(to_str_path(path))
    return ext[1:].lower()
