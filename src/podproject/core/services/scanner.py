from __future__ import annotations

"""
Pod Directory Scanner.

Walks a Pod directory and yields the absolute paths of the files to register
in the project, pruning excluded directories during the walk.
"""

import logging
import os
import re
from typing import Iterable, List, Pattern

logger = logging.getLogger(__name__)


def compile_patterns(patterns: List[str]) -> List[Pattern[str]]:
    """Compile regex strings, skipping (and logging) invalid ones."""
    compiled: List[Pattern[str]] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Invalid exclude pattern '{p}': {e}")
    return compiled


def matches_any(name: str, patterns: List[Pattern[str]]) -> bool:
    return any(rx.search(name) for rx in patterns)


def yield_pod_files(pod_dir: str, exclude_rx: List[Pattern[str]]) -> Iterable[str]:
    """
    Yield the absolute path of every file under `pod_dir` in sorted order.

    Args:
        pod_dir: Root directory of the Pod.
        exclude_rx: Patterns matched against directory and file names.

    Yields:
        str: Absolute file path.
    """
    root_abs = os.path.abspath(pod_dir)

    for root, dirs, files in os.walk(root_abs):
        dirs[:] = sorted(d for d in dirs if not matches_any(d, exclude_rx))
        for file_name in sorted(files):
            if matches_any(file_name, exclude_rx):
                continue
            yield os.path.join(root, file_name)
