from __future__ import annotations

"""
Project Tree Renderer.

Converts the project group hierarchy into an ASCII representation, used by
the CLI and for diagnostics in logs.
"""

from typing import List, Optional

from podproject.domain.tree_models import Container, FileReference, VariantGroup

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_project_tree(group: Container, lines: Optional[List[str]] = None, prefix: str = "") -> List[str]:
    """
    Recursively transform a group into a list of tree lines.

    Children keep their insertion order. Variant groups are suffixed with
    ' (variant)' so localized resources stand out.

    Args:
        group: Group whose descendants are rendered.
        lines: Accumulator for output strings; a new list when omitted.
        prefix: Indentation prefix for the current recursion level.

    Returns:
        List[str]: The accumulated lines.
    """
    if lines is None:
        lines = []

    total = len(group.children)
    for i, node in enumerate(group.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(node, FileReference):
            lines.append(f"{prefix}{connector}{node.display_name}")
            continue

        label = node.display_name
        if isinstance(node, VariantGroup):
            label += " (variant)"
        lines.append(f"{prefix}{connector}{label}")

        new_prefix = prefix + ("    " if is_last else "│   ")
        render_project_tree(node, lines, prefix=new_prefix)

    return lines
