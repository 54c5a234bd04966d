from __future__ import annotations

"""
Org Chart Renderer.

Converts the recursive org chart model into an ASCII representation
using the standard connectors (├──, └──). Children keep their insertion
order.
"""

from typing import List

from orgchart.domain.errors import UnsupportedNodeError
from orgchart.domain.tree_models import Node, OrganizationalUnit, Person

UNIT_SUFFIX = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_org_chart(node: Node) -> List[str]:
    """
    Render a full chart, root line included.

    Args:
        node: Root of the chart.

    Returns:
        List[str]: One string per output line.
    """
    lines: List[str] = [_label(node)]
    if isinstance(node, OrganizationalUnit):
        render_tree_structure(node, lines)
    return lines


def render_tree_structure(
        org_unit: OrganizationalUnit,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Recursively append the children of `org_unit` to `lines`.

    Args:
        org_unit: Unit whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(org_unit.children)

    for i, child in enumerate(org_unit.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(child)}")

        if isinstance(child, OrganizationalUnit):
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(child, lines, prefix=new_prefix)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _label(node: Node) -> str:
    if isinstance(node, Person):
        return node.name
    if isinstance(node, OrganizationalUnit):
        return f"{node.name}{UNIT_SUFFIX}"
    raise UnsupportedNodeError(node, context="render")
