from __future__ import annotations

"""
Org Chart Structural Metrics.

Structural folds over the org chart sum type. Each fold is a free function
doing an exhaustive case analysis on the two variants, so adding a third
variant means revisiting every function in this module.
"""

import logging
from dataclasses import dataclass

from orgchart.domain.errors import UnsupportedNodeError
from orgchart.domain.tree_models import Node, OrganizationalUnit, Person

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ChartSummary:
    """
    Reporting snapshot of a single node.

    Attributes:
        name: Node display name.
        kind: "person" or "unit".
        size: Number of people reachable from the node.
        depth: Longest path, in nodes, from the node down to a leaf.
    """
    name: str
    kind: str
    size: int
    depth: int


def size(node: Node) -> int:
    """
    Count the Person leaves reachable from `node`.

    A Person counts as 1. A unit counts the people of all its children,
    so an empty unit has size 0.

    Args:
        node: Root of the subtree to measure.

    Returns:
        int: Number of people in the subtree.

    Raises:
        UnsupportedNodeError: If `node` is not a Person or OrganizationalUnit.
    """
    if isinstance(node, Person):
        return 1

    if isinstance(node, OrganizationalUnit):
        total = 0
        for child in node.children:
            total += size(child)
        return total

    raise UnsupportedNodeError(node, context="size")


def depth(node: Node) -> int:
    """
    Measure the longest path, in nodes, from `node` down to any leaf.

    A Person has depth 1. An empty unit is its own deepest point and also
    has depth 1. Otherwise a unit is one level above its deepest child.

    Args:
        node: Root of the subtree to measure.

    Returns:
        int: Depth of the subtree.

    Raises:
        UnsupportedNodeError: If `node` is not a Person or OrganizationalUnit.
    """
    if isinstance(node, Person):
        return 1

    if isinstance(node, OrganizationalUnit):
        deepest = 0
        for child in node.children:
            deepest = max(deepest, depth(child))
        return 1 + deepest

    raise UnsupportedNodeError(node, context="depth")


def summarize(node: Node) -> ChartSummary:
    """Bundle the name, variant and metrics of `node` for reporting."""
    if isinstance(node, Person):
        kind = "person"
    elif isinstance(node, OrganizationalUnit):
        kind = "unit"
    else:
        raise UnsupportedNodeError(node, context="summarize")

    summary = ChartSummary(name=node.name, kind=kind, size=size(node), depth=depth(node))
    logger.debug(f"Summary for {node.name!r}: size={summary.size}, depth={summary.depth}")
    return summary
