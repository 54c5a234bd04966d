"""
orgchart: organizational charts as a closed recursive sum type.

A chart node is either a Person (leaf) or an OrganizationalUnit holding an
ordered tuple of child nodes. `size` counts the people below a node and
`depth` measures its longest path down to a leaf.
"""

from orgchart.core.analysis.metrics import ChartSummary, depth, size, summarize
from orgchart.domain.errors import UnsupportedNodeError
from orgchart.domain.tree_models import Node, OrganizationalUnit, Person

__all__ = [
    "ChartSummary",
    "Node",
    "OrganizationalUnit",
    "Person",
    "UnsupportedNodeError",
    "depth",
    "size",
    "summarize",
]
__version__ = "0.1.0"
