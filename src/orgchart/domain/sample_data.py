from __future__ import annotations

"""
Sample Org Chart.

A small university chart built bottom-up from literal people and units,
along with the metrics every node of it is expected to produce.
"""

from typing import Dict, Tuple

from orgchart.domain.tree_models import Node, OrganizationalUnit, Person

# Expected (size, depth) per sample node, keyed by the name used in build_sample_chart.
SAMPLE_EXPECTATIONS: Dict[str, Tuple[int, int]] = {
    "george": (1, 1),
    "cs": (3, 2),
    "math": (3, 2),
    "cas": (8, 3),
    "luc": (8, 4),
}


def build_sample_chart() -> Dict[str, Node]:
    """
    Build fresh instances of every sample node.

    Returns:
        Dict[str, Node]: Nodes keyed by their short identifier. "luc" is the root.
    """
    george = Person("George")

    cs = OrganizationalUnit("CS", [
        Person("Sekharan"),
        Person("Rom"),
        Person("Thiruvathukal"),
    ])
    math = OrganizationalUnit("Math", [
        Person("Jensen"),
        Person("Doty"),
        Person("Giaquinto"),
    ])
    cas = OrganizationalUnit("CAS", [
        Person("Andress"),
        Person("Andrade"),
        cs,
        math,
    ])
    luc = OrganizationalUnit("luc", [cas])

    return {"george": george, "cs": cs, "math": math, "cas": cas, "luc": luc}
