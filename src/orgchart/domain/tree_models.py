from __future__ import annotations

"""
Org Chart Data Models.

Defines the closed, recursive sum type used to describe an organization:
a node is either a Person (leaf) or an OrganizationalUnit (interior node
owning an ordered tuple of child nodes). Both variants are immutable.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from orgchart.domain.errors import UnsupportedNodeError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Person:
    """
    Represents a leaf entry (individual) in the org chart.

    Attributes:
        name: Display name of the individual. Not required to be unique.
    """
    name: str


@dataclass(frozen=True)
class OrganizationalUnit:
    """
    Represents a named grouping of people and sub-units.

    Children keep their insertion order. Any sequence is accepted,
    including an empty one, and is stored as a tuple.

    Attributes:
        name: Display name of the unit. Not required to be unique.
        children: Ordered child nodes owned by this unit.
    """
    name: str
    children: Tuple["Node", ...] = field(default=())

    def __post_init__(self) -> None:
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, NODE_TYPES):
                raise UnsupportedNodeError(child, context=f"unit {self.name!r}")
        object.__setattr__(self, "children", children)


# Closed set of variants: every consumer must handle both.
Node = Union[Person, OrganizationalUnit]
NODE_TYPES = (Person, OrganizationalUnit)