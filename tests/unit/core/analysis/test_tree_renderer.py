from __future__ import annotations

"""
Unit tests for the Org Chart Renderer.

Verifies connector layout, unit suffixes and insertion-order output.
"""

import pytest

from orgchart.core.analysis.tree_renderer import render_org_chart, render_tree_structure
from orgchart.domain.errors import UnsupportedNodeError
from orgchart.domain.tree_models import OrganizationalUnit, Person


def test_render_sample_chart(sample_chart):
    """Verify the full ASCII layout of the sample chart."""
    lines = render_org_chart(sample_chart["luc"])

    assert lines == [
        "luc/",
        "└── CAS/",
        "    ├── Andress",
        "    ├── Andrade",
        "    ├── CS/",
        "    │   ├── Sekharan",
        "    │   ├── Rom",
        "    │   └── Thiruvathukal",
        "    └── Math/",
        "        ├── Jensen",
        "        ├── Doty",
        "        └── Giaquinto",
    ]


def test_render_person_is_single_line():
    assert render_org_chart(Person("George")) == ["George"]


def test_render_empty_unit_is_single_line():
    assert render_org_chart(OrganizationalUnit("Empty")) == ["Empty/"]


def test_render_keeps_insertion_order():
    """Children are not sorted."""
    ou = OrganizationalUnit("Team", [Person("Zed"), Person("Amy")])
    assert render_org_chart(ou) == ["Team/", "├── Zed", "└── Amy"]


def test_render_tree_structure_appends_with_prefix():
    lines = ["existing"]
    render_tree_structure(OrganizationalUnit("T", [Person("a")]), lines, prefix=">>")
    assert lines == ["existing", ">>└── a"]


def test_render_rejects_foreign_root():
    with pytest.raises(UnsupportedNodeError):
        render_org_chart(42)  # type: ignore[arg-type]
