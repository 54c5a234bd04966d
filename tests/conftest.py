from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts the 'src' directory on sys.path and exposes the sample org chart
to every test module.
"""

import os
import sys
from typing import Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from orgchart.domain.sample_data import build_sample_chart  # noqa: E402
from orgchart.domain.tree_models import Node  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_chart() -> Dict[str, Node]:
    """Fresh copy of the sample university chart, keyed by identifier."""
    return build_sample_chart()
