from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process and checks the report content and
the exit codes for passing and failing expectations.
"""

import json
import logging

import pytest

from orgchart.infra.logging import reset_logging
from orgchart.interface.cli import app


@pytest.fixture(autouse=True)
def clean_logging():
    root = logging.getLogger()
    previous_level = root.level
    reset_logging()
    yield
    reset_logging()
    root.setLevel(previous_level)


def test_verify_chart_reports_every_node(sample_chart):
    report = app.verify_chart(sample_chart)

    assert [e["name"] for e in report] == ["George", "CS", "Math", "CAS", "luc"]
    assert all(e["ok"] for e in report)
    assert report[-1] == {
        "name": "luc",
        "kind": "unit",
        "size": 8,
        "depth": 4,
        "expected_size": 8,
        "expected_depth": 4,
        "ok": True,
    }


def test_main_json_output(capsys):
    exit_code = app.main(["--json"])
    out = capsys.readouterr().out

    payload = json.loads(out)
    assert exit_code == 0
    assert payload["ok"] is True
    assert len(payload["nodes"]) == 5


def test_main_human_output_includes_chart(capsys):
    exit_code = app.main([])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "└── CAS/" in out
    assert "All expectations hold." in out


def test_main_no_chart(capsys):
    app.main(["--no-chart"])
    out = capsys.readouterr().out

    assert "CAS/" not in out
    assert "All expectations hold." in out


def test_main_returns_one_on_mismatch(capsys, monkeypatch):
    monkeypatch.setitem(app.SAMPLE_EXPECTATIONS, "luc", (8, 5))

    exit_code = app.main(["--json"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload["ok"] is False
    assert [e["name"] for e in payload["nodes"] if not e["ok"]] == ["luc"]
