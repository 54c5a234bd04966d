from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Default option values.
2. Mapping of boolean flags to runner options.
"""

from orgchart.interface.cli.args import args_to_options, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_defaults():
    options = args_to_options(parse_args([]))

    assert options == {
        "show_chart": True,
        "json_output": False,
        "log_level": "INFO",
        "log_file": None,
    }


def test_cli_flags_mapping():
    args = parse_args(["--no-chart", "--json", "--debug", "--log-file", "/tmp/orgchart.log"])
    options = args_to_options(args)

    assert options["show_chart"] is False
    assert options["json_output"] is True
    assert options["log_level"] == "DEBUG"
    assert options["log_file"] == "/tmp/orgchart.log"
