from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the sample chart runner and translates
the parsed namespace into runner options.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the orgchart demo runner.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="orgchart",
        description="Build the sample org chart and verify its size and depth metrics.",
    )

    p.add_argument(
        "--no-chart",
        action="store_true",
        help="Do not print the ASCII rendering of the chart.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the verification report as JSON.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotating).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into runner options.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Options consumed by the CLI controller.
    """
    return {
        "show_chart": not args.no_chart,
        "json_output": bool(args.json_output),
        "log_level": "DEBUG" if args.debug else "INFO",
        "log_file": args.log_file,
    }
