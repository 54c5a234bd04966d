from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Builds the sample org chart, checks every node against its expected size
and depth, and reports the outcome either as a human-readable summary or
as JSON. The exit code reflects whether every expectation held.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from orgchart.core.analysis.metrics import ChartSummary, summarize
from orgchart.core.analysis.tree_renderer import render_org_chart
from orgchart.domain.sample_data import SAMPLE_EXPECTATIONS, build_sample_chart
from orgchart.infra.logging import LoggingConfig, configure_logging, get_logger
from orgchart.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the sample chart verification workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 when every expectation holds, 1 otherwise.
    """
    parser = cli_args.build_parser()
    options = cli_args.args_to_options(parser.parse_args(argv))

    configure_logging(LoggingConfig(
        level=options["log_level"],
        console=True,
        log_file=options["log_file"],
    ))

    logger.debug("Building sample org chart...")
    chart = build_sample_chart()

    report = verify_chart(chart)
    ok = all(entry["ok"] for entry in report)

    for entry in report:
        if not entry["ok"]:
            logger.error(
                f"Metric mismatch for {entry['name']!r}: "
                f"expected size={entry['expected_size']} depth={entry['expected_depth']}, "
                f"got size={entry['size']} depth={entry['depth']}"
            )

    if options["json_output"]:
        print(json.dumps({"ok": ok, "nodes": report}, ensure_ascii=False, indent=2))
    else:
        if options["show_chart"]:
            print("\n".join(render_org_chart(chart["luc"])))
            print()
        _print_human_summary(report, ok)

    return 0 if ok else 1

# -----------------------------------------------------------------------------
# VERIFICATION
# -----------------------------------------------------------------------------

def verify_chart(chart: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Compare each sample node's metrics with SAMPLE_EXPECTATIONS.

    Args:
        chart: Nodes keyed by identifier, as returned by build_sample_chart().

    Returns:
        List[Dict[str, Any]]: One entry per expected node, in expectation order.
    """
    report: List[Dict[str, Any]] = []
    for key, (expected_size, expected_depth) in SAMPLE_EXPECTATIONS.items():
        summary: ChartSummary = summarize(chart[key])
        entry = asdict(summary)
        entry["expected_size"] = expected_size
        entry["expected_depth"] = expected_depth
        entry["ok"] = summary.size == expected_size and summary.depth == expected_depth
        report.append(entry)
    return report

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(report: List[Dict[str, Any]], ok: bool) -> None:
    print(f"{'node':<8} {'kind':<7} {'size':>4} {'depth':>5}  status")
    for entry in report:
        status = "ok" if entry["ok"] else "MISMATCH"
        print(
            f"{entry['name']:<8} {entry['kind']:<7} "
            f"{entry['size']:>4} {entry['depth']:>5}  {status}"
        )

    if ok:
        print("All expectations hold.")
    else:
        print("ERROR: Some expectations failed.", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
