from __future__ import annotations

"""
Main Entry Point.

Routes execution to the CLI controller and makes sure an unexpected
failure is logged with its traceback before the process exits.
"""

import logging
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the orgchart CLI.

    Returns:
        int: Standard process exit code (0: Success, 1: Error).
    """
    from orgchart.interface.cli.app import main as cli_main

    try:
        return cli_main(argv)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logging.getLogger("orgchart.supervisor").critical(
            f"FATAL EXCEPTION DETECTED: {e}", exc_info=True
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
