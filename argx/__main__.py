"""
Argx Token Classifier

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Demo entry point: classifies its own command line and prints the result.

    python -m argx arg0 arg1 -key value -option --flag
"""

import os
import sys
from typing import Sequence

from argx.console import error_console
from argx.logger import logger
from argx.parser import parse
from argx.report import render
from argx.utils import setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    try:
        setup_logging()
    except ValueError as error:
        error_console.print(f"argx: {error}", markup=False)
        return 2
    result = parse(sys.argv if argv is None else argv)
    mode = os.getenv("ARGX_OUTPUT", "table")
    try:
        render(result, mode=mode)
    except ValueError as error:
        logger.error("%s", error)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
