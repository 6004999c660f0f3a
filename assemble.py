#!/usr/bin/env python3
import logging
import os
import sys
from pathlib import Path

from asm16 import AssemblerException, default_output_path, run


LOG_LEVEL_ENV = "ASM16_LOG_LEVEL"


def usage(prog):
    print(f"Usage: {Path(prog).name} SOURCE [OUTPUT]", file=sys.stderr)


def print_error_chain(error):
    print(f"error: {error}", file=sys.stderr)

    cause = error.__cause__
    while cause is not None:
        print(f"caused by: {cause}", file=sys.stderr)
        cause = cause.__cause__


def main(argv=None):
    if argv is None:
        argv = sys.argv

    if len(argv) < 2 or len(argv) > 3:
        usage(argv[0] if argv else "assemble.py")
        return 1

    level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
    )

    filename_in = Path(argv[1])
    if len(argv) > 2:
        filename_out = Path(argv[2])
    else:
        filename_out = default_output_path(filename_in)

    try:
        run(filename_in, filename_out)
    except AssemblerException as e:
        print_error_chain(e)
        return 1

    return 0


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
