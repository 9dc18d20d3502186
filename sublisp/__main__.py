"""Command-line entry point: `python -m sublisp` or `sublisp`."""

import argparse
import logging
import sys

from sublisp import config, __version__
from sublisp.interpreter import Interpreter
from sublisp.printer import render
from sublisp.repl import Shell, run_lines

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sublisp", description="Substitution-based S-expression interpreter.")
    parser.add_argument("file", nargs="?", help="file to run line by line (if empty, starts the interactive shell)")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate one expression, print it and exit")
    parser.add_argument("--no-color", action="store_true", help="plain output in the interactive shell")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="overrides SUBLISP_LOG_LEVEL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level or config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()

    if args.expr is not None:
        print(render(interp.eval(args.expr)))
        return 0

    if args.file is not None:
        try:
            with open(args.file, "r") as f:
                return run_lines(interp, f, sys.stdout)
        except OSError as e:
            print(f"sublisp: cannot open {args.file!r}: {e.strerror}", file=sys.stderr)
            return 2

    Shell(interp, color=False if args.no_color else None).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
