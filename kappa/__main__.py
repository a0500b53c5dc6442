"""Command-line entry point: ``python -m kappa FILE``."""

from __future__ import annotations

import argparse
import logging
import sys

from kappa import __version__
from kappa.errors import KappaError
from kappa.interpreter import Interpreter


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kappa", description="Run a Kappa source file.")
    parser.add_argument("file", help="source file to interpret")
    parser.add_argument("--dump-ast", action="store_true", default=None,
                        help="print each top-level node tree to stderr before running it")
    parser.add_argument("--keep-going", action="store_true",
                        help="skip forms that fail to build or evaluate instead of stopping")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    interpreter = Interpreter(dump_ast=args.dump_ast)
    try:
        interpreter.run_file(args.file, keep_going=args.keep_going)
    except OSError as exc:
        print(f"kappa: cannot read {args.file}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except KappaError as exc:
        print(f"kappa: {exc}", file=sys.stderr)
        return 1
    return 1 if interpreter.errors else 0


if __name__ == "__main__":
    sys.exit(main())
