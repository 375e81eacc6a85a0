#!/usr/bin/env python3
"""
Command-line entry point for the lis interpreter.

Usage:
    python -m lis                      # interactive session on stdin/stdout
    python -m lis FILE [FILE ...]      # evaluate files in order
    python -m lis -i FILE              # evaluate FILE, then start a session

Settings fall back to the LIS_PROMPT, LIS_PRELUDE_PATH, LIS_RECURSION_LIMIT
and LIS_LOG_LEVEL environment variables.
"""

import argparse
import logging
import sys
from pathlib import Path

from lis import config
from lis.errors import LisError
from lis.interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lis",
        description="A minimal Lisp interpreter",
    )
    parser.add_argument("files", nargs="*", type=Path, help="source files to evaluate")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start a session after evaluating the files")
    parser.add_argument("--prompt", default=None, help="session prompt")
    parser.add_argument("--prelude", action="append", type=Path, default=[],
                        help="source file evaluated before anything else (repeatable)")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--recursion-limit", type=int, default=None,
                        help="host recursion limit used for evaluation")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level or config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    recursion_limit = args.recursion_limit or config.get_recursion_limit()
    sys.setrecursionlimit(recursion_limit)
    logger.debug("recursion limit set to %d", recursion_limit)

    interp = Interpreter()
    try:
        for path in [*config.get_prelude_paths(), *args.prelude, *args.files]:
            interp.load(path)
    except LisError as err:
        print(f"error: {err.kind}: {err}", file=sys.stderr)
        return 1
    except OSError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    if args.interactive or not args.files:
        interp.repl(args.prompt if args.prompt is not None else config.get_prompt())
    return 0


if __name__ == "__main__":
    sys.exit(main())
