"""
Evaluate a ueval script and print its result.

Exit status: 0 when the result is anything but #f, 1 for #f, 2 for an error.
"""

import argparse
import logging
import sys
from pathlib import Path

from ueval.config import get_log_level
from ueval.debug_utils.pprint import print_atom
from ueval.host import EchoRunner
from ueval.interpreter import Interpreter
from ueval.types.refcount import release

logger = logging.getLogger(__name__)


def main_with_args(source: str, dry_run: bool = False) -> int:
    logging.basicConfig(
        level=get_log_level(),
        format='%(message)s',
        stream=sys.stderr
    )

    runner = EchoRunner() if dry_run else None
    with Interpreter(runner=runner) as interp:
        result = interp.eval(source)
        try:
            print(print_atom(result))
            if result is not None and result.is_error:
                logger.error(result.value)
                return 2
            if result is not None and result.is_bool(False):
                return 1
            return 0
        finally:
            release(result)


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate a ueval condition/action script"
    )
    parser.add_argument(
        "script",
        type=Path,
        nargs="?",
        help="Path to a script file (reads stdin when omitted and no -e is given)",
    )
    parser.add_argument(
        "-e",
        "--expr",
        help="Evaluate this source text instead of a file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print commands passed to run instead of executing them",
    )
    args = parser.parse_args()

    if args.expr is not None:
        source = args.expr
    elif args.script is not None:
        source = args.script.read_text(encoding="utf-8")
    else:
        source = sys.stdin.read()

    sys.exit(main_with_args(source, dry_run=args.dry_run))


if __name__ == "__main__":
    main()
