from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from etta_scaffold.config import (
    APP_NAME,
    EXIT_INVALID_ITEM_PATH,
    EXIT_IO_ERROR,
    EXIT_OK,
    EXIT_USAGE,
)
from etta_scaffold.core.resolver import resolve_scaffold_paths, validate_scaffold_inputs
from etta_scaffold.core.writer import write_scaffold
from etta_scaffold.errors import InvalidItemPath, ScaffoldIOError, UsageError

logger = logging.getLogger("etta_scaffold")


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    # Only used to format the usage text; arguments are taken verbatim.
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"{APP_NAME}: create an ETTA item skeleton inside a resource pack.",
        add_help=False,
    )
    parser.add_argument("description", help="pack description, also used as the pack root folder")
    parser.add_argument("item_path", help="item path under the pack root, e.g. weapons/sword")
    return parser


def parse_args(argv: List[str]) -> Tuple[str, str]:
    """
    Exactly two positional arguments. Nothing is treated as an option, so a
    description or item path may start with '-'.
    """
    if len(argv) != 2:
        raise UsageError(f"expected 2 arguments (description, item_path), got {len(argv)}")
    description, item_path = argv
    return description, item_path


def main(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        description, item_path = parse_args(argv)
    except UsageError as e:
        parser = build_parser(prog)
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    for r in validate_scaffold_inputs(description, item_path):
        if r.level.upper() == "WARNING":
            logger.warning("%s: %s", r.code, r.message)

    try:
        paths = resolve_scaffold_paths(description, item_path)
    except InvalidItemPath as e:
        logger.error("%s", e)
        return EXIT_INVALID_ITEM_PATH

    try:
        write_scaffold(paths)
    except ScaffoldIOError as e:
        logger.error("%s", e)
        return EXIT_IO_ERROR

    return EXIT_OK


def run(prog: Optional[str] = None) -> int:
    """
    Console entry point: configures stderr logging once, then runs main().
    """
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING, format="%(levelname)s: %(message)s")
    return main(prog=prog)


if __name__ == "__main__":
    sys.exit(run())
