import argparse
import logging
import sys

from lox.config import ScannerConfig
from lox.runner import run_file, run_prompt

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

USAGE = "Usage: lox [script]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lox", usage="lox [-h] [-v] [--flat-comments] [script]")
    parser.add_argument("scripts", nargs="*", metavar="script")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--flat-comments",
        action="store_true",
        help="treat /* inside a block comment as plain text",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if len(args.scripts) > 1:
        print(USAGE)
        return EX_USAGE

    config = ScannerConfig(nested_block_comments=not args.flat_comments)

    if not args.scripts:
        run_prompt(config=config)
        return 0

    try:
        result = run_file(args.scripts[0], config=config)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"lox: cannot read {args.scripts[0]}: {exc}", file=sys.stderr)
        return EX_NOINPUT

    return 0 if result.ok else EX_DATAERR
