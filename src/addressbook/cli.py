"""Command line entry point for address validation and GCD utilities."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import settings
from .data.addresses_repository import load_addresses
from .errors import AddressLoadError
from .services.arithmetic import gcd_array
from .services.outputs import write_lines

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Validate and print address records, or compute a GCD.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help=f'Log level (default: "{settings.log_level}", from ADDRESSBOOK_LOG_LEVEL).',
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("print", "Print every address on its own line."),
        ("validate", "Report invalid addresses; exits 1 if any are found."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--file",
            type=Path,
            default=None,
            help="Address JSON file (overrides ADDRESSBOOK_ADDRESS_FILE).",
        )

    gcd_parser = subparsers.add_parser("gcd", help="Print the GCD of the given integers.")
    gcd_parser.add_argument("values", nargs="+", type=int, metavar="N")
    return parser


def _run_print(args: argparse.Namespace) -> int:
    collection = load_addresses(args.file)
    collection.print_all()
    return EXIT_OK


def _run_validate(args: argparse.Namespace) -> int:
    collection = load_addresses(args.file)
    report = collection.validate_all()
    write_lines(report)
    if report:
        logger.info("%d of %d addresses are invalid", len(report), len(collection))
        return EXIT_INVALID
    return EXIT_OK


def _run_gcd(args: argparse.Namespace) -> int:
    print(gcd_array(args.values))
    return EXIT_OK


_COMMANDS = {
    "print": _run_print,
    "validate": _run_validate,
    "gcd": _run_gcd,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return _COMMANDS[args.command](args)
    except AddressLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR


if __name__ == "__main__":
    sys.exit(main())
