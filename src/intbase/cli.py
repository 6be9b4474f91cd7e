"""Command line front end for integer base conversion."""

import argparse
import logging
import sys
from collections.abc import Sequence

from intbase.bases import SupportedBase, base_title, parse_base
from intbase.convert import convert, convert_all


def _base_arg(value: str) -> SupportedBase:
    try:
        return parse_base(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intbase",
        description="Convert an integer between binary, octal, decimal and hexadecimal",
    )
    parser.add_argument("number", help="Integer text in the source base")
    parser.add_argument(
        "source",
        type=_base_arg,
        help="Source base (2, 8, 10, 16 or bin, oct, dec, hex)",
    )
    parser.add_argument(
        "target",
        type=_base_arg,
        nargs="?",
        help="Target base; required unless --all is given",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print the number in every supported base",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr",
    )
    return parser


def _print_invalid(args: argparse.Namespace) -> None:
    print(
        f"Error: {args.number!r} is not a valid {base_title(args.source)} number.",
        file=sys.stderr,
    )


def run(args: argparse.Namespace) -> int:
    """Perform the conversion described by ``args`` and return the exit code."""
    log = logging.getLogger("intbase")

    if args.all:
        results = convert_all(args.number, args.source)
        if results is None:
            _print_invalid(args)
            return 1
        for base, text in results.items():
            print(f"{base_title(base)}: {text}")
        return 0

    log.debug(
        "Converting %r from %s to %s",
        args.number,
        args.source.name,
        args.target.name,
    )
    result = convert(args.number, args.source, args.target)
    if result is None:
        _print_invalid(args)
        return 1

    print(result)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.target is None and not args.all:
        parser.error("a target base is required unless --all is given")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(args))


if __name__ == "__main__":  # pragma: no cover
    main()
