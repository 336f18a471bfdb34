# richerror/cli/main.py
import argparse
import logging

from richerror import __version__
from richerror.cli import generate_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "richerror",
        description="richerror - Structured errors and error catalog code generation"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", help="Path to YAML config file (default: ~/.richerror/config.yml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose (debug) logging")
    sub = parser.add_subparsers(dest="command")

    # generate - error constructors from a catalog
    generate_cmd.register_command(sub)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
