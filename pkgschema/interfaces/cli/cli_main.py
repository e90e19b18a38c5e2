#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from pkgschema.__version__ import __version__
from pkgschema.helpers.logging_helper import configure_logging
from pkgschema.interfaces.cli.commands.show_cli import cmd_show, config_overrides_from_args
from pkgschema.services.cli_bootstrap_svc import get_config_service


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="pkgschema",
        description="pkgschema - XML Schema metadata declared by Python packages",
        epilog="Examples:\n"
        "  pkgschema show acme.orders acme.billing        # Import packages and show metadata\n"
        "  pkgschema show acme.orders --static -p src      # Parse src/acme/orders without importing\n"
        "  pkgschema show acme.orders --json               # Machine-readable output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--log-level", default=None, help="logging level (default: config log_level, INFO)")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'pkgschema <command> --help' for command-specific help)",
    )

    # show: Print schema metadata
    s = sub.add_parser("show", help="Show schema metadata of packages, sorted by package name")
    s.add_argument("packages", nargs="*", help="dotted package names (default: config packages)")
    s.add_argument("--static", action="store_true", help="parse package sources instead of importing them")
    s.add_argument(
        "-p",
        "--search-path",
        action="append",
        metavar="DIR",
        help="root to search for packages (repeatable)",
    )
    s.add_argument("--json", action="store_true", help="print JSON instead of tables")
    s.set_defaults(func=cmd_show)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    config_service = get_config_service(config_overrides_from_args(args))
    configure_logging(args.log_level or config_service.get("log_level", "INFO"))

    result: int = args.func(args, config_service)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
