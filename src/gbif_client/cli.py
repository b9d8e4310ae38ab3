"""
Command-line interface.

Thin wrapper over the API modules: each command makes one call and prints
the JSON response.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from gbif_client import __version__, occurrences, registry, species
from gbif_client.config import get_settings
from gbif_client.errors import GbifError
from gbif_client.routing import Family

REGISTRY_CALLS = {
    Family.NETWORK: registry.networks,
    Family.NODE: registry.nodes,
    Family.ORGANIZATION: registry.organizations,
    Family.INSTALLATION: registry.installations,
    Family.DATASET: registry.datasets,
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gbif-client",
        description="Query the GBIF species, occurrence and registry APIs",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log request and response headers to stdout",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    match_parser = subparsers.add_parser("match", help="Match a name against the backbone taxonomy")
    match_parser.add_argument("name", help="Scientific name")
    match_parser.add_argument("--rank", default=None)
    match_parser.add_argument("--kingdom", default=None)
    match_parser.add_argument("--strict", action="store_true", default=None)

    occ_parser = subparsers.add_parser("occurrences", help="Search occurrence records")
    occ_parser.add_argument("--taxon-key", type=int, action="append", default=None)
    occ_parser.add_argument("--country", default=None)
    occ_parser.add_argument("--limit", type=int, default=20)
    occ_parser.add_argument("--offset", type=int, default=0)

    reg_parser = subparsers.add_parser("registry", help="Fetch registry metadata")
    reg_parser.add_argument("family", choices=[f.value for f in Family])
    reg_parser.add_argument("--data", default="all", help="Sub-resource category (default: all)")
    reg_parser.add_argument("--uuid", default=None)
    reg_parser.add_argument("--isocode", default=None, help="Country code (node --data country)")
    reg_parser.add_argument("--limit", type=int, default=100)

    subparsers.add_parser("info", help="Show configuration")

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_match(args: argparse.Namespace) -> int:
    """Handle the 'match' command."""
    _print_json(
        species.name_backbone(
            name=args.name, rank=args.rank, kingdom=args.kingdom, strict=args.strict, verbose=args.verbose
        )
    )
    return 0


def cmd_occurrences(args: argparse.Namespace) -> int:
    """Handle the 'occurrences' command."""
    _print_json(
        occurrences.search(
            taxonKey=args.taxon_key,
            country=args.country,
            limit=args.limit,
            offset=args.offset,
            verbose=args.verbose,
        )
    )
    return 0


def cmd_registry(args: argparse.Namespace) -> int:
    """Handle the 'registry' command."""
    family = Family(args.family)
    kwargs: dict[str, Any] = {"data": args.data, "uuid": args.uuid, "limit": args.limit, "verbose": args.verbose}
    if family is Family.NODE:
        kwargs["isocode"] = args.isocode
    _print_json(REGISTRY_CALLS[family](**kwargs))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Version: {__version__}")
    print(f"Base URL: {settings.base_url}")
    print(f"User: {settings.user_name or '-'}")
    print(f"Timeout: {settings.timeout}s")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "match": cmd_match,
        "occurrences": cmd_occurrences,
        "registry": cmd_registry,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except GbifError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
