"""Command-line interface for shot-card."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from shot_card import __version__
from shot_card.cache import ResolutionCache
from shot_card.config import Settings
from shot_card.core import accent_color, load_recent_coffees
from shot_card.debug import collect_debug_snapshot
from shot_card.exceptions import ShotCardError
from shot_card.render import render_card
from shot_card.schema import ResolvedCoffee
from shot_card.sources import AirtableRecordSource, BaseRecordSource, StaticRecordSource


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="shot-card",
        description="Render a preview card of recently brewed coffees",
    )
    parser.add_argument(
        "--records",
        help="JSON file mapping table names to records (default: Airtable)",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Env file with Airtable credentials (default: .env)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable info logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"shot-card {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    recent = commands.add_parser("recent", help="Print the last three distinct coffees")
    recent.add_argument("--json", action="store_true", help="Output as JSON")
    render = commands.add_parser("render", help="Write the card as PNG")
    render.add_argument("-o", "--output", default="og-image.png", help="Output PNG path")
    commands.add_parser("debug", help="Print table counts and samples")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        settings = Settings.from_env(env_file=args.env_file)
        source = _build_source(args.records, settings)

        if args.command == "debug":
            snapshot = asyncio.run(collect_debug_snapshot(source))
            print(snapshot.model_dump_json(indent=2))
            return 0

        cache = ResolutionCache(source)
        coffees = asyncio.run(load_recent_coffees(source, cache, excluded=settings.excluded_baristas))

        if args.command == "render":
            png = render_card(
                coffees,
                accent=accent_color(),
                title=settings.card_title,
                font_path=settings.font_path,
            )
            Path(args.output).write_bytes(png)
            print(f"Wrote {args.output} ({len(coffees)} coffees)")
        elif args.json:
            print(_dump_json(coffees))
        else:
            _print_formatted(coffees)
    except ShotCardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _build_source(records_path: str | None, settings: Settings) -> BaseRecordSource:
    if records_path:
        return StaticRecordSource.from_json_file(records_path)
    return AirtableRecordSource(
        api_key=settings.airtable_api_key,
        base_id=settings.airtable_base_id,
        timeout_sec=settings.airtable_timeout_sec,
    )


def _dump_json(coffees: list[ResolvedCoffee]) -> str:
    return json.dumps([coffee.model_dump() for coffee in coffees], indent=2, ensure_ascii=False)


def _print_formatted(coffees: list[ResolvedCoffee]) -> None:
    """Print coffees in human-readable format."""
    print()
    print("  Recent Coffee Selections")
    print()

    if not coffees:
        print("  No coffee data available")
    for index, coffee in enumerate(coffees, start=1):
        print(f"  {index}. {coffee.label}")

    print()


if __name__ == "__main__":
    sys.exit(main())
