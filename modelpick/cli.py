"""
Command line interface.

    modelpick purposes
    modelpick recommend models.yaml --purpose coding --count 3
    modelpick catalog models.yaml

Defaults for count, diversity, modality filtering and the catalog path come
from the config file (see ConfigManager); flags override them.
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modelpick.config.manager import ConfigManager
from modelpick.services.catalog import ModelCatalog
from modelpick.services.enrichment import enrich, group_by_provider
from modelpick.services.recommendation import UnknownPurposeError, recommend
from modelpick.utils.logger import log, setup_logging

EXIT_OK = 0
EXIT_USAGE = 1     # unknown purpose, bad config
EXIT_CATALOG = 2   # catalog missing or unreadable

PROVIDER_PRIORITY = ("anthropic", "openai", "google")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modelpick",
        description="Pick LLMs from a model catalog by purpose.",
    )
    parser.add_argument("--config", help="Config file (YAML or JSON)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("purposes", help="List available purposes")

    rec = sub.add_parser("recommend", help="Recommend models for a purpose")
    rec.add_argument("catalog", nargs="?", help="Catalog file (defaults to catalog.path)")
    rec.add_argument("--purpose", "-p", default="balanced")
    rec.add_argument("--count", "-n", type=int, default=None)
    rec.add_argument(
        "--all-modalities",
        action="store_true",
        help="Include image, audio and video generators",
    )
    rec.add_argument(
        "--no-diversity",
        action="store_true",
        help="Allow several picks from one provider",
    )

    cat = sub.add_parser("catalog", help="Show the catalog grouped by provider")
    cat.add_argument("catalog", nargs="?", help="Catalog file (defaults to catalog.path)")

    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Entry point for the `modelpick` console script."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    console = console or Console()

    config = ConfigManager(args.config)
    setup_logging(args.log_level or config.get("logging.level", "WARNING"))

    try:
        registry = config.get_purpose_registry()
    except ValueError as e:
        console.print(f"[bold red]{escape(str(e))}[/]")
        return EXIT_USAGE

    if args.command == "purposes":
        return _show_purposes(console, registry)

    catalog = _load_catalog(console, args.catalog or config.get("catalog.path"))
    if catalog is None:
        return EXIT_CATALOG

    if args.command == "catalog":
        return _show_catalog(console, catalog)

    count = args.count if args.count is not None else config.get("recommend.count", 1)
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        console.print(f"[bold red]Count must be a positive integer, got {escape(repr(count))}[/]")
        return EXIT_USAGE
    diversity = False if args.no_diversity else config.get("recommend.provider_diversity", True)
    text_only = False if args.all_modalities else config.get("recommend.text_only", True)

    try:
        picks = recommend(
            catalog.get_all_models(),
            args.purpose,
            count=count,
            provider_diversity=diversity,
            text_only=text_only,
            registry=registry,
        )
    except UnknownPurposeError as e:
        console.print(f"[bold red]{escape(str(e))}[/]")
        return EXIT_USAGE

    if not picks:
        console.print(f"[yellow]No models in {catalog.path} fit purpose '{args.purpose}'.[/]")
        return EXIT_OK

    table = Table(title=f"Recommended for '{args.purpose}'")
    table.add_column("#", justify="right")
    table.add_column("Model", style="cyan")
    table.add_column("Provider")
    table.add_column("Tier")
    table.add_column("Price")
    table.add_column("Context", justify="right")
    table.add_column("Score", justify="right")

    for index, pick in enumerate(picks, start=1):
        row = enrich(pick)
        table.add_row(
            str(index),
            row.id,
            row.provider_name,
            row.tier.value,
            row.price_label or "-",
            row.context_label or "-",
            f"{pick.score:.3f}",
        )

    console.print(table)
    return EXIT_OK


def _load_catalog(console: Console, path: Optional[str]) -> Optional[ModelCatalog]:
    if not path:
        console.print("[bold red]No catalog file given and catalog.path is not configured.[/]")
        return None

    catalog = ModelCatalog(path)
    if not catalog.load():
        console.print(f"[bold red]Could not load catalog: {path}[/]")
        return None

    log.debug(f"Catalog {path}: {len(catalog)} models")
    return catalog


def _show_purposes(console: Console, registry) -> int:
    table = Table(title="Purposes")
    table.add_column("Name", style="cyan")
    table.add_column("Tier")
    table.add_column("Cost / Quality / Context")
    table.add_column("Requires")
    table.add_column("Excludes")

    for name in sorted(registry):
        profile = registry[name]
        w = profile.weights
        requires = []
        if profile.require.tools:
            requires.append("tools")
        if profile.require.min_context:
            requires.append(f"context >= {profile.require.min_context}")
        excludes = [t.value for t in profile.exclude.tiers] + list(profile.exclude.patterns)

        table.add_row(
            name,
            profile.preferred_tier.value,
            f"{w.cost:g} / {w.quality:g} / {w.context:g}",
            ", ".join(requires) or "-",
            ", ".join(excludes) or "-",
        )

    console.print(table)
    return EXIT_OK


def _show_catalog(console: Console, catalog: ModelCatalog) -> int:
    enriched = [enrich(m) for m in catalog.iter_models()]

    for group in group_by_provider(enriched, priority=PROVIDER_PRIORITY):
        table = Table(title=f"{group.provider_name} ({len(group.models)})")
        table.add_column("Model", style="cyan")
        table.add_column("Name")
        table.add_column("Tier")
        table.add_column("Cost")
        table.add_column("Price")
        table.add_column("Context", justify="right")

        for row in group.models:
            table.add_row(
                row.id,
                row.name,
                row.tier.value,
                row.cost_tier.value,
                row.price_label or "-",
                row.context_label or "-",
            )
        console.print(table)

    return EXIT_OK
