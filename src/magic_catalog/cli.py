"""Command-line interface for Magic Catalog.

This module provides the main entry point for the CLI application, which
doubles as the demonstration driver for the spellbook API.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pydantic
import structlog

from magic_catalog import __version__
from magic_catalog.catalog import Spellbook
from magic_catalog.config import Settings, get_settings
from magic_catalog.exceptions import ConfigurationError, MagicCatalogError
from magic_catalog.models import Spell, SpellType

logger = structlog.get_logger()


def build_reference_spellbook() -> Spellbook:
    """Return the spellbook used by the demo."""

    book = Spellbook()
    book.add(Spell("Fireball", SpellType.FIRE, 80))
    book.add(Spell("Inferno", SpellType.FIRE, 95))
    book.add(Spell("Blizzard", SpellType.ICE, 90))
    book.add(Spell("Cure Wounds", SpellType.HEALING, 30))
    book.add(Spell("Resurrection", SpellType.NECROMANCY, 85))
    book.add(Spell("Apocalypse", SpellType.NECROMANCY, 100))
    book.add(Spell("Shadow Veil", SpellType.ILLUSION, 40))
    return book


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="magic-catalog", description="Magic Catalog")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Build the reference spellbook and report on it")
    demo_parser.add_argument(
        "--save",
        type=Path,
        default=None,
        help="Also write the reference spellbook to this file",
    )

    show_parser = subparsers.add_parser("show", help="List the spells of a saved spellbook by type")
    _add_file_argument(show_parser)

    top_parser = subparsers.add_parser("top", help="List the most powerful spells")
    _add_file_argument(top_parser)
    top_parser.add_argument(
        "-n",
        type=int,
        default=None,
        help="Number of spells to list (default: settings top_n)",
    )

    average_parser = subparsers.add_parser(
        "average", help="Average cost of spells with a given risk label"
    )
    average_parser.add_argument("risk_label", help="Risk label, e.g. Safe, Risky or Forbidden")
    _add_file_argument(average_parser)

    duel_parser = subparsers.add_parser("duel", help="Duel two spells picked by name")
    duel_parser.add_argument("first", help="Name of the first spell")
    duel_parser.add_argument("second", help="Name of the second spell")
    _add_file_argument(duel_parser)

    return parser


def _add_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Path to the spellbook file (default: settings catalog_path)",
    )


def _load(args: argparse.Namespace, settings: Settings) -> Spellbook:
    path: Path = args.file or settings.catalog_path
    return Spellbook.load_from_file(path)


def _cmd_demo(args: argparse.Namespace, settings: Settings) -> int:
    book = build_reference_spellbook()

    book.display_by_category()

    print(f"=== Top {settings.top_n} Spells ===")
    for spell in book.top_n(settings.top_n):
        print(spell)

    print(f"=== {settings.demo_risk_label} Spells Avg Mana Cost ===")
    print(book.average_cost(settings.demo_risk_label))

    print("=== Spell Duel ===")
    book.duel(Spell("Fireball", SpellType.FIRE, 80), Spell("Blizzard", SpellType.ICE, 90))

    if args.save is not None:
        book.save_to_file(args.save)
        print(f"Saved {len(book)} spells to {args.save}")

    return 0


def _cmd_show(args: argparse.Namespace, settings: Settings) -> int:
    _load(args, settings).display_by_category()
    return 0


def _cmd_top(args: argparse.Namespace, settings: Settings) -> int:
    n: int = settings.top_n if args.n is None else args.n
    for spell in _load(args, settings).top_n(n):
        print(spell)
    return 0


def _cmd_average(args: argparse.Namespace, settings: Settings) -> int:
    print(_load(args, settings).average_cost(args.risk_label))
    return 0


def _cmd_duel(args: argparse.Namespace, settings: Settings) -> int:
    book = _load(args, settings)

    contenders = []
    for name in (args.first, args.second):
        spell = book.find_by_name(name)
        if spell is None:
            logger.error("spell_not_found", name=name)
            print(f"No spell named {name!r}", file=sys.stderr)
            return 1
        contenders.append(spell)

    book.duel(*contenders)
    return 0


_COMMANDS = {
    "demo": _cmd_demo,
    "show": _cmd_show,
    "top": _cmd_top,
    "average": _cmd_average,
    "duel": _cmd_duel,
}


def _load_settings() -> Settings:
    try:
        return get_settings()
    except pydantic.ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Magic Catalog CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        settings = _load_settings()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # Configure logging; stdout is reserved for command output
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    logger.info("magic_catalog_started", version=__version__, debug=settings.debug)

    handler = _COMMANDS[parsed.command]

    try:
        return handler(parsed, settings)
    except MagicCatalogError as exc:
        logger.error("command_failed", command=parsed.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
