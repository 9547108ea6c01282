"""
Main entry point for Knight's Quest.

Asks for the hero's name, builds the session with the console reader and
writer, and runs the adventure until the game is over.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from knights_quest.core.config import GameConfig, load_config
from knights_quest.core.constants import (
    DEFAULT_HERO_ATTACK_POWER,
    DEFAULT_HERO_DEFENSE_POWER,
    DEFAULT_HERO_MAX_HEALTH,
    DEFAULT_HERO_NAME,
)
from knights_quest.core.logging import setup_logging
from knights_quest.core.rng import DiceRoller
from knights_quest.core.utils import crule
from knights_quest.entities.enemy import DEFAULT_CATALOG_PATH, load_catalog
from knights_quest.entities.player import Player
from knights_quest.game.session import GameSession
from knights_quest.ui.io import (
    CommandReader,
    ConsoleCommandReader,
    ConsoleLineWriter,
    LineWriter,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knights-quest",
        description="A turn-based text adventure: explore, rest and fight.",
    )
    parser.add_argument("--name", help="Name of the hero (skips the name prompt).")
    parser.add_argument("--seed", type=int, help="Seed of the dice, for repeatable runs.")
    parser.add_argument(
        "--enemies",
        type=Path,
        default=DEFAULT_CATALOG_PATH,
        help="JSON file with the enemy catalog.",
    )
    parser.add_argument("--config", type=Path, help="JSON file overriding the game rules.")
    parser.add_argument(
        "--max-turns",
        type=int,
        help="Stop after this many turns (useful with piped input).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the diagnostic log (written to stderr).",
    )
    return parser


def ask_hero_name(reader: CommandReader, writer: LineWriter) -> str:
    """
    Prompts for the hero's name, falling back to the default one.

    Args:
        reader (CommandReader): Where the name is read from.
        writer (LineWriter): Where the prompt is written.

    Returns:
        str: The trimmed name, or the default name if nothing was typed.

    """
    writer.write_line("Enter the name of your Knight: ")
    name = reader.read_command("> ")
    if name is None or not name.strip():
        writer.write_line(f"No name entered. Your knight will be called {DEFAULT_HERO_NAME}.")
        return DEFAULT_HERO_NAME
    return name.strip()


def create_hero(name: str) -> Player:
    return Player(
        name=name,
        max_health=DEFAULT_HERO_MAX_HEALTH,
        attack_power=DEFAULT_HERO_ATTACK_POWER,
        defense_power=DEFAULT_HERO_DEFENSE_POWER,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    config = load_config(args.config) if args.config else GameConfig()
    catalog = load_catalog(args.enemies)

    reader = ConsoleCommandReader()
    writer = ConsoleLineWriter()

    crule(":crossed_swords:  Knight's Quest", style="bold green")
    try:
        if args.name and args.name.strip():
            name = args.name.strip()
        else:
            name = ask_hero_name(reader, writer)
        session = GameSession(
            player=create_hero(name),
            reader=reader,
            writer=writer,
            rng=DiceRoller(args.seed),
            catalog=catalog,
            config=config,
        )
        session.start(max_turns=args.max_turns)
    except KeyboardInterrupt:
        writer.write_line()
        crule(":crossed_swords:  Adventure Interrupted", style="bold red")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
