"""Console front end: ``dungeon-crawl [LEVEL_FILE ...]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .engine.core import DungeonEngine
from .engine.levels import read_level_text, render
from .exceptions import DungeonError, UnknownCommandError
from .levels.demo import default_demo_levels
from .logging_listeners import register_listeners
from .models.commands import Command
from .models.enums import SessionStatus

PROMPT = "Move (w/a/s/d, e to stay, q to quit): "


def _level_texts(paths: list[str]) -> list[str]:
    if not paths and config.LEVELS_DIR:
        paths = [str(p) for p in sorted(Path(config.LEVELS_DIR).glob("*.txt"))]
    if not paths:
        return default_demo_levels()
    return [read_level_text(p) for p in paths]


def play(levels: list[str], read=None, write=print) -> SessionStatus:
    read = read or input
    engine = DungeonEngine()
    sess = engine.new_session(levels)
    while sess.status == SessionStatus.IN_PROGRESS:
        for line in render(sess.grid):
            write(line)
        write(f"Level {sess.level_index + 1}/{len(sess.levels)}  Treasure: {sess.player.treasure}")
        try:
            command = Command.from_symbol(read(PROMPT))
        except UnknownCommandError as e:
            write(str(e))
            continue
        except EOFError:
            command = Command.QUIT
        if command is Command.QUIT:
            engine.quit(sess)
            break
        result = engine.take_turn(sess, command.direction)
        write(result.message)
    for line in render(sess.grid):
        write(line)
    write(f"Game over: {sess.status.value}")
    return sess.status


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dungeon-crawl")
    parser.add_argument("levels", nargs="*", help="level files, played in order")
    args = parser.parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL)
    register_listeners()
    try:
        status = play(_level_texts(args.levels))
    except DungeonError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    return 0 if status == SessionStatus.ESCAPED else 1


if __name__ == "__main__":
    sys.exit(main())
