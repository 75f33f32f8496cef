"""Console entrypoint: runs one game session over stdin/stdout."""

import argparse
import sys
from typing import Callable, Optional, TextIO

from storyquest import __version__
from storyquest.config import settings
from storyquest.core.engine import GameSession
from storyquest.core.logging import get_logger, setup_logging
from storyquest.core.save import SaveSlot
from storyquest.core.scenarios import SCENARIOS, build_world

logger = get_logger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="storyquest",
        description="StoryQuest - a small text adventure",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--scenario",
        choices=sorted(SCENARIOS),
        default=settings.SCENARIO,
        help="Which built-in world to play.",
    )
    parser.add_argument(
        "--save-file",
        default=settings.SAVE_FILE,
        help="Path of the single save slot.",
    )
    parser.add_argument(
        "--load",
        action="store_true",
        help="Hint that you intend to resume; type 'load' in game to restore.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    args = parser.parse_args(argv)

    # settings.SCENARIO 기본값은 choices 검사를 거치지 않는다
    if args.scenario.strip().lower() not in SCENARIOS:
        parser.error(
            f"unknown scenario '{args.scenario}' (choose from {', '.join(sorted(SCENARIOS))})"
        )
    return args


def _line_reader(stream: TextIO) -> Callable[[], Optional[str]]:
    def read_line() -> Optional[str]:
        sys.stdout.write("> ")
        sys.stdout.flush()
        line = stream.readline()
        if not line:
            return None
        return line.rstrip("\n")

    return read_line


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.debug else settings.LOG_LEVEL)

    world = build_world(args.scenario, case_sensitive=settings.CASE_SENSITIVE_DIRECTIONS)
    session = GameSession(world, SaveSlot(args.save_file))

    if args.load:
        # 자동 로드는 연결되어 있지 않다. 플레이어가 직접 'load'를 입력한다.
        print("Attempting to auto-load saved game...")

    logger.info("Starting scenario %s (save=%s)", world.name, args.save_file)
    try:
        session.run(_line_reader(sys.stdin), print)
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
    return 0
