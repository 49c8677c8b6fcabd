"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from marble_solitaire.core.layout import DEFAULT_BOARD_SIZE
from marble_solitaire.game.interfaces import DEFAULT_UNDO_BUDGET, GameConfig

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marble-solitaire",
        description="Peg-solitaire puzzle: jump marbles until one is left.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help="Board side length (default: %(default)s)",
    )
    parser.add_argument(
        "--center-win",
        action="store_true",
        help="Require the last marble to finish on the center cell",
    )
    parser.add_argument(
        "--undo-budget",
        type=int,
        default=DEFAULT_UNDO_BUDGET,
        help="Undos allowed per game (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def parse_config(argv: list[str] | None = None) -> tuple[GameConfig, str]:
    """Parse CLI flags into a game config and a log level name."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig(
            board_size=args.size,
            center_win=args.center_win,
            undo_budget=args.undo_budget,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return config, args.log_level


def main(argv: list[str] | None = None) -> None:
    """Launch the Marble Solitaire application."""
    from marble_solitaire.ui.bootstrap import run_application

    config, log_level = parse_config(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sys.exit(run_application(sys.argv[:1], config))


if __name__ == "__main__":
    main()
