"""Entry point: ``python -m sokoban``.

Supports two modes:
  - ``python -m sokoban``                → Launch the FastAPI play server
  - ``python -m sokoban cli --moves rrd``  → Apply moves headlessly and print the board
"""

from __future__ import annotations

import argparse
import logging
import sys

from sokoban.config import DEFAULT_LEVEL_FILE

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sokoban puzzle engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI play server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--levels", type=str, default=str(DEFAULT_LEVEL_FILE), help="Level file")
    srv.add_argument("--level", type=int, default=1, help="Start level (1-based)")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Apply a move string to a level and print the result")
    cli.add_argument("--levels", type=str, default=str(DEFAULT_LEVEL_FILE), help="Level file")
    cli.add_argument("--level", type=int, default=1, help="Level to play (1-based)")
    cli.add_argument("--moves", type=str, default="", help="Moves as l/u/r/d letters, e.g. 'rrdL'; exit status 2 if the level ends unsolved")
    cli.add_argument("--list", action="store_true", help="List playable levels and exit")
    cli.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from sokoban.api.app import create_app
    from sokoban.config import GameConfig

    config = GameConfig(
        level_file=args.levels,
        start_level=args.level - 1,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def _run_cli(args: argparse.Namespace) -> int:
    from sokoban.config import GameConfig
    from sokoban.engine.direction import directions_from_moves
    from sokoban.engine.session import GameSession
    from sokoban.errors import SokobanError
    from sokoban.utils.logging import setup_logging
    from sokoban.utils.render import render_text

    config = GameConfig(level_file=args.levels, start_level=args.level - 1, log_level=args.log_level)
    setup_logging(config.log_level, stream=sys.stderr)

    try:
        session = GameSession.from_config(config)
        directions = directions_from_moves(args.moves)
    except (OSError, SokobanError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    if args.list:
        for i, level in enumerate(session.catalog.levels, start=1):
            print(f"{i:3d}  {level.name}  ({level.width}x{level.height})")
        return 0

    for direction in directions:
        session.move(direction)

    snapshot = session.snapshot()
    print(render_text(snapshot))
    return 0 if snapshot.solved or not directions else 2


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        sys.exit(_run_cli(args))


if __name__ == "__main__":
    main()
