"""Executable entrypoint for Neon Pong."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging

from .game import PongGame


def main(argv: list[str] | None = None) -> None:
    """Launch the game."""
    parser = argparse.ArgumentParser(prog="neonpong", description="Neon Pong against a tracking AI.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    root = Path(__file__).resolve().parents[2]
    PongGame(root=root).run()


if __name__ == "__main__":
    main()
