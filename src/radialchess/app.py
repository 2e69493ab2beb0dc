"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from radialchess.ui.settings import AppSettings


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="radialchess")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    parser.add_argument("--theme", default="Classic", help="Board theme name.")
    parser.add_argument(
        "--no-legal-moves",
        action="store_true",
        help="Do not mark legal destinations of the selected piece.",
    )
    args, _qt_args = parser.parse_known_args(argv[1:])
    return args


def main() -> None:
    """Launch the Radial Chess application."""
    from radialchess.ui.bootstrap import run_application

    args = _parse_args(sys.argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = AppSettings(
        board_theme=args.theme,
        show_legal_moves=not args.no_legal_moves,
    )
    sys.exit(run_application(sys.argv, settings=settings))


if __name__ == "__main__":
    main()
