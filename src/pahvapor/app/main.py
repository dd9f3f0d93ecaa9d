"""
Application Initialization
==========================
Builds the state store and the main window, then starts the Qt event loop.

Run with: python -m pahvapor [--debug] [--log-file PATH]
"""
from __future__ import annotations

import argparse
import logging
import sys

from pahvapor.app.application import create_app
from pahvapor.app.state import Store
from pahvapor.app.ui.main_window import MainWindow
from pahvapor.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pahvapor", description="PAH vapor pressure explorer")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    argv = sys.argv if argv is None else argv
    args = _parse_args(argv[1:])
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    app = create_app(argv)
    store = Store()
    window = MainWindow(store)
    window.show()
    logger.info("Main window shown.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
