"""Command-line entry point for the download monitor."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from .config import ConfigError, build_config
from .monitor import DownloadMonitor
from .signals import SignalSetupError, install_stop_handler


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _UsageParser(
        prog="dlwatch",
        description="Estimate download speed by watching a file grow",
        add_help=False,
    )
    parser.add_argument("file_path", help="Path of the file being downloaded")

    # The path is taken verbatim, even when it looks like an option.
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        parser.error(f"expected exactly one file path, got {len(args)} arguments")
    file_path = args[0]

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        config = build_config(file_path)
    except ConfigError as exc:
        logging.error("%s", exc)
        raise SystemExit(1) from exc

    try:
        stop_flag = install_stop_handler()
    except SignalSetupError as exc:
        logging.error("%s", exc)
        raise SystemExit(1) from exc

    monitor = DownloadMonitor(config, stop_flag)
    monitor.run()


if __name__ == "__main__":
    main()
