"""Command-line front door for iexplorer.

Parses the single optional path argument, loads settings, configures the
optional diagnostics log, then hands over to the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import load_settings
from .runtime import run_browser

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path | None) -> None:
    """Send diagnostics to ``log_file``; the terminal itself is never logged to."""
    if log_file is None:
        return
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        return
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, handlers=[handler])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iexplorer",
        description="Browse directories interactively in the terminal.",
        add_help=False,
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Any ``-x``/``--x`` option is rejected.
    """
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    if any(arg.startswith("-") for arg in extra):
        parser.error("options are unimplemented")
    if extra:
        parser.error(f"unexpected arguments: {' '.join(extra)}")

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path).expanduser() if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    settings = load_settings()
    configure_logging(settings.log_file)
    run_browser(path.resolve(), settings)


if __name__ == "__main__":
    main()
