# src/emoji_catalog/cli.py

import logging
import sys
from typing import List, Optional

from .scraper import DEFAULT_VERSION, import_emoji


def configure_logging():
    """Sends INFO progress lines to stdout with no level or timestamp prefix."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def parse_version(argv: List[str]) -> str:
    """The only argument is an optional emoji version, e.g. '15.1'."""
    return argv[0] if argv and argv[0] else DEFAULT_VERSION


# Entry point registered in pyproject.toml
def run_import_entrypoint(argv: Optional[List[str]] = None):
    """Entry point for the 'emoji-import' command."""
    if argv is None:
        argv = sys.argv[1:]
    configure_logging()
    import_emoji(parse_version(argv))


# This block runs when you execute `python -m emoji_catalog.cli 15.1`
if __name__ == "__main__":
    run_import_entrypoint()
