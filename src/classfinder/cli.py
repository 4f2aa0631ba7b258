"""Command-line entry point: ``class-finder <namesFile> <pattern>``."""

from __future__ import annotations

import logging
import sys

from classfinder.config import Config
from classfinder.errors import ClassFinderError
from classfinder.finder import find_classes

__all__ = ["USAGE", "main"]

USAGE = "Usage: class-finder classes.txt 'FooBar'"


def main(argv: list[str] | None = None) -> int:
    """Run a search and print results to stdout.

    Errors are reported as ``Error: <message>`` and never raised.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print(USAGE)
        return 0

    names_file, pattern = args
    try:
        config = Config.from_env()
        logging.basicConfig(
            level=config.get("logging.level", "WARNING"), stream=sys.stderr
        )
        for full_name in find_classes(names_file, pattern, config):
            print(full_name)
    except ClassFinderError as e:
        print(f"Error: {e.message}")
    return 0

