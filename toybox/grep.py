"""Print the lines of a file that contain a query string."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when the command line does not give what the search needs."""


@dataclass(frozen=True)
class Config:
    """What to search for, where, and whether case matters."""

    query: str
    filename: str
    case_sensitive: bool = True

    @classmethod
    def from_args(cls, args: Iterable[str]) -> Config:
        """Build a config from arguments (without the program name).

        Matching is case sensitive unless CASE_INSENSITIVE is set in the
        environment.
        """
        remaining = iter(args)
        query = next(remaining, None)
        if query is None:
            raise ConfigError("Didn't get a query string")
        filename = next(remaining, None)
        if filename is None:
            raise ConfigError("Didn't get a file name")
        return cls(query, filename, "CASE_INSENSITIVE" not in os.environ)


def _lines(contents: str) -> list[str]:
    """Split on newlines, dropping a trailing carriage return from each line."""
    if not contents:
        return []
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def search(query: str, contents: str) -> list[str]:
    """Lines of *contents* containing *query*."""
    return [line for line in _lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Lines of *contents* containing *query*, ignoring case."""
    needle = query.lower()
    return [line for line in _lines(contents) if needle in line.lower()]


def run(config: Config) -> None:
    """Read the configured file and print every matching line."""
    with open(config.filename, encoding="utf-8") as handle:
        contents = handle.read()

    finder = search if config.case_sensitive else search_case_insensitive
    for line in finder(config.query, contents):
        print(line)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        config = Config.from_args(args)
    except ConfigError as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1

    try:
        run(config)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Application error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())