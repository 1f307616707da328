"""
Command-line entry point for WordFinder.

Usage:
    python -m wordfinder [MATRIX] [WORDS] [--log-level LEVEL]

Examples:
    python -m wordfinder
    python -m wordfinder "abcd,efgh,ijkl,mnop" "abcd,ijkl,mnop"

MATRIX is a comma-separated list of rows and WORDS a comma-separated word
stream. Either one may be omitted (or left blank) to use the defaults from
settings.
"""
import argparse
import logging
import sys

from wordfinder.finder import WordFinder
from wordfinder.matrix import InvalidMatrixError
from wordfinder.settings import settings

logger = logging.getLogger("wordfinder")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _split(value: str | None, default: str) -> list[str]:
    if value is None or not value.strip():
        value = default
    return value.split(",")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordfinder",
        description="Find the most frequent words of a stream inside a character matrix",
    )
    parser.add_argument("matrix", nargs="?", default=None,
                        help=f"Comma-separated matrix rows (default: {settings.DEFAULT_MATRIX})")
    parser.add_argument("words", nargs="?", default=None,
                        help=f"Comma-separated word stream (default: {settings.DEFAULT_WORDS})")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL.upper(), type=str.upper, choices=LOG_LEVELS,
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    matrix = _split(args.matrix, settings.DEFAULT_MATRIX)
    wordstream = _split(args.words, settings.DEFAULT_WORDS)

    try:
        finder = WordFinder(matrix)
    except InvalidMatrixError as e:
        logger.warning("Rejected matrix: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    found = finder.find(wordstream)

    print("Words found in matrix:")
    for word in found:
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
