from __future__ import annotations

from typing import Iterable, Iterator

from wordfinder.trie import Trie

MAX_ROWS = 64
MAX_COLS = 64

NULL_MATRIX = "Matrix cannot be null."
EMPTY_MATRIX = "Matrix cannot be empty."
TOO_MANY_ROWS = f"Matrix cannot have more than {MAX_ROWS} rows."
TOO_MANY_COLS = f"Matrix cannot have more than {MAX_COLS} columns."
INCONSISTENT_ROWS = "All rows in the matrix must have the same length."
NULL_ROWS = "Matrix cannot contain null rows."
EMPTY_ROWS = "Matrix cannot contain empty rows."
NOT_ROWS = "Matrix must be a sequence of rows, not a single string."


class InvalidMatrixError(ValueError):
    """Raised when a matrix fails validation. ``errors`` lists every violation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(" ".join(self.errors))


def validate_matrix(rows: Iterable[str | None] | None) -> list[str]:
    """Return every violation found in ``rows``; an empty list means valid.

    The checks do not short-circuit each other, except that a missing or
    empty matrix is reported on its own. The returned order is fixed:
    row count, column count, row lengths, null rows, empty rows.
    """
    if rows is None:
        return [NULL_MATRIX]
    if isinstance(rows, str):
        return [NOT_ROWS]

    rows = list(rows)
    if not rows:
        return [EMPTY_MATRIX]

    errors: list[str] = []
    if len(rows) > MAX_ROWS:
        errors.append(TOO_MANY_ROWS)

    usable = [row for row in rows if row]
    # When no row is usable the null/empty checks below already fire
    if usable:
        n_cols = len(usable[0])
        if n_cols > MAX_COLS:
            errors.append(TOO_MANY_COLS)
        if any(len(row) != n_cols for row in usable):
            errors.append(INCONSISTENT_ROWS)

    if any(row is None for row in rows):
        errors.append(NULL_ROWS)
    if any(row is not None and len(row) == 0 for row in rows):
        errors.append(EMPTY_ROWS)

    return errors


class WordMatrix:
    """A validated character grid searchable along rows and columns."""

    def __init__(self, rows: Iterable[str] | None):
        if rows is not None and not isinstance(rows, str):
            rows = list(rows)
        errors = validate_matrix(rows)
        if errors:
            raise InvalidMatrixError(errors)

        self.rows: tuple[str, ...] = tuple(rows)
        self.n_rows = len(self.rows)
        self.n_cols = len(self.rows[0])
        # Precompute columns so vertical search is a plain string scan
        self.columns: tuple[str, ...] = tuple(
            "".join(row[col] for row in self.rows) for col in range(self.n_cols)
        )

    def __repr__(self) -> str:
        return f"WordMatrix({self.n_rows}x{self.n_cols})"

    def lines(self) -> Iterator[str]:
        """Yield each row top to bottom, then each column left to right."""
        yield from self.rows
        yield from self.columns

    def search(self, trie: Trie) -> set[str]:
        found: set[str] = set()
        for line in self.lines():
            found |= trie.scan(line)
        return found
