from __future__ import annotations

import logging
from typing import Iterable

from wordfinder.matrix import WordMatrix
from wordfinder.metrics import StageTimer
from wordfinder.trie import Trie

logger = logging.getLogger("wordfinder")

RESULT_LIMIT = 10


def count_words(words: Iterable[str | None]) -> dict[str, tuple[str, int]]:
    """Count a word stream case-insensitively.

    Maps each lowercased word to ``(literal, count)`` where ``literal`` is the
    first spelling seen. Missing and blank entries are skipped, the rest are
    stripped of surrounding whitespace.
    """
    counts: dict[str, tuple[str, int]] = {}
    for word in words:
        if word is None:
            continue
        word = word.strip()
        if not word:
            continue
        key = word.lower()
        literal, count = counts.get(key, (word, 0))
        counts[key] = (literal, count + 1)
    return counts


def rank_words(found: Iterable[str], counts: dict[str, tuple[str, int]], limit: int = RESULT_LIMIT) -> list[str]:
    """Order found words by stream frequency, most frequent first.

    Ties go to the case-insensitive alphabetical order. Words absent from
    ``counts`` are dropped.
    """
    hits = {w.lower(): w for w in found if w.lower() in counts}
    ordered = sorted(hits, key=lambda key: (-counts[key][1], key))
    return [hits[key] for key in ordered[:limit]]


class WordFinder:
    """Finds the most requested words of a stream that occur in a matrix.

    Words are matched case-insensitively, left to right along rows and top
    to bottom along columns. Each word is reported once, in the casing of
    its first appearance in the stream.
    """

    def __init__(self, matrix: Iterable[str] | None):
        self.matrix = WordMatrix(matrix)

    def find(self, wordstream: Iterable[str | None] | None, timer: StageTimer | None = None) -> list[str]:
        """Return up to ``RESULT_LIMIT`` stream words present in the matrix.

        Pass a ``timer`` to collect per-stage timings for this call.
        """
        # A bare string is one word, not a stream of single characters
        if wordstream is None or isinstance(wordstream, str):
            return []

        if timer is None:
            timer = StageTimer()

        with timer.stage("count"):
            counts = count_words(wordstream)
        if not counts:
            return []

        with timer.stage("build_trie"):
            trie = Trie()
            for literal, _ in counts.values():
                trie.insert(literal)

        with timer.stage("search"):
            found = self.matrix.search(trie)

        with timer.stage("rank"):
            result = rank_words(found, counts)

        logger.info(
            "Matched %d of %d distinct words in %r (returning %d) in %.3fms",
            len(found), len(trie), self.matrix, len(result), timer.total_ms,
        )
        return result
