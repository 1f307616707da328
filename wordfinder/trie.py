from __future__ import annotations


class TrieNode:
    __slots__ = ("children", "word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        # Literal word ending here, None for non-terminal nodes
        self.word: str | None = None


class Trie:
    """Case-insensitive multi-word matcher.

    Edges are keyed by lowercased characters; terminal nodes keep the word
    as it was inserted so matches are reported in the caller's casing.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str):
        """Add ``word``. Re-inserting a case variant replaces the stored literal."""
        node = self.root
        for ch in word:
            key = ch.lower()
            if key not in node.children:
                node.children[key] = TrieNode()
            node = node.children[key]
        if node.word is None:
            self._size += 1
        node.word = word

    def __len__(self) -> int:
        return self._size

    def scan(self, text: str) -> set[str]:
        """Return every inserted word that occurs as a substring of ``text``.

        A walk starts at each offset and follows edges until one is missing,
        so overlapping occurrences are all seen.
        """
        found: set[str] = set()
        folded = [ch.lower() for ch in text]
        n = len(folded)
        for i in range(n):
            node = self.root
            for j in range(i, n):
                node = node.children.get(folded[j])
                if node is None:
                    break
                if node.word is not None:
                    found.add(node.word)
        return found
