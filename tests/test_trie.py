from wordfinder.trie import Trie


def _make_trie(words: list[str]) -> Trie:
    trie = Trie()
    for w in words:
        trie.insert(w)
    return trie


def test_scan_finds_substrings():
    trie = _make_trie(["cold", "old", "windy"])
    assert trie.scan("xcoldy") == {"cold", "old"}


def test_scan_no_match():
    trie = _make_trie(["cat", "dog"])
    assert trie.scan("zzzz") == set()
    assert trie.scan("") == set()


def test_scan_overlapping_occurrences():
    trie = _make_trie(["ABA", "BAB"])
    assert trie.scan("ABABA") == {"ABA", "BAB"}


def test_scan_prefix_words():
    """A word that is a prefix of another is still reported."""
    trie = _make_trie(["word1", "word10"])
    assert trie.scan("word10aaa") == {"word1", "word10"}


def test_scan_is_case_insensitive_and_keeps_inserted_casing():
    trie = _make_trie(["eFgH"])
    assert trie.scan("xEFGHx") == {"eFgH"}
    assert trie.scan("efgh") == {"eFgH"}


def test_reinsert_case_variant_overwrites_literal():
    trie = _make_trie(["abcd", "ABCD"])
    assert len(trie) == 1
    assert trie.scan("aBcD") == {"ABCD"}


def test_len_counts_distinct_words():
    trie = _make_trie(["a", "ab", "abc", "AB"])
    assert len(trie) == 3


def test_special_characters():
    trie = _make_trie(["@#$%", "&*( )"])
    assert trie.scan("@#$%!") == {"@#$%"}
    assert trie.scan("&*( )") == {"&*( )"}
