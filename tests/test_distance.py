from fuzzyspell.spellcheck.distance import levenshtein

WORDS = ["", "a", "ab", "abc", "cab", "kitten", "sitting", "hello", "helo", "hallo"]


def test_levenshtein_known_values() -> None:
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("helo", "hello") == 1
    assert levenshtein("hallo", "hello") == 1
    assert levenshtein("flaw", "lawn") == 2


def test_levenshtein_empty_strings() -> None:
    assert levenshtein("", "") == 0
    assert levenshtein("", "abc") == 3
    assert levenshtein("abcd", "") == 4


def test_levenshtein_counts_transposition_as_two_edits() -> None:
    assert levenshtein("teh", "the") == 2


def test_levenshtein_is_a_metric() -> None:
    for a in WORDS:
        assert levenshtein(a, a) == 0
        for b in WORDS:
            assert levenshtein(a, b) == levenshtein(b, a)
            for c in WORDS:
                assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)
