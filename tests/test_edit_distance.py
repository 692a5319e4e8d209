# tests/test_edit_distance.py
import pytest

from word_suggester.core import edit_distance
from word_suggester.core.dictionary import WordDictionary
from word_suggester.core.errors import ResourceExhausted
from word_suggester.core.edit_distance import levenshtein, match_dictionary


@pytest.mark.parametrize("a,b,d", [
    ("kitten", "sitting", 3),
    ("", "", 0),
    ("", "abc", 3),
    ("abc", "", 3),
    ("flaw", "lawn", 2),
    ("aple", "apple", 1),
    ("aple", "app", 2),
    ("aple", "apt", 2),
    ("same", "same", 0),
])
def test_levenshtein_known_values(a, b, d):
    assert levenshtein(a, b) == d
    assert levenshtein(b, a) == d


def test_levenshtein_triangle_inequality():
    words = ["book", "back", "bock", "brook", "cook", "b", ""]
    for a in words:
        for b in words:
            for c in words:
                assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


def test_cutoff_reports_over_limit():
    assert levenshtein("kitten", "sitting", max_dist=2) == 3
    assert levenshtein("abcdefgh", "a", max_dist=2) == 3
    # within the limit the result is exact
    assert levenshtein("kitten", "sitting", max_dist=3) == 3
    assert levenshtein("aple", "apple", max_dist=2) == 1


def test_match_dictionary_scenario():
    out = match_dictionary("aple", ["apple", "app", "apt"], max_distance=2)
    assert [(s.word, s.distance, s.popularity) for s in out] == [
        ("apple", 1, 0),
        ("app", 2, 0),
        ("apt", 2, 0),
    ]


def test_match_dictionary_is_case_insensitive_and_keeps_spelling():
    out = match_dictionary("HELO", WordDictionary(["Hello", "World"]))
    assert [s.word for s in out] == ["Hello"]
    assert out[0].distance == 1


def test_match_dictionary_empty():
    assert match_dictionary("x", []) == []


def test_match_dictionary_caps_results():
    words = [f"a{c}" for c in "bcdefghijklmnopq"]
    out = match_dictionary("a", words, max_distance=2, capacity=10)
    assert len(out) == 10
    assert all(s.distance == 1 for s in out)


def test_row_allocation_failure(monkeypatch):
    def no_memory(*args):
        raise MemoryError

    # shadows the builtin inside the module only
    monkeypatch.setattr(edit_distance, "list", no_memory, raising=False)
    with pytest.raises(ResourceExhausted) as exc:
        levenshtein("kitten", "sitting")
    assert isinstance(exc.value.__cause__, MemoryError)
