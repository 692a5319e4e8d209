# tests/test_ranker.py
import pytest

from word_suggester.core.ranker import Suggestion, SuggestionRanker


def test_finalize_orders_by_distance_then_popularity():
    r = SuggestionRanker()
    r.offer("c", 2, 9)
    r.offer("a", 1, 1)
    r.offer("b", 1, 7)
    r.offer("d", 0, 0)
    assert [s.word for s in r.finalize()] == ["d", "b", "a", "c"]


def test_capacity_is_respected():
    r = SuggestionRanker(capacity=10)
    for i in range(25):
        r.offer(f"w{i}", 0, i)
    out = r.finalize()
    assert len(out) == 10
    assert [s.popularity for s in out] == list(range(24, 14, -1))


def test_worst_replaced_only_when_strictly_better():
    r = SuggestionRanker(capacity=2)
    r.offer("a", 1, 5)
    r.offer("b", 2, 3)
    # same as worst -> rejected
    assert r.offer("c", 2, 3) is False
    # same distance, higher popularity -> replaces b
    assert r.offer("d", 2, 4) is True
    assert [s.word for s in r.finalize()] == ["a", "d"]
    # closer beats everything
    assert r.offer("e", 0, 0) is True
    assert [s.word for s in r.finalize()] == ["e", "a"]


def test_ties_keep_retention_order():
    r = SuggestionRanker()
    for w in ("x", "y", "z"):
        r.offer(w, 1, 0)
    assert [s.word for s in r.finalize()] == ["x", "y", "z"]


def test_suggestion_is_immutable():
    s = Suggestion("a", 0, 1)
    with pytest.raises(AttributeError):
        s.word = "b"


def test_bad_capacity():
    with pytest.raises(ValueError):
        SuggestionRanker(capacity=0)
