# word_suggester/core/ranker.py
"""
SuggestionRanker - bounded top-K selection shared by prefix search and spell correction.

Ordering (best first):
 - distance ascending
 - popularity descending
 - remaining ties keep the order in which entries were retained (stable final sort)

offer() does O(K) work: while below capacity it appends, after that it finds the
current worst entry and replaces it only when the new record is strictly better.
finalize() sorts once for presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

DEFAULT_CAPACITY = 10


@dataclass(frozen=True)
class Suggestion:
    word: str
    distance: int
    popularity: int

    def sort_key(self) -> Tuple[int, int]:
        return (self.distance, -self.popularity)


class SuggestionRanker:
    """Keep the best `capacity` Suggestion records seen so far."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = int(capacity)
        self._entries: List[Suggestion] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def offer(self, word: str, distance: int, popularity: int) -> bool:
        """
        Offer a candidate. Returns True if it was retained.
        """
        candidate = Suggestion(word, distance, popularity)
        if len(self._entries) < self._capacity:
            self._entries.append(candidate)
            return True

        worst_idx = 0
        for i in range(1, len(self._entries)):
            cur = self._entries[i]
            worst = self._entries[worst_idx]
            if cur.distance > worst.distance or (
                cur.distance == worst.distance and cur.popularity < worst.popularity
            ):
                worst_idx = i

        if candidate.sort_key() < self._entries[worst_idx].sort_key():
            self._entries[worst_idx] = candidate
            return True
        return False

    def finalize(self) -> List[Suggestion]:
        """Retained entries, best first, at most `capacity` of them."""
        ranked = sorted(self._entries, key=Suggestion.sort_key)
        return ranked[: self._capacity]

    def __len__(self) -> int:
        return len(self._entries)
