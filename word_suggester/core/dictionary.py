# dictionary.py
# Flat snapshot of every stored word, used by the spell-correction path.

from __future__ import annotations

from typing import Iterator, List, Sequence

from word_suggester.core.trie import TrieStore


class WordDictionary(Sequence[str]):
    """
    Ordered list of canonical words taken from a TrieStore at one point in time.
    It holds plain strings, later inserts into the store do not show up here
    until a new snapshot is taken.
    """

    def __init__(self, words: Sequence[str] = ()) -> None:
        self._words: List[str] = list(words)

    @classmethod
    def from_store(cls, store: TrieStore) -> "WordDictionary":
        """Snapshot all terminal words in trie enumeration order."""
        return cls(word for word, _popularity in store.enumerate())

    def __getitem__(self, index):
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary({len(self._words)} words)"
