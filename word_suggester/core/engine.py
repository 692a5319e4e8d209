# word_suggester/core/engine.py
"""
SuggestionEngine - the public API of the word suggester.

Composes:
 - TrieStore for storage and prefix lookups
 - SuggestionRanker for top-K ordering (both paths)
 - WordDictionary + match_dictionary for "did you mean" correction

Public API:
  - insert(word, popularity=0)
  - insert_many(entries)
  - lookup_prefix(prefix) -> List[Suggestion]   (raises NotFound)
  - correct_spelling(text) -> List[Suggestion]
  - suggest(prefix) -> SuggestionResult        (prefix lookup with correction fallback)
  - list_all() -> List[(word, popularity)]

Words are assumed valid (letters only); see word_suggester.cli.tokens for the checks.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

from word_suggester.core.dictionary import WordDictionary
from word_suggester.core.edit_distance import DEFAULT_MAX_DISTANCE, match_dictionary
from word_suggester.core.errors import NotFound
from word_suggester.core.ranker import DEFAULT_CAPACITY, Suggestion, SuggestionRanker
from word_suggester.core.trie import Entry, TrieStore
from word_suggester.utils.logger_utils import Log

logger = logging.getLogger(__name__)

PREFIX = "prefix"
CORRECTION = "correction"


class SuggestionResult(NamedTuple):
    kind: str  # PREFIX or CORRECTION
    items: List[Suggestion]


class SuggestionEngine:
    """Prefix suggestions ranked by popularity, with edit-distance fallback."""

    def __init__(self,
                 max_suggestions: int = DEFAULT_CAPACITY,
                 max_distance: int = DEFAULT_MAX_DISTANCE,
                 store: Optional[TrieStore] = None):
        if max_distance < 0:
            raise ValueError("max_distance must be non-negative")
        self.max_suggestions = int(max_suggestions)
        self.max_distance = int(max_distance)
        self.store = store if store is not None else TrieStore()

        # snapshot for correction, rebuilt lazily after mutations
        self._dictionary: Optional[WordDictionary] = None

    # -------------------------
    # Vocabulary
    # -------------------------
    def insert(self, word: str, popularity: int = 0) -> None:
        self.store.insert(word, popularity)
        self._dictionary = None

    def insert_many(self, entries: Iterable[Tuple[str, int]]) -> int:
        """Insert (word, popularity) pairs. Returns how many were given."""
        n = 0
        for word, popularity in entries:
            self.insert(word, popularity)
            n += 1
        logger.info("inserted %d entries, vocabulary size %d", n, len(self.store))
        return n

    def list_all(self) -> List[Entry]:
        """Every stored (word, popularity), sorted by word in code-point order."""
        return sorted(self.store.enumerate(), key=lambda e: e[0])

    # -------------------------
    # Queries
    # -------------------------
    def lookup_prefix(self, prefix: str) -> List[Suggestion]:
        """
        Up to max_suggestions words starting with `prefix` (case-insensitive),
        most popular first. Raises NotFound if no stored word has the prefix.
        """
        node = self.store.lookup_subtree(prefix)
        ranker = SuggestionRanker(self.max_suggestions)
        for word, popularity in self.store.enumerate(node):
            ranker.offer(word, 0, popularity)
        out = ranker.finalize()
        if not out:
            # only reachable with an empty prefix on an empty store
            raise NotFound(prefix)
        return out

    def correct_spelling(self, text: str) -> List[Suggestion]:
        """Stored words within max_distance edits of `text`, closest first."""
        with Log.time_block("correct_spelling"):
            return match_dictionary(
                text,
                self.dictionary,
                max_distance=self.max_distance,
                capacity=self.max_suggestions,
            )

    def suggest(self, prefix: str) -> SuggestionResult:
        """Prefix lookup, falling back to spell correction when nothing matches."""
        try:
            return SuggestionResult(PREFIX, self.lookup_prefix(prefix))
        except NotFound:
            logger.debug("no words with prefix %r, trying correction", prefix)
            return SuggestionResult(CORRECTION, self.correct_spelling(prefix))

    # -------------------------
    # Dictionary snapshot
    # -------------------------
    @property
    def dictionary(self) -> WordDictionary:
        if self._dictionary is None:
            self.refresh_dictionary()
        return self._dictionary

    def refresh_dictionary(self) -> WordDictionary:
        """Rebuild the correction dictionary from the current store."""
        self._dictionary = WordDictionary.from_store(self.store)
        logger.debug("dictionary rebuilt: %d words", len(self._dictionary))
        return self._dictionary

    # -------------------------
    # Misc
    # -------------------------
    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, word: str) -> bool:
        return word in self.store
