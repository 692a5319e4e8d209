# trie.py
# Letter-tree (trie) holding the vocabulary for prefix lookups.
# Paths are case-folded, each terminal node keeps the original spelling
# and the best popularity seen for that word.

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from word_suggester.core.errors import NotFound, ResourceExhausted

logger = logging.getLogger(__name__)

Word = str
Popularity = int
Entry = Tuple[Word, Popularity]


class TrieNode:
    """
    A single node in the trie.
    children: letter -> TrieNode (absent letter means no word continues that way)
    is_terminal: some inserted word ends exactly here
    canonical_word: original-case spelling, set iff is_terminal
    popularity: best popularity seen for the word ending here
    """

    __slots__ = ("children", "is_terminal", "canonical_word", "popularity")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False
        self.canonical_word: Optional[str] = None
        self.popularity = 0


class TrieStore:
    """
    Owns the root node and, through it, the whole tree.
    Only insert() mutates it; there is no per-word deletion, clear() drops everything.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str, popularity: int = 0) -> None:
        """
        Insert `word` with `popularity`.
        The stored spelling/popularity pair only changes when the word is new
        or the incoming popularity is strictly higher, so ties keep the
        earliest insertion.
        Words are expected to be validated by the caller.
        """
        node = self._root
        for ch in word.lower():
            child = node.children.get(ch)
            if child is None:
                try:
                    child = TrieNode()
                except MemoryError as e:
                    raise ResourceExhausted(f"cannot allocate node for {word!r}") from e
                node.children[ch] = child
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            node.canonical_word = word
            node.popularity = popularity
            self._size += 1
        elif popularity > node.popularity:
            logger.debug(
                "replacing %r (%d) with %r (%d)",
                node.canonical_word, node.popularity, word, popularity,
            )
            node.canonical_word = word
            node.popularity = popularity

    # search/traversal ---------------------------------------------------------
    def lookup_subtree(self, prefix: str) -> TrieNode:
        """
        Walk the case-folded prefix and return the node it ends on.
        The node can be non-terminal (prefix is not a word itself but longer words exist).
        Raises NotFound as soon as a letter has no child.
        """
        node = self._root
        for ch in prefix.lower():
            nxt = node.children.get(ch)
            if nxt is None:
                raise NotFound(prefix)
            node = nxt
        return node

    def enumerate(self, node: Optional[TrieNode] = None) -> Iterator[Entry]:
        """
        Yield (canonical_word, popularity) for every terminal node under `node`
        (the whole tree by default). Depth-first, parents before children,
        children in ascending letter order. Each call starts a fresh walk.
        """
        stack: List[TrieNode] = [self._root if node is None else node]
        while stack:
            current = stack.pop()
            if current.is_terminal:
                yield current.canonical_word, current.popularity
            # reversed so the smallest letter is popped first
            for ch in sorted(current.children, reverse=True):
                stack.append(current.children[ch])

    # convenience -----------------------------------------------------
    def clear(self) -> None:
        """Drop the whole tree."""
        self._root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        """Case-insensitive membership check."""
        try:
            node = self.lookup_subtree(word)
        except NotFound:
            return False
        return node.is_terminal
