"""
word_suggester.core

Contains:
 - the letter-tree word store (TrieStore)
 - bounded top-K ranking (SuggestionRanker)
 - Levenshtein distance and dictionary matching
 - the SuggestionEngine facade tying them together
"""

from .errors import InvalidWord, NotFound, ResourceExhausted, WordSuggesterError
from .trie import TrieNode, TrieStore
from .ranker import Suggestion, SuggestionRanker
from .edit_distance import levenshtein, match_dictionary
from .dictionary import WordDictionary
from .engine import SuggestionEngine, SuggestionResult

__all__ = [
    "InvalidWord",
    "NotFound",
    "ResourceExhausted",
    "WordSuggesterError",
    "TrieNode",
    "TrieStore",
    "Suggestion",
    "SuggestionRanker",
    "levenshtein",
    "match_dictionary",
    "WordDictionary",
    "SuggestionEngine",
    "SuggestionResult",
]
