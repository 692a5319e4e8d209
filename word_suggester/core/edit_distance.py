# edit_distance.py
# Levenshtein distance (unit cost insert/delete/substitute) and the
# "did you mean" matcher built on top of it.
# - two rolling rows sized by the shorter string
# - optional max_dist cutoff so fuzzy scans can stop early

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from word_suggester.core.errors import ResourceExhausted
from word_suggester.core.ranker import DEFAULT_CAPACITY, Suggestion, SuggestionRanker

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2


def levenshtein(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Minimum number of single-character edits turning `a` into `b`.
    With max_dist set, returns max_dist + 1 as soon as the true distance is
    known to be larger; otherwise the result is exact.
    """
    if a == b:
        return 0

    # keep b as the shorter string so the rows stay small
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)

    if max_dist is not None and la - lb > max_dist:
        return max_dist + 1

    try:
        prev = list(range(lb + 1))
        curr = [0] * (lb + 1)
    except MemoryError as e:
        raise ResourceExhausted(f"cannot allocate rows of length {lb + 1}") from e

    for i in range(1, la + 1):
        ca = a[i - 1]
        curr[0] = i
        row_min = i
        for j in range(1, lb + 1):
            ins = curr[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (0 if ca == b[j - 1] else 1)
            val = ins if ins < delete else delete
            if replace < val:
                val = replace
            curr[j] = val
            if val < row_min:
                row_min = val

        # row minimum never decreases further down the table
        if max_dist is not None and row_min > max_dist:
            return max_dist + 1
        prev, curr = curr, prev

    return prev[lb]


def match_dictionary(
    text: str,
    dictionary: Iterable[str],
    max_distance: int = DEFAULT_MAX_DISTANCE,
    capacity: int = DEFAULT_CAPACITY,
) -> List[Suggestion]:
    """
    Rank every dictionary word within `max_distance` edits of `text`.
    Comparison is case-insensitive, returned words keep their stored spelling.
    Popularity is always 0 here: the dictionary carries words only.
    """
    query = text.lower()
    ranker = SuggestionRanker(capacity)
    seen = 0
    for word in dictionary:
        seen += 1
        d = levenshtein(query, word.lower(), max_distance)
        if d <= max_distance:
            ranker.offer(word, d, 0)

    logger.debug("fuzzy match %r: %d/%d words within %d", text, len(ranker), seen, max_distance)
    return ranker.finalize()
