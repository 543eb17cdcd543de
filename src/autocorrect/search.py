from __future__ import annotations
import bisect
from collections import defaultdict
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .models import WordEntry
from .normalize import normalize_token


class Lexicon:
    """Immutable snapshot of the known words, indexed for the matching passes."""

    def __init__(self, entries: Iterable[WordEntry]) -> None:
        self._entries: Dict[str, WordEntry] = {e.word: e for e in entries if e.instance_count > 0}
        self._sorted: List[str] = sorted(self._entries)
        by_len: Dict[int, List[str]] = defaultdict(list)
        for w in self._sorted:
            by_len[len(w)].append(w)
        self._by_len: Dict[int, List[str]] = dict(by_len)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def entry(self, word: str) -> WordEntry:
        return self._entries[word]

    def with_prefix(self, prefix: str) -> Iterator[str]:
        i = bisect.bisect_left(self._sorted, prefix)
        while i < len(self._sorted) and self._sorted[i].startswith(prefix):
            yield self._sorted[i]
            i += 1

    def with_length(self, lo: int, hi: int) -> Iterator[str]:
        for n in range(max(lo, 1), hi + 1):
            yield from self._by_len.get(n, ())


# ---------------------------------------------------------------------------
# Edit distance
# ---------------------------------------------------------------------------

def levenshtein(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Levenshtein distance (unit-cost insert/delete/substitute).
    With max_dist, stops early and returns max_dist + 1 once every cell of a
    row exceeds it; the result is exact whenever it is <= max_dist.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    la, lb = len(a), len(b)
    if max_dist is not None and la - lb > max_dist:
        return max_dist + 1
    if lb == 0:
        return la

    prev = list(range(lb + 1))
    for i in range(1, la + 1):
        ca = a[i - 1]
        curr = [i]
        row_min = i
        for j in range(1, lb + 1):
            val = min(curr[j - 1] + 1,                       # insert
                      prev[j] + 1,                           # delete
                      prev[j - 1] + (ca != b[j - 1]))        # substitute
            curr.append(val)
            if val < row_min:
                row_min = val
        if max_dist is not None and row_min > max_dist:
            return max_dist + 1
        prev = curr
    return prev[lb]


# ---------------------------------------------------------------------------
# Token passes: (normalized token, lexicon) -> matching known words
# ---------------------------------------------------------------------------

TokenPass = Callable[[str, Lexicon], Iterable[str]]


def exact_pass(token: str, lex: Lexicon) -> Iterable[str]:
    return (token,) if token in lex else ()


def prefix_pass(token: str, lex: Lexicon) -> Iterable[str]:
    return lex.with_prefix(token)


def edit_distance_pass(max_dist: int) -> TokenPass:
    def _pass(token: str, lex: Lexicon) -> Iterable[str]:
        n = len(token)
        for w in lex.with_length(n - max_dist, n + max_dist):
            if levenshtein(token, w, max_dist) <= max_dist:
                yield w
    _pass.__name__ = f"edit_distance_pass_{max_dist}"
    return _pass


def rank_candidates(token: str, words: Iterable[str], lex: Lexicon) -> List[str]:
    """Exact match first, then by instance count, document frequency, word."""
    return sorted(set(words), key=lambda w: (w != token, lex.entry(w).rank_key()))


# ---------------------------------------------------------------------------
# Whitespace re-segmentation (one merge or one split per alternative)
# ---------------------------------------------------------------------------

# slots: ranked candidate strings per word position
# seps: text around the slots, len(seps) == len(slots) + 1
Segmentation = Tuple[List[List[str]], List[str]]
Candidates = Callable[[str], List[str]]


def merged_segmentations(
    words: Sequence[str],
    seps: Sequence[str],
    base: List[List[str]],
    candidates: Candidates,
) -> Iterator[Segmentation]:
    """Drop the whitespace between each adjacent pair of words in turn."""
    for i in range(len(words) - 1):
        gap = seps[i + 1]
        if not gap or not gap.isspace():
            continue
        cands = candidates(normalize_token(words[i]) + normalize_token(words[i + 1]))
        if not cands:
            continue
        yield base[:i] + [cands] + base[i + 2:], list(seps[:i + 1]) + list(seps[i + 2:])


def split_segmentations(
    words: Sequence[str],
    seps: Sequence[str],
    base: List[List[str]],
    candidates: Candidates,
) -> Iterator[Segmentation]:
    """
    Insert a space at each internal boundary of each word in turn.
    The halves stay separate slots so their combinations are produced lazily.
    """
    for i, word in enumerate(words):
        norm = normalize_token(word)
        for k in range(1, len(norm)):
            left, right = candidates(norm[:k]), candidates(norm[k:])
            if not left or not right:
                continue
            yield (base[:i] + [left, right] + base[i + 1:],
                   list(seps[:i + 1]) + [" "] + list(seps[i + 1:]))
