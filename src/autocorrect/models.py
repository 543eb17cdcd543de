from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WordEntry:
    word: str
    document_frequency: int   # distinct sources containing the word
    instance_count: int       # total occurrences across all sources

    def rank_key(self) -> Tuple[int, int, str]:
        """Sort key: most frequent first, then most widespread, then alphabetical."""
        return (-self.instance_count, -self.document_frequency, self.word)


@dataclass(frozen=True)
class EngineConfig:
    prefix: bool = False
    whitespace: bool = False
    led: int = 0              # max Levenshtein edit distance

    def __post_init__(self) -> None:
        if isinstance(self.led, bool) or not isinstance(self.led, int):
            raise ValueError(f"led must be an int, got {self.led!r}")
        if self.led < 0:
            raise ValueError(f"led must be >= 0, got {self.led}")


@dataclass(frozen=True)
class Suggestion:
    text: str
    rank: Tuple[int, ...]     # per-position candidate ranks; lower is better
