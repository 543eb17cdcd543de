# autocorrect/engine.py
from __future__ import annotations

import itertools
import logging
from typing import Dict, Iterable, Iterator, List

from . import config as CFG
from .DB.api import CorpusStore, make_store
from .errors import EmptyCorpusError
from .models import EngineConfig, Suggestion, WordEntry
from .normalize import join_line, normalize_token, split_line
from .search import (
    Lexicon,
    Segmentation,
    TokenPass,
    edit_distance_pass,
    exact_pass,
    merged_segmentations,
    prefix_pass,
    rank_candidates,
    split_segmentations,
)

log = logging.getLogger(__name__)


class Autocorrector:
    """
    Suggestion engine over an immutable snapshot of corpus word counts.

    Built once (from_files / from_store) with a fixed EngineConfig, then
    answers suggest(line) with whole-line candidates:
      * the line is cut into the words ingestion would see; each word is
        matched by the active token passes (exact, prefix, edit distance)
        and its candidates ranked,
      * optional whitespace passes add alternatives with one merged pair
        (across whitespace only) or one split word,
      * slots are recombined with the original whitespace and punctuation,
        deduplicated.
    A word with no candidates keeps its original text in its slot.
    """

    # ------------- lifecycle -------------

    def __init__(self, entries: Iterable[WordEntry], config: EngineConfig) -> None:
        self._config = config
        self._lex = Lexicon(entries)
        if not len(self._lex):
            raise EmptyCorpusError("corpus has no known words")

        passes: List[TokenPass] = [exact_pass]
        if config.prefix:
            passes.append(prefix_pass)
        if config.led > 0:
            passes.append(edit_distance_pass(config.led))
        self._passes = passes

        self._resegmenters = [merged_segmentations, split_segmentations] if config.whitespace else []
        log.info("Autocorrector ready: words=%d prefix=%s whitespace=%s led=%d",
                 len(self._lex), config.prefix, config.whitespace, config.led)

    # /* ~~~ Build straight from corpus files through a scratch store ~~~ */
    @classmethod
    def from_files(cls, paths: Iterable[str], config: EngineConfig) -> "Autocorrector":
        with make_store(CFG.DEFAULT_DSN) as store:
            n = store.ingest_many(paths)
            log.info("Loaded %d corpus files", n)
            return cls(store.entries(), config)

    # /* ~~~ Build from a store's live counters ~~~ */
    @classmethod
    def from_store(cls, store: CorpusStore, config: EngineConfig) -> "Autocorrector":
        return cls(store.entries(), config)

    @property
    def config(self) -> EngineConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._lex)

    # ------------- query -------------

    def candidates(self, token: str) -> List[str]:
        """Ranked known words matching one input word under the active passes."""
        norm = normalize_token(token)
        if not norm:
            return []
        found: List[str] = []
        for p in self._passes:
            found.extend(p(norm, self._lex))
        return rank_candidates(norm, found, self._lex)

    def suggest(self, line: str) -> List[str]:
        return list(self.iter_suggestions(line))

    def iter_suggestions(self, line: str) -> Iterator[str]:
        for s in self.iter_ranked(line):
            yield s.text

    def iter_ranked(self, line: str) -> Iterator[Suggestion]:
        """
        Lazily yield whole-line suggestions, best first, each with the
        per-slot candidate ranks it was built from (0 = top candidate).
        Stops after config.MAX_LINE_CANDIDATES distinct lines.
        """
        words, seps = split_line(line)
        if not words:
            return

        memo: Dict[str, List[str]] = {}

        def cands(norm: str) -> List[str]:
            if norm not in memo:
                memo[norm] = self.candidates(norm)
            return memo[norm]

        base = [cands(normalize_token(w)) or [w] for w in words]
        segmentations: List[Iterable[Segmentation]] = [[(base, list(seps))]]
        for reseg in self._resegmenters:
            segmentations.append(reseg(words, seps, base, cands))

        seen = set()
        for slots, gaps in itertools.chain.from_iterable(segmentations):
            for combo in itertools.product(*(list(enumerate(slot)) for slot in slots)):
                text = join_line([word for _, word in combo], gaps)
                if text in seen:
                    continue
                seen.add(text)
                yield Suggestion(text=text, rank=tuple(i for i, _ in combo))
                if len(seen) >= CFG.MAX_LINE_CANDIDATES:
                    return
