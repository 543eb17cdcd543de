# autocorrect/DB/memory_store.py
from __future__ import annotations
import logging
import os
from collections import Counter
from typing import Dict, Iterable, List, Optional

from .api import CorpusStore
from .rwlock import RWLock
from ..errors import StoreClosedError
from ..loader import count_sources, count_words, iter_source_files
from ..models import WordEntry

log = logging.getLogger(__name__)


class _Counts:
    """One generation of counters; reload builds a new one instead of clearing."""
    __slots__ = ("doc_freq", "instances")

    def __init__(self) -> None:
        self.doc_freq: Dict[str, int] = {}
        self.instances: Dict[str, int] = {}

    def add(self, counts: Counter) -> None:
        for word, n in counts.items():
            if n <= 0:
                continue
            self.doc_freq[word] = self.doc_freq.get(word, 0) + 1
            self.instances[word] = self.instances.get(word, 0) + n


class MemoryStore(CorpusStore):
    """In-memory counters (tests, from_files engines, ephemeral runs)."""

    def __init__(self) -> None:
        self._lock = RWLock()
        self._counts = _Counts()
        self._sources: List[str] = []
        self._closed = False

    # ---- Write ----
    def ingest(self, path: str) -> None:
        path = os.path.abspath(path)
        counts = count_words(path)
        with self._lock.write():
            self._check_open()
            self._counts.add(counts)
            if path not in self._sources:
                self._sources.append(path)
        log.info("Ingested %s: %d distinct words", path, len(counts))

    def ingest_many(self, paths: Iterable[str]) -> int:
        n = 0
        for path in iter_source_files(paths):
            self.ingest(path)
            n += 1
        return n

    def reload_all(self) -> None:
        with self._lock.write():
            self._check_open()
            self._counts = self._rebuild(self._sources)
        log.info("Reloaded %d sources: %d words", len(self._sources), len(self._counts.instances))

    def remove_source(self, path: str) -> None:
        path = os.path.abspath(path)
        with self._lock.write():
            self._check_open()
            if path not in self._sources:
                raise KeyError(path)
            remaining = [p for p in self._sources if p != path]
            self._counts = self._rebuild(remaining)
            self._sources = remaining
        log.info("Removed source %s", path)

    # ---- Read ----
    def document_frequency_map(self) -> Dict[str, int]:
        with self._lock.read():
            self._check_open()
            return dict(self._counts.doc_freq)

    def instance_count_map(self) -> Dict[str, int]:
        with self._lock.read():
            self._check_open()
            return dict(self._counts.instances)

    def entries(self) -> List[WordEntry]:
        with self._lock.read():
            self._check_open()
            df = self._counts.doc_freq
            return [WordEntry(w, df[w], n) for w, n in self._counts.instances.items()]

    def get(self, word: str) -> Optional[WordEntry]:
        with self._lock.read():
            self._check_open()
            n = self._counts.instances.get(word)
            if n is None:
                return None
            return WordEntry(word, self._counts.doc_freq[word], n)

    def word_count(self) -> int:
        with self._lock.read():
            self._check_open()
            return len(self._counts.instances)

    def sources(self) -> List[str]:
        with self._lock.read():
            self._check_open()
            return list(self._sources)

    # ---- lifecycle ----
    def close(self) -> None:
        with self._lock.write():
            self._counts = _Counts()
            self._sources = []
            self._closed = True

    def __enter__(self) -> "MemoryStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- internals ----
    def _check_open(self) -> None:
        if self._closed:
            raise StoreClosedError("store is closed")

    @staticmethod
    def _rebuild(paths: List[str]) -> _Counts:
        fresh = _Counts()
        for counts in count_sources(paths):
            fresh.add(counts)
        return fresh
