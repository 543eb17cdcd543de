# autocorrect/DB/api.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Protocol

from ..errors import StoreOpenError
from ..models import WordEntry


class CorpusStore(Protocol):
    """
    Word -> (document frequency, instance count) statistics.
    Mutated only by ingest/ingest_many/reload_all/remove_source; every read
    returns a snapshot that later writes do not touch.
    """
    # Write
    def ingest(self, path: str) -> None: ...
    def ingest_many(self, paths: Iterable[str]) -> int: ...
    def reload_all(self) -> None: ...
    def remove_source(self, path: str) -> None: ...
    # Read
    def document_frequency_map(self) -> Dict[str, int]: ...
    def instance_count_map(self) -> Dict[str, int]: ...
    def entries(self) -> List[WordEntry]: ...
    def get(self, word: str) -> Optional[WordEntry]: ...
    def word_count(self) -> int: ...
    def sources(self) -> List[str]: ...
    # lifecycle
    def close(self) -> None: ...
    def __enter__(self) -> "CorpusStore": ...
    def __exit__(self, *exc) -> None: ...


def make_store(dsn: str) -> CorpusStore:
    """
    Factory:
      - sqlite:///path -> SQLiteStore (created empty if missing)
      - memory://      -> MemoryStore
    """
    if dsn.startswith("sqlite:///"):
        from .sqlite_store import SQLiteStore
        return SQLiteStore(dsn.removeprefix("sqlite:///"))

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    raise StoreOpenError(f"Unsupported store DSN: {dsn}")
