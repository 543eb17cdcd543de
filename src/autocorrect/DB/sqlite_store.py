# autocorrect/DB/sqlite_store.py
from __future__ import annotations
import logging
import os
import sqlite3
from collections import Counter
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from .api import CorpusStore
from .rwlock import RWLock
from ..errors import StoreClosedError, StoreOpenError
from ..loader import count_sources, count_words, iter_source_files
from ..models import WordEntry

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS sources (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  path TEXT NOT NULL UNIQUE
);
CREATE TABLE IF NOT EXISTS words (
  word TEXT PRIMARY KEY,
  doc_freq INTEGER NOT NULL,
  instances INTEGER NOT NULL
);
"""

_UPSERT = (
    "INSERT INTO words(word, doc_freq, instances) VALUES (?, 1, ?) "
    "ON CONFLICT(word) DO UPDATE SET "
    "doc_freq = doc_freq + 1, instances = instances + excluded.instances"
)


class SQLiteStore(CorpusStore):
    """Durable counters in a single SQLite file; outlives the process."""

    def __init__(self, db_path: str) -> None:
        self.db_path = os.path.abspath(db_path)
        self._lock = RWLock()
        try:
            os.makedirs(os.path.dirname(self.db_path) or ".", exist_ok=True)
            self.conn: Optional[sqlite3.Connection] = sqlite3.connect(
                self.db_path, check_same_thread=False
            )
        except (OSError, sqlite3.Error) as exc:
            raise StoreOpenError(f"cannot open store {self.db_path}: {exc}") from exc
        try:
            self.conn.executescript(_SCHEMA)
            self.conn.execute("SELECT word, doc_freq, instances FROM words LIMIT 1").fetchall()
            self.conn.execute("SELECT path FROM sources LIMIT 1").fetchall()
            # read-only files open fine and only fail on the first write
            self.conn.execute("BEGIN IMMEDIATE")
            self.conn.execute("ROLLBACK")
        except sqlite3.Error as exc:
            self.conn.close()
            self.conn = None
            raise StoreOpenError(f"unusable store {self.db_path}: {exc}") from exc
        log.info("Opened corpus store %s (%d words)", self.db_path, self.word_count())

    # ---- Write ----
    def ingest(self, path: str) -> None:
        path = os.path.abspath(path)
        counts = count_words(path)
        with self._lock.write():
            conn = self._conn()
            with self._transaction(conn):
                conn.execute("INSERT OR IGNORE INTO sources(path) VALUES (?)", (path,))
                self._add(conn, counts)
        log.info("Ingested %s: %d distinct words", path, len(counts))

    def ingest_many(self, paths: Iterable[str]) -> int:
        n = 0
        for path in iter_source_files(paths):
            self.ingest(path)
            n += 1
        return n

    def reload_all(self) -> None:
        with self._lock.write():
            conn = self._conn()
            paths = self._source_paths(conn)
            self._replace(conn, paths)
        log.info("Reloaded %d sources", len(paths))

    def remove_source(self, path: str) -> None:
        path = os.path.abspath(path)
        with self._lock.write():
            conn = self._conn()
            paths = self._source_paths(conn)
            if path not in paths:
                raise KeyError(path)
            self._replace(conn, [p for p in paths if p != path], drop=path)
        log.info("Removed source %s", path)

    # ---- Read ----
    def document_frequency_map(self) -> Dict[str, int]:
        with self._lock.read():
            return dict(self._conn().execute("SELECT word, doc_freq FROM words"))

    def instance_count_map(self) -> Dict[str, int]:
        with self._lock.read():
            return dict(self._conn().execute("SELECT word, instances FROM words"))

    def entries(self) -> List[WordEntry]:
        with self._lock.read():
            rows = self._conn().execute("SELECT word, doc_freq, instances FROM words")
            return [WordEntry(w, int(df), int(n)) for w, df, n in rows]

    def get(self, word: str) -> Optional[WordEntry]:
        with self._lock.read():
            row = self._conn().execute(
                "SELECT doc_freq, instances FROM words WHERE word=?", (word,)
            ).fetchone()
        if row is None:
            return None
        return WordEntry(word, int(row[0]), int(row[1]))

    def word_count(self) -> int:
        with self._lock.read():
            return int(self._conn().execute("SELECT COUNT(*) FROM words").fetchone()[0])

    def sources(self) -> List[str]:
        with self._lock.read():
            return self._source_paths(self._conn())

    # ---- lifecycle ----
    def close(self) -> None:
        with self._lock.write():
            if self.conn is not None:
                self.conn.close()
                self.conn = None
                log.info("Closed corpus store %s", self.db_path)

    def __enter__(self) -> "SQLiteStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- internals ----
    @contextmanager
    def _transaction(self, conn: sqlite3.Connection) -> Iterator[None]:
        try:
            with conn:
                yield
        except sqlite3.Error as exc:
            raise StoreOpenError(f"cannot write store {self.db_path}: {exc}") from exc

    def _conn(self) -> sqlite3.Connection:
        if self.conn is None:
            raise StoreClosedError(f"store {self.db_path} is closed")
        return self.conn

    @staticmethod
    def _source_paths(conn: sqlite3.Connection) -> List[str]:
        return [p for (p,) in conn.execute("SELECT path FROM sources ORDER BY id")]

    @staticmethod
    def _add(conn: sqlite3.Connection, counts: Counter) -> None:
        conn.executemany(_UPSERT, ((w, n) for w, n in counts.items() if n > 0))

    def _replace(self, conn: sqlite3.Connection, paths: List[str], drop: Optional[str] = None) -> None:
        # Read every source before touching the table; a missing file leaves it intact.
        per_source = count_sources(paths)
        with self._transaction(conn):
            conn.execute("DELETE FROM words")
            if drop is not None:
                conn.execute("DELETE FROM sources WHERE path=?", (drop,))
            for counts in per_source:
                self._add(conn, counts)
