from __future__ import annotations
import logging
import os
from collections import Counter
from typing import Iterable, Iterator, List

from . import config as CFG
from .errors import SourceReadError
from .normalize import iter_words

log = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 500


def iter_source_files(paths: Iterable[str]) -> Iterator[str]:
    """
    Yield corpus source paths. Plain paths pass through untouched (even if
    they do not exist, so ingestion reports them); directories are walked
    recursively for *.txt files in sorted order.
    """
    suffix = CFG.SOURCE_SUFFIX.lower()
    for path in paths:
        if not os.path.isdir(path):
            yield path
            continue
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames.sort()
            for fn in sorted(filenames):
                if fn.lower().endswith(suffix):
                    yield os.path.join(dirpath, fn)


def count_words(path: str) -> Counter:
    """
    Read one source and return word -> occurrences in that source.
    Undecodable bytes are dropped; they never surface as errors.
    """
    try:
        with open(path, "r", encoding=CFG.SOURCE_ENCODING, errors="ignore") as f:
            counts: Counter = Counter()
            for line in f:
                counts.update(iter_words(line))
    except OSError as exc:
        raise SourceReadError(f"cannot read corpus source {path!r}: {exc}") from exc
    log.debug("Counted %d distinct words in %s", len(counts), path)
    return counts


def count_sources(paths: List[str]) -> List[Counter]:
    """count_words over several sources; fails on the first unreadable one."""
    out: List[Counter] = []
    for i, path in enumerate(paths, 1):
        out.append(count_words(path))
        if CFG.VERBOSE and i % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d", i)
    return out
