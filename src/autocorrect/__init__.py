"""Public API for the autocorrect engine."""
from .DB.api import CorpusStore, make_store
from .engine import Autocorrector
from .errors import (
    AutocorrectError,
    EmptyCorpusError,
    SourceReadError,
    StoreClosedError,
    StoreOpenError,
)
from .models import EngineConfig, Suggestion, WordEntry

__all__ = [
    "Autocorrector",
    "AutocorrectError",
    "CorpusStore",
    "EmptyCorpusError",
    "EngineConfig",
    "SourceReadError",
    "StoreClosedError",
    "StoreOpenError",
    "Suggestion",
    "WordEntry",
    "make_store",
]
