from .api import CorpusStore, make_store

__all__ = ["CorpusStore", "make_store"]
