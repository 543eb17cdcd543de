from __future__ import annotations


class AutocorrectError(Exception):
    """Base class for every error raised by the autocorrect core."""


class SourceReadError(AutocorrectError, OSError):
    """A corpus source could not be opened or read."""


class StoreOpenError(AutocorrectError):
    """The backing store could not be created, attached or understood."""


class StoreClosedError(AutocorrectError):
    """Operation attempted on a store after close()."""


class EmptyCorpusError(AutocorrectError, ValueError):
    """The engine was asked to build over zero known words."""
