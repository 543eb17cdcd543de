import os

DEFAULT_LED: int = 0
# Scratch store Autocorrector.from_files ingests into
DEFAULT_DSN: str = "memory://"

# Corpus sources: directories are walked for files with this suffix
SOURCE_SUFFIX: str = ".txt"
SOURCE_ENCODING: str = "utf-8"

# /* ~~~ cap how many whole-line suggestions one suggest() call yields ~~~ */
MAX_LINE_CANDIDATES: int = 1000

# Web surface
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 4567

# Progress logging (set AUTOCORRECT_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("AUTOCORRECT_VERBOSE") == "1"
