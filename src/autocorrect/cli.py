from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from . import config as CFG
from .DB.api import CorpusStore, make_store
from .engine import Autocorrector
from .errors import AutocorrectError
from .models import EngineConfig


USAGE = "./run --data=<list of files> \n[--prefix] [--whitespace] [--led=<led>]\n"


def add_corpus_args(p: argparse.ArgumentParser) -> None:
    """Corpus and engine flags shared by the CLI and the web front end."""
    p.add_argument("--data", default=None, help="Comma-separated corpus files or folders")
    p.add_argument("--database", default=None, help="SQLite path for persisted word counts")
    p.add_argument("--delete", default=None, help="Unregister a source from --database and recount")
    p.add_argument("--prefix", action="store_true", help="Suggest words the token is a prefix of")
    p.add_argument("--whitespace", action="store_true", help="Try one merged or split token")
    p.add_argument("--led", type=int, default=CFG.DEFAULT_LED, help="Max Levenshtein edit distance")
    p.add_argument("--verbose", action="store_true")


def split_data(data: Optional[str]) -> List[str]:
    return [p for p in (data or "").split(",") if p]


def open_engine(args: argparse.Namespace) -> Tuple[Autocorrector, Optional[CorpusStore]]:
    """
    Build the engine the flags ask for.
      --database [--data]: ingest --data into the store, or reload every
                           registered source when --data is absent.
      --data only:         in-memory engine straight from the files.
    The returned store (if any) is still open; the caller closes it.
    """
    config = EngineConfig(prefix=args.prefix, whitespace=args.whitespace, led=args.led)
    files = split_data(args.data)

    if not args.database:
        return Autocorrector.from_files(files, config), None

    store = make_store(f"sqlite:///{args.database}")
    try:
        if args.delete:
            store.remove_source(args.delete)
        if files:
            store.ingest_many(files)
        elif not args.delete:
            store.reload_all()
        return Autocorrector.from_store(store, config), store
    except BaseException:
        store.close()
        raise


def print_stats(store: CorpusStore, out: TextIO = sys.stdout) -> None:
    print("\u001b[35mCorpus Statistics:\u001b[0m", file=out)
    for word, n in store.document_frequency_map().items():
        print(f"{word} : {n}", file=out)
    print("\u001b[35mWord Statistics:\u001b[0m", file=out)
    for word, n in store.instance_count_map().items():
        print(f"{word} : {n}", file=out)


def run_repl(engine: Autocorrector, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> None:
    """One line in, one suggestion per output line, until EOF."""
    for line in inp:
        for s in engine.iter_suggestions(line.rstrip("\r\n")):
            print(s, file=out)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="autocorrect", description="Autocorrect REPL over a word corpus")
    add_corpus_args(p)
    p.add_argument("--stats", action="store_true", help="Print corpus statistics (needs --database)")
    p.add_argument("--gui", action="store_true", help="Serve the web UI instead of the REPL")
    p.add_argument("--host", default=CFG.DEFAULT_HOST)
    p.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    args = p.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    if not (args.data or args.database):
        print("ERROR: usage", file=sys.stderr)
        print(USAGE, end="", file=sys.stderr)
        return 1

    try:
        engine, store = open_engine(args)
    except (AutocorrectError, KeyError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    try:
        if args.stats and store is not None:
            print_stats(store)
        if args.gui:
            from autocorrect_web.web import serve
            serve(engine, host=args.host, port=args.port, debug=args.verbose)
        else:
            run_repl(engine)
        return 0
    finally:
        if store is not None:
            store.close()
