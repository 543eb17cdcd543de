from __future__ import annotations
import re
from typing import Iterator, List, Tuple

# Letters and digits form words; everything else (punctuation, symbols,
# underscores, whitespace) only separates them.
_WORD = re.compile(r"[^\W_]+")


def iter_words(text: str) -> Iterator[str]:
    """Yield the normalized (casefolded) words of a corpus text, in order."""
    for m in _WORD.finditer(text):
        yield m.group(0).casefold()


def normalize_token(token: str) -> str:
    """
    Lookup form of a single word: "Hello," -> "hello".
    Text that ingestion would split into several words ("e-mail", "don't")
    or into none ("...") has no single lookup form and maps to "".
    """
    words = list(iter_words(token))
    return words[0] if len(words) == 1 else ""


def split_line(line: str) -> Tuple[List[str], List[str]]:
    """
    Split an input line into the words ingestion would see and the text
    around them: (words, separators) with len(separators) == len(words) + 1.
    separators[0] precedes the first word, separators[-1] follows the last;
    punctuation is kept there, leading/trailing whitespace is dropped.
    "  (don't) stop " -> (["don", "t", "stop"], ["(", "'", ") ", ""])
    """
    words: List[str] = []
    seps: List[str] = []
    pos = 0
    for m in _WORD.finditer(line):
        seps.append(line[pos:m.start()])
        words.append(m.group(0))
        pos = m.end()
    if not words:
        return [], []
    seps.append(line[pos:].rstrip())
    seps[0] = seps[0].lstrip()
    return words, seps


def join_line(words: List[str], seps: List[str]) -> str:
    """Inverse of split_line."""
    out = [seps[0]]
    for word, sep in zip(words, seps[1:]):
        out.append(word)
        out.append(sep)
    return "".join(out)
