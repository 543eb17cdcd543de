import pytest
from autocorrect import Autocorrector, EngineConfig
from autocorrect.models import WordEntry
from autocorrect.search import levenshtein

WORDS = {
    # word: (document frequency, instance count)
    "the": (3, 40),
    "then": (2, 9),
    "there": (2, 9),
    "these": (1, 9),
    "they": (3, 12),
    "hello": (2, 3),
    "help": (1, 1),
    "helps": (1, 1),
    "world": (1, 2),
    "word": (2, 2),
}

def _engine(**kw) -> Autocorrector:
    entries = [WordEntry(w, df, n) for w, (df, n) in WORDS.items()]
    return Autocorrector(entries, EngineConfig(**kw))

@pytest.mark.parametrize("word", sorted(WORDS))
def test_known_word_exact_only_yields_itself(word: str):
    assert _engine().suggest(word) == [word]

def test_exact_match_is_case_and_punctuation_insensitive():
    assert _engine().suggest("Hello,") == ["hello,"]

def test_unknown_token_degrades_to_identity():
    eng = _engine(led=1)
    assert eng.suggest("zzzzz") == ["zzzzz"]
    assert eng.suggest("hello zzzzz") == ["hello zzzzz"]

def test_prefix_pass_candidates_start_with_token():
    eng = _engine(prefix=True)
    cands = eng.candidates("the")
    assert cands[0] == "the"
    assert set(cands) == {"the", "then", "there", "these", "they"}
    assert all(c.startswith("the") for c in cands)

def test_prefix_ranking_and_tie_breaks():
    # they(12) > then/there/these(9); df breaks then/there(2) vs these(1); then alpha.
    assert _engine(prefix=True).candidates("THE") == ["the", "they", "then", "there", "these"]

@pytest.mark.parametrize("token", ["helo", "wrld", "tehm", "x", "helpz"])
@pytest.mark.parametrize("d", [1, 2])
def test_edit_distance_pass_is_sound_and_complete(token: str, d: int):
    got = set(_engine(led=d).candidates(token))
    want = {w for w in WORDS if levenshtein(token, w) <= d}
    assert got == want
    assert all(levenshtein(token, w) <= d for w in got)

def test_ranking_orders_by_instance_count():
    eng = _engine(led=2)
    cands = eng.candidates("helo")
    counts = [WORDS[w][1] for w in cands]
    assert counts == sorted(counts, reverse=True)

def test_exact_match_outranks_more_frequent_neighbours():
    assert _engine(led=1).candidates("word")[0] == "word"

def test_multi_token_lines_keep_separators():
    assert _engine(led=1).suggest("helo  wrld") == ["hello  world", "help  world"]

def test_suggest_is_idempotent_and_deduplicated():
    eng = _engine(prefix=True, whitespace=True, led=2)
    first = eng.suggest("the helo")
    assert first == eng.suggest("the helo")
    assert len(first) == len(set(first))

def test_iter_suggestions_is_lazy():
    it = _engine(prefix=True).iter_suggestions("the")
    assert next(it) == "the"

def test_config_is_exposed_read_only():
    eng = _engine(prefix=True, led=1)
    assert eng.config == EngineConfig(prefix=True, led=1)
    with pytest.raises(AttributeError):
        eng.config.led = 3

def test_iter_ranked_reports_slot_ranks():
    ranked = list(_engine(led=1).iter_ranked("helo  wrld"))
    assert [s.text for s in ranked] == ["hello  world", "help  world"]
    assert [s.rank for s in ranked] == [(0, 0), (1, 0)]
