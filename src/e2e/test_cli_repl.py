import io
from pathlib import Path
import pytest
from autocorrect import cli

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"; root.mkdir()
    (root / "a.txt").write_text("hello hello hello help world world\n", encoding="utf-8")
    (root / "b.txt").write_text("new york\n", encoding="utf-8")
    return f"{root / 'a.txt'},{root / 'b.txt'}"

@pytest.mark.e2e
def test_repl_prints_one_suggestion_per_line(tmp_path: Path, monkeypatch, capsys):
    data = _seed(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("helo\nnewyork\n\n"))
    assert cli.main(["--data", data, "--led", "1", "--whitespace"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:2] == ["hello", "help"]
    assert "new york" in out

@pytest.mark.e2e
def test_database_stats_and_reload(tmp_path: Path, monkeypatch, capsys):
    data = _seed(tmp_path)
    db = tmp_path / "corpus.sqlite3"
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["--data", data, "--database", str(db)]) == 0

    monkeypatch.setattr("sys.stdin", io.StringIO("york\n"))
    assert cli.main(["--database", str(db), "--stats"]) == 0
    out = capsys.readouterr().out
    assert "Corpus Statistics:" in out and "Word Statistics:" in out
    assert "hello : 1" in out and "hello : 3" in out
    assert out.rstrip().endswith("york")

@pytest.mark.e2e
def test_delete_source(tmp_path: Path, monkeypatch, capsys):
    data = _seed(tmp_path)
    a = data.split(",")[0]
    db = tmp_path / "corpus.sqlite3"
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["--data", data, "--database", str(db)]) == 0
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\n"))
    assert cli.main(["--database", str(db), "--delete", a, "--led", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["hello"]

def test_usage_without_corpus(capsys):
    assert cli.main([]) == 1
    assert "ERROR: usage" in capsys.readouterr().err

def test_missing_file_reports_error(tmp_path: Path, capsys):
    assert cli.main(["--data", str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().err.startswith("ERROR:")
