from pathlib import Path
import pytest
from autocorrect import Autocorrector, EngineConfig
from autocorrect_web.web import app as flask_app

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"; root.mkdir()
    p = root / "h.txt"
    p.write_text("To be, or not to be: that is the question.\n", encoding="utf-8")
    return str(p)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Autocorrector.from_files([_seed(tmp_path)], EngineConfig(prefix=True, led=1))
    import autocorrect_web.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)
    return flask_app.test_client()

@pytest.mark.e2e
def test_suggest_api_json(client):
    rv = client.get("/api/suggest?q=questin%20bee")
    assert rv.status_code == 200
    data = rv.get_json()
    assert isinstance(data, list) and data
    assert all(isinstance(s, str) for s in data)
    assert "question be" in data

@pytest.mark.e2e
def test_suggest_api_empty_query(client):
    rv = client.get("/api/suggest?q=")
    assert rv.status_code == 200
    assert rv.get_json() == []

@pytest.mark.e2e
def test_health_and_page(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "words": 8}
    page = client.get("/autocorrect")
    assert page.status_code == 200
    assert b"Autocorrect" in page.data
