from pathlib import Path
import pytest
from ngram.model import Model
from frontend.web import app as flask_app


@pytest.fixture
def client():
    import frontend.web as webmod
    m = Model("web", 2)
    m.train_lines(["the cat sat.", "the cat ran."])
    webmod._model = m
    yield flask_app.test_client()
    m.close()
    webmod._model = None


@pytest.mark.e2e
def test_stats_and_sentences(client):
    r = client.get("/api/stats")
    assert r.status_code == 200
    data = r.get_json()
    assert data["name"] == "web" and data["depth"] == 2
    assert data["entries"] > 0 and data["start"] == 1

    r = client.get("/api/sentence?n=3&seed=1")
    assert r.status_code == 200
    rows = r.get_json()
    assert len(rows) == 3
    assert set(rows) <= {"the cat sat.", "the cat ran."}


@pytest.mark.e2e
def test_train_by_text_and_path(client, tmp_path: Path):
    r = client.post("/api/train", json={"text": "a dog ran."})
    assert r.status_code == 200
    assert r.get_json()["start"] == 2

    f = tmp_path / "more.txt"
    f.write_text("one fish two fish.\n", encoding="utf-8")
    r = client.post("/api/train", json={"path": str(f)})
    assert r.status_code == 200
    assert r.get_json()["windows"] > 0


@pytest.mark.e2e
def test_train_errors(client, tmp_path: Path):
    r = client.post("/api/train", json={"path": str(tmp_path / "missing.txt")})
    assert r.status_code == 404
    assert "error" in r.get_json()

    r = client.post("/api/train", json={"nothing": 1})
    assert r.status_code == 400
