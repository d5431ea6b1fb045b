import pytest
from ngram.model import Model
from frontend.web import app as flask_app


@pytest.mark.e2e
def test_home_page_and_health():
    import frontend.web as webmod
    m = Model("home", 2)
    webmod._model = m
    try:
        client = flask_app.test_client()
        r = client.get("/")
        assert r.status_code == 200
        assert "n-gram model" in r.data.decode("utf-8", errors="ignore").lower()

        r = client.get("/health")
        assert r.status_code == 200
        assert r.get_json()["ok"] is True
    finally:
        m.close()
        webmod._model = None
