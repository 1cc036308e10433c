"""Tests for the web frontend."""

import pytest
from fastapi.testclient import TestClient

from sitesearch.search import SearchIndex
from sitesearch.web.main import app
from sitesearch.web.services import search_engine

client = TestClient(app)


@pytest.fixture(autouse=True)
def loaded_index(documents, monkeypatch):
    monkeypatch.setattr(search_engine, "index", SearchIndex(documents=documents))
    yield search_engine.index


def test_health():
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data == {"ok": True, "index_loaded": True, "documents": 3}


def test_request_id_is_echoed():
    response = client.get("/api/v1/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_search_api_empty_query():
    response = client.get("/api/v1/search")
    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "cleared"
    assert data["hits"] == []
    assert data["total"] == 0


def test_search_api_hint():
    data = client.get("/api/v1/search?q=w").json()
    assert data["state"] == "hint"
    assert data["message"] == "Type at least 2 characters to search..."
    assert data["hits"] == []


def test_search_api_with_query():
    data = client.get("/api/v1/search", params={"q": "watering"}).json()
    assert data["state"] == "results"
    assert data["query"] == "watering"
    assert data["total"] == 1
    assert data["announcement"] == "1 result found"
    hit = data["hits"][0]
    assert hit["title_html"] == "<mark>Watering</mark> Guide"
    assert hit["href"] == "/watering.html#search=watering"


def test_search_api_no_results():
    data = client.get("/api/v1/search", params={"q": "badger"}).json()
    assert data["total"] == 0
    assert data["message"] == 'No results found for "badger"'
    assert data["announcement"] == "No results found"


def test_search_api_before_index_load(monkeypatch, tmp_path):
    monkeypatch.setattr(
        search_engine, "index", SearchIndex(str(tmp_path / "missing.json"))
    )
    data = client.get("/api/v1/search", params={"q": "watering"}).json()
    assert data["state"] == "results"
    assert data["total"] == 0


def test_search_api_truncates_long_query():
    data = client.get("/api/v1/search", params={"q": "x" * 500}).json()
    assert len(data["query"]) == 200


def test_search_page_loads_default():
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Search" in response.text
    assert 'aria-live="off"' in response.text


def test_search_page_lang_ja():
    # Separate client: the lang cookie would leak into other tests
    response = TestClient(app).get("/?lang=ja")
    assert response.status_code == 200
    assert "検索" in response.text


def test_search_page_results():
    response = client.get("/", params={"q": "soil"})
    assert response.status_code == 200
    assert 'aria-label="2 results found"' in response.text
    assert "<mark>soil</mark>" in response.text
    assert 'href="/indoor-plants.html#search=soil"' in response.text


def test_search_page_hint():
    response = client.get("/", params={"q": "s"})
    assert "Type at least 2 characters to search..." in response.text
    assert "main-search-result-item" not in response.text


def test_search_page_no_results():
    response = client.get("/", params={"q": "badger"})
    assert 'aria-label="No results found"' in response.text
    assert "No results found for &#34;badger&#34;" in response.text
