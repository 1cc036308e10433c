"""Tests for index loading."""

import json
import logging

import httpx
import pytest
from tenacity import wait_none

from sitesearch.search.index import Document, IndexLoadError, SearchIndex, parse_index

RECORDS = [
    {"title": "Indoor Plants", "content": "Bright rooms.", "url": "/indoor.html"},
    {"title": "Watering", "content": "Root rot.", "url": "/watering.html"},
]


class TestParseIndex:
    def test_array(self):
        docs = parse_index(RECORDS)
        assert docs == [
            Document("Indoor Plants", "Bright rooms.", "/indoor.html"),
            Document("Watering", "Root rot.", "/watering.html"),
        ]

    def test_mapping_keeps_insertion_order(self):
        payload = {"watering": RECORDS[1], "indoor": RECORDS[0]}
        assert [d.url for d in parse_index(payload)] == ["/watering.html", "/indoor.html"]

    def test_invalid_records_are_skipped(self, caplog):
        payload = [
            {"title": "Only title and url", "url": "/a"},
            {"content": "no title or url"},
            {"title": 5, "url": "/x"},
        ]
        with caplog.at_level(logging.WARNING):
            docs = parse_index(payload)
        assert docs == [Document("Only title and url", "", "/a")]
        assert "Skipping invalid index record" in caplog.text

    def test_wrong_shape(self):
        with pytest.raises(IndexLoadError):
            parse_index("not an index")


class TestLocalLoad:
    @pytest.mark.asyncio
    async def test_load_file(self, index_file):
        index = SearchIndex(index_file(json.dumps(RECORDS)))
        assert index.loaded is False
        assert len(index) == 0

        assert await index.load() is True
        assert index.loaded is True
        assert [d.title for d in index] == ["Indoor Plants", "Watering"]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path, caplog):
        index = SearchIndex(str(tmp_path / "missing.json"))
        with caplog.at_level(logging.ERROR):
            assert await index.load() is False
        assert index.loaded is False
        assert index.documents == ()
        assert "Error loading search index" in caplog.text

    @pytest.mark.asyncio
    async def test_invalid_json(self, index_file):
        index = SearchIndex(index_file("{not json"))
        assert await index.load() is False
        assert len(index) == 0

    @pytest.mark.asyncio
    async def test_wrong_top_level_shape(self, index_file):
        index = SearchIndex(index_file('"just a string"'))
        assert await index.load() is False

    @pytest.mark.asyncio
    async def test_no_source(self):
        assert await SearchIndex().load() is False

    def test_preloaded_documents(self):
        index = SearchIndex(documents=[Document("A", "", "/a")])
        assert index.loaded is True
        assert len(index) == 1


class TestRemoteLoad:
    @pytest.mark.asyncio
    async def test_load_url(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/search-index.json"
            return httpx.Response(200, json=RECORDS)

        index = SearchIndex(
            "https://example.com/search-index.json",
            transport=httpx.MockTransport(handler),
        )
        assert await index.load() is True
        assert len(index) == 2

    @pytest.mark.asyncio
    async def test_http_error_leaves_index_empty(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500, text="boom")

        index = SearchIndex(
            "https://example.com/search-index.json",
            transport=httpx.MockTransport(handler),
        )
        assert await index.load() is False
        assert len(index) == 0
        # Status errors are not retried
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_transport_error_is_retried(self, monkeypatch):
        monkeypatch.setattr(SearchIndex._fetch_remote.retry, "wait", wait_none())
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) < 3:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json=RECORDS)

        index = SearchIndex(
            "https://example.com/search-index.json",
            transport=httpx.MockTransport(handler),
        )
        assert await index.load() is True
        assert len(calls) == 3
        assert len(index) == 2

    @pytest.mark.asyncio
    async def test_transport_error_gives_up_after_three_attempts(self, monkeypatch):
        monkeypatch.setattr(SearchIndex._fetch_remote.retry, "wait", wait_none())
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        index = SearchIndex(
            "https://example.com/search-index.json",
            transport=httpx.MockTransport(handler),
        )
        assert await index.load() is False
        assert len(calls) == 3
        assert index.loaded is False
        assert len(index) == 0
