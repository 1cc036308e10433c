"""Test fixtures for sitesearch tests."""

import os

# Set ENVIRONMENT before importing any modules that read settings
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from sitesearch.search import Document, SearchEngine, SearchIndex


@pytest.fixture
def documents():
    """A small index: title match, content match, fuzzy-only match."""
    return [
        Document(
            title="Indoor Plants",
            content="Indoor plants brighten a room. Most need indirect light and well-drained soil.",
            url="/indoor-plants.html",
        ),
        Document(
            title="Watering Guide",
            content="Overwatering causes root rot. Check the soil before watering.",
            url="/watering.html",
        ),
        Document(
            title="Repotting",
            content="Repot in spring when roots circle the pot.",
            url="/repotting.html",
        ),
    ]


@pytest.fixture
def engine(documents):
    return SearchEngine(SearchIndex(documents=documents), debounce_delay=0.05)


@pytest.fixture
def index_file(tmp_path):
    """Write an index JSON file and return its path."""

    def _write(content: str) -> str:
        path = tmp_path / "search-index.json"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
