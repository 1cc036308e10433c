"""
Search Index Loading

The index is built elsewhere and shipped as JSON: either an array of
{title, content, url} records or an object mapping page keys to records.
It is loaded once, asynchronously. Until the load succeeds the index is
empty, so early searches simply find nothing.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """A single indexed page."""

    title: str
    content: str
    url: str


class IndexRecord(BaseModel):
    """Wire format of one index entry."""

    title: str
    content: str = ""
    url: str


class IndexLoadError(Exception):
    pass


def _is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_index(payload: Any) -> list[Document]:
    """
    Convert decoded index JSON into documents.

    Invalid records are skipped with a warning; a payload of the wrong
    shape raises IndexLoadError.
    """
    if isinstance(payload, dict):
        records = list(payload.values())
    elif isinstance(payload, list):
        records = payload
    else:
        raise IndexLoadError(
            f"Index must be a JSON array or object, got {type(payload).__name__}"
        )

    documents = []
    for position, raw in enumerate(records):
        try:
            record = IndexRecord.model_validate(raw)
        except ValidationError as exc:
            logger.warning(f"Skipping invalid index record #{position}: {exc}")
            continue
        documents.append(
            Document(title=record.title, content=record.content, url=record.url)
        )
    return documents


class SearchIndex:
    """
    Ordered, read-only collection of documents.

    Identity of a document is its position in the index.
    """

    def __init__(
        self,
        source: str | None = None,
        documents: list[Document] | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.source = source
        self.timeout = timeout
        self._transport = transport
        self._documents: tuple[Document, ...] = tuple(documents or ())
        self.loaded = documents is not None

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self):
        return iter(self._documents)

    async def load(self, source: str | None = None) -> bool:
        """
        Load the index from a local path or an http(s) URL.

        Failures are logged and leave the index empty.

        Returns:
            True if the index was loaded.
        """
        source = source or self.source
        if not source:
            logger.error("Error loading search index: no index source configured")
            return False

        try:
            if _is_remote(source):
                payload = await self._fetch_remote(source)
            else:
                payload = await asyncio.to_thread(self._read_local, source)
            documents = parse_index(payload)
        except (httpx.HTTPError, OSError, ValueError, IndexLoadError) as exc:
            logger.error(f"Error loading search index from {source}: {exc}")
            return False

        self._documents = tuple(documents)
        self.source = source
        self.loaded = True
        logger.info(f"Loaded search index: {len(documents)} documents from {source}")
        return True

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        reraise=True,
    )
    async def _fetch_remote(self, url: str) -> Any:
        """GET the index JSON, retrying transport failures."""
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.json()

    @staticmethod
    def _read_local(path: str) -> Any:
        with open(Path(path), "r", encoding="utf-8") as f:
            return json.load(f)
