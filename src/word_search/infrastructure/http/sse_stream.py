# word_search/infrastructure/http/sse_stream.py
from __future__ import annotations

import logging
from typing import AsyncIterator, Optional
from urllib.parse import quote

import httpx
from httpx_sse import SSEError, aconnect_sse

from word_search.domain.search.errors import TransportError
from word_search.infrastructure.http.errors import unwrap_error

logger = logging.getLogger(__name__)


def search_path(keyword: str) -> str:
    # encode exactly once; "/" and "?" must not survive as path syntax
    return f"/api/search/{quote(keyword, safe='')}"


class HttpxSearchStream:
    """
    Server-Sent Events transport for GET /api/search/{keyword}.

    Yields the data payload of every event. Closing the iterator closes the
    response and the client that carried it.
    """

    def __init__(
            self,
            base_url: str,
            *,
            timeout: float = 30.0,
            connect_timeout: float = 10.0,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        # no read timeout: a quiet stream stays open until the server or caller ends it
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout, read=None)
        self._transport = transport

    async def open(self, keyword: str) -> AsyncIterator[str]:
        path = search_path(keyword)
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                async with aconnect_sse(client, "GET", path) as event_source:
                    event_source.response.raise_for_status()
                    logger.debug("Opened search stream %s", path)
                    async for sse in event_source.aiter_sse():
                        if not sse.data:
                            continue
                        yield sse.data
        except (httpx.HTTPError, SSEError) as e:
            raise TransportError(unwrap_error(e)) from e
