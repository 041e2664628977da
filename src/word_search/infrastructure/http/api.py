# word_search/infrastructure/http/api.py
from __future__ import annotations

from typing import List, Optional

import httpx

from word_search.domain.files.entities import FileDescriptor
from word_search.infrastructure.http.errors import handle_httpx_errors
from word_search.infrastructure.http.mappers import to_file_descriptors
from word_search.infrastructure.http.schemas import ListFilesResponse


class Api:
    """
    Thin API client for the word search server.

    Assumes server routes:
      GET /api/files -> {"files": [{"name": "...", "sizeFormatted": "..."}]}

    The search stream itself is handled by HttpxSearchStream.
    """

    def __init__(
            self,
            base_url: str,
            timeout: float = 30.0,
            transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Api":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---------- Files endpoints ----------

    @handle_httpx_errors
    def list_files(self) -> List[FileDescriptor]:
        resp = self._client.get("/api/files")
        resp.raise_for_status()
        body = ListFilesResponse.model_validate(resp.json())
        return to_file_descriptors(body)
