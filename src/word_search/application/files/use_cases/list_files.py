from __future__ import annotations

import logging
from typing import List, Protocol

from word_search.domain.files.entities import FileDescriptor
from word_search.domain.files.errors import ApiError

logger = logging.getLogger(__name__)


class FileCatalog(Protocol):
    def list_files(self) -> List[FileDescriptor]: ...


class ListFilesUseCase:
    """Fetch the searchable files once; a failure leaves the list empty."""

    def __init__(self, catalog: FileCatalog) -> None:
        self._catalog = catalog

    def execute(self) -> List[FileDescriptor]:
        try:
            return self._catalog.list_files()
        except ApiError as e:
            logger.warning("Error fetching files: %s", e)
            return []
