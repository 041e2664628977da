from __future__ import annotations

from word_search.domain.files.entities import FileDescriptor


class FakeFileCatalog:
    def __init__(
            self,
            files: list[FileDescriptor] | None = None,
            *,
            raise_on_list: Exception | None = None,
    ) -> None:
        self.files = files or []
        self.raise_on_list = raise_on_list
        self.calls = 0

    def list_files(self) -> list[FileDescriptor]:
        self.calls += 1
        if self.raise_on_list:
            raise self.raise_on_list
        return list(self.files)
