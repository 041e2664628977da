from __future__ import annotations

from word_search.domain.files.entities import FileDescriptor
from word_search.infrastructure.http.schemas import ListFilesResponse


def to_file_descriptors(body: ListFilesResponse) -> list[FileDescriptor]:
    return [
        FileDescriptor(name=item.name, size_formatted=item.size_formatted)
        for item in body.files
    ]
