from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileDescriptor:
    name: str
    size_formatted: str
