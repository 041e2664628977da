# word_search/domain/search/events.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from word_search.domain.search.enums import EventKind


@dataclass(frozen=True, slots=True)
class Started:
    kind: ClassVar[EventKind] = EventKind.STARTED


@dataclass(frozen=True, slots=True)
class Info:
    message: str
    total_files: int | None = None  # None: keep the previous total
    kind: ClassVar[EventKind] = EventKind.INFO


@dataclass(frozen=True, slots=True)
class Progress:
    current_file: str
    count: int
    processed_files: int
    total_files: int
    kind: ClassVar[EventKind] = EventKind.PROGRESS


@dataclass(frozen=True, slots=True)
class Completed:
    word: str
    count: int
    processed_files: int
    total_files: int
    kind: ClassVar[EventKind] = EventKind.COMPLETED


@dataclass(frozen=True, slots=True)
class Error:
    message: str
    kind: ClassVar[EventKind] = EventKind.ERROR


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """A frame that could not be decoded; kept verbatim for diagnostics."""
    raw: str
    kind: ClassVar[EventKind] = EventKind.UNRECOGNIZED


InboundEvent = Union[Started, Info, Progress, Completed, Error, Unrecognized]
