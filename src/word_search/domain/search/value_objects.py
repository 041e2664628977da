# word_search/domain/search/value_objects.py
from __future__ import annotations

from dataclasses import dataclass

from word_search.domain.search.enums import ErrorKind
from word_search.domain.search.errors import ValidationError, ServerReportedError, TransportError

CONNECTIVITY_MESSAGE = "Could not connect to the search server"


@dataclass(frozen=True)
class SearchKeyword:
    value: str

    def __post_init__(self) -> None:
        word = (self.value or "").strip()

        if not word:
            raise ValidationError("Search keyword cannot be empty.")

        # normalize stored value
        object.__setattr__(self, "value", word)

    def __str__(self) -> str:
        return self.value


def compute_percentage(processed_files: int, total_files: int) -> int:
    """
    Whole-number percentage of processed files, rounded half up.

    Returns 0 while the total is unknown and never more than 100.
    """
    if total_files <= 0:
        return 0
    pct = (200 * processed_files + total_files) // (2 * total_files)
    return max(0, min(100, pct))


@dataclass(frozen=True, slots=True)
class ProgressSnapshot:
    message: str
    match_count: int = 0
    processed_files: int = 0
    total_files: int = 0
    percentage: int = 0

    @classmethod
    def build(
            cls,
            *,
            message: str,
            match_count: int,
            processed_files: int,
            total_files: int,
    ) -> "ProgressSnapshot":
        if total_files > 0:
            processed_files = min(processed_files, total_files)
        return cls(
            message=message,
            match_count=match_count,
            processed_files=processed_files,
            total_files=total_files,
            percentage=compute_percentage(processed_files, total_files),
        )


@dataclass(frozen=True, slots=True)
class ResultSummary:
    keyword: str
    match_count: int
    processed_files: int
    total_files: int


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    message: str
    kind: ErrorKind = ErrorKind.SERVER

    @classmethod
    def connectivity(cls) -> "ErrorInfo":
        return cls(message=CONNECTIVITY_MESSAGE, kind=ErrorKind.TRANSPORT)

    def to_exception(self) -> Exception:
        if self.kind is ErrorKind.TRANSPORT:
            return TransportError(self.message)
        return ServerReportedError(self.message)
