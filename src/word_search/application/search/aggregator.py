from __future__ import annotations

from word_search.domain.search.enums import ErrorKind, EventKind
from word_search.domain.search.events import InboundEvent
from word_search.domain.search.state import (
    SessionState,
    ActiveState,
    CompletedState,
    FailedState,
)
from word_search.domain.search.value_objects import ProgressSnapshot, ResultSummary, ErrorInfo

STARTED_MESSAGE = "search started"


def _keyword_of(state: SessionState) -> str:
    return state.keyword if isinstance(state, ActiveState) else ""


def _progress_of(state: SessionState) -> ProgressSnapshot | None:
    return state.progress if isinstance(state, ActiveState) else None


def apply(current: SessionState, event: InboundEvent) -> SessionState:
    """
    Fold one inbound event into the session state.

    Terminal states absorb every event unchanged. Unrecognized events leave
    the state as it is.
    """
    if current.status.is_terminal:
        return current

    keyword = _keyword_of(current)
    kind = event.kind

    if kind is EventKind.STARTED:
        # a repeated "started" mid-stream resets the counters
        return ActiveState(
            keyword=keyword,
            progress=ProgressSnapshot.build(
                message=STARTED_MESSAGE,
                match_count=0,
                processed_files=0,
                total_files=0,
            ),
        )

    if kind is EventKind.INFO:
        prev = _progress_of(current)
        match_count = prev.match_count if prev else 0
        processed = prev.processed_files if prev else 0
        prev_total = prev.total_files if prev else 0
        total = event.total_files if event.total_files is not None else prev_total
        return ActiveState(
            keyword=keyword,
            progress=ProgressSnapshot.build(
                message=event.message,
                match_count=match_count,
                processed_files=processed,
                total_files=total,
            ),
        )

    if kind is EventKind.PROGRESS:
        return ActiveState(
            keyword=keyword,
            progress=ProgressSnapshot.build(
                message=f"processing file: {event.current_file}",
                match_count=event.count,
                processed_files=event.processed_files,
                total_files=event.total_files,
            ),
        )

    if kind is EventKind.COMPLETED:
        return CompletedState(
            result=ResultSummary(
                keyword=event.word,
                match_count=event.count,
                processed_files=event.processed_files,
                total_files=event.total_files,
            )
        )

    if kind is EventKind.ERROR:
        return FailedState(error=ErrorInfo(message=event.message, kind=ErrorKind.SERVER))

    return current
