from __future__ import annotations

from functools import singledispatch

from word_search.application.search.schemas import (
    StartedFrame,
    InfoFrame,
    ProgressFrame,
    CompletedFrame,
    ErrorFrame,
)
from word_search.domain.search.events import InboundEvent, Started, Info, Progress, Completed, Error


@singledispatch
def frame_to_event(frame) -> InboundEvent:
    raise TypeError(f"Unsupported frame type: {type(frame).__name__}")


@frame_to_event.register
def _(frame: StartedFrame) -> InboundEvent:
    return Started()


@frame_to_event.register
def _(frame: InfoFrame) -> InboundEvent:
    return Info(message=frame.message, total_files=frame.total_files)


@frame_to_event.register
def _(frame: ProgressFrame) -> InboundEvent:
    return Progress(
        current_file=frame.current_file,
        count=frame.count,
        processed_files=frame.processed_files,
        total_files=frame.total_files,
    )


@frame_to_event.register
def _(frame: CompletedFrame) -> InboundEvent:
    return Completed(
        word=frame.word,
        count=frame.count,
        processed_files=frame.processed_files,
        total_files=frame.total_files,
    )


@frame_to_event.register
def _(frame: ErrorFrame) -> InboundEvent:
    return Error(message=frame.message)
