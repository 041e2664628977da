# word_search/domain/search/state.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from word_search.domain.search.enums import SessionStatus
from word_search.domain.search.value_objects import ProgressSnapshot, ResultSummary, ErrorInfo


@dataclass(frozen=True, slots=True)
class IdleState:
    status: ClassVar[SessionStatus] = SessionStatus.IDLE


@dataclass(frozen=True, slots=True)
class ActiveState:
    keyword: str = ""
    progress: Optional[ProgressSnapshot] = None
    status: ClassVar[SessionStatus] = SessionStatus.ACTIVE


@dataclass(frozen=True, slots=True)
class CompletedState:
    result: ResultSummary
    status: ClassVar[SessionStatus] = SessionStatus.COMPLETED


@dataclass(frozen=True, slots=True)
class FailedState:
    error: ErrorInfo
    status: ClassVar[SessionStatus] = SessionStatus.FAILED


@dataclass(frozen=True, slots=True)
class StoppedState:
    keyword: str = ""
    status: ClassVar[SessionStatus] = SessionStatus.STOPPED


SessionState = Union[IdleState, ActiveState, CompletedState, FailedState, StoppedState]

IDLE = IdleState()
