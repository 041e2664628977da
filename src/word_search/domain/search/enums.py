from __future__ import annotations

from enum import StrEnum


class SessionStatus(StrEnum):
    IDLE = "IDLE"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    STOPPED = "STOPPED"

    @property
    def is_terminal(self) -> bool:
        return self in {SessionStatus.COMPLETED, SessionStatus.FAILED, SessionStatus.STOPPED}

    @property
    def is_active(self) -> bool:
        return self is SessionStatus.ACTIVE


class EventKind(StrEnum):
    STARTED = "started"
    INFO = "info"
    PROGRESS = "progress"
    COMPLETED = "completed"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"


class ErrorKind(StrEnum):
    SERVER = "SERVER"
    TRANSPORT = "TRANSPORT"
