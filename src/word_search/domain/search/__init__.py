from .enums import SessionStatus, EventKind, ErrorKind
from .errors import (
    WordSearchError,
    ValidationError,
    DecodeError,
    TransportError,
    ServerReportedError,
    StaleEventError,
    SessionStopped,
)
from .state import SessionState, IdleState, ActiveState, CompletedState, FailedState, StoppedState, IDLE
from .value_objects import SearchKeyword, ProgressSnapshot, ResultSummary, ErrorInfo, compute_percentage
