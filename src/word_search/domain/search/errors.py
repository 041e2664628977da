from __future__ import annotations


class WordSearchError(Exception):
    """Base class for every error raised by the search client."""


class ValidationError(WordSearchError, ValueError):
    def __init__(self, reason: str = "Search keyword cannot be empty.") -> None:
        super().__init__(reason)


class DecodeError(WordSearchError):
    def __init__(self, *, raw: str, reason: str) -> None:
        super().__init__(f"Could not decode stream frame: {reason}")
        self.raw = raw
        self.reason = reason


class TransportError(WordSearchError):
    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or "Could not connect to the search server")


class ServerReportedError(WordSearchError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StaleEventError(WordSearchError):
    def __init__(self, *, session_id: int, current_session_id: int) -> None:
        super().__init__(
            f"Frame for session {session_id} arrived while session {current_session_id} is current"
        )
        self.session_id = session_id
        self.current_session_id = current_session_id


class SessionStopped(WordSearchError):
    def __init__(self, keyword: str | None = None) -> None:
        if keyword:
            super().__init__(f"Search for '{keyword}' was stopped")
        else:
            super().__init__("Search was stopped")
        self.keyword = keyword
