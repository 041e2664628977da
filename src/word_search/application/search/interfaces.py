from __future__ import annotations

from typing import AsyncIterator, Callable, Protocol

from word_search.domain.search.state import SessionState


class SearchStream(Protocol):
    """
    Opens the server push stream for one keyword.

    The returned iterator yields the raw payload of each frame in send order.
    Closing it (or cancelling the task iterating it) must release the
    connection. Connection-level failures are raised as TransportError.
    """

    def open(self, keyword: str) -> AsyncIterator[str]: ...


StateListener = Callable[[SessionState], None]
