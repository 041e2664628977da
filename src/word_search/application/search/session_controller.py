# word_search/application/search/session_controller.py
from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Callable, Optional

from word_search.application.search.aggregator import apply
from word_search.application.search.decoder import decode
from word_search.application.search.interfaces import SearchStream, StateListener
from word_search.domain.search.errors import (
    StaleEventError,
    TransportError,
    SessionStopped,
)
from word_search.domain.search.state import (
    SessionState,
    ActiveState,
    CompletedState,
    FailedState,
    StoppedState,
    IDLE,
)
from word_search.domain.search.value_objects import SearchKeyword, ResultSummary, ErrorInfo

logger = logging.getLogger(__name__)


class SessionController:
    """
    Owns the lifecycle of one progressive search at a time.

    Notes:
    - At most one connection is live: start() closes the previous one first.
    - Every frame is checked against the session it was read for, so a late
      frame from a superseded or stopped session never changes the state.
    - The state object is replaced on every transition, never mutated.
    """

    def __init__(self, stream: SearchStream) -> None:
        self._stream = stream
        self._state: SessionState = IDLE
        self._session_id = 0
        self._pump: Optional[asyncio.Task] = None
        self._listeners: list[StateListener] = []

    # ---------- Caller API ----------

    def current_state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def start(self, keyword: str) -> SessionState:
        word = SearchKeyword(keyword).value

        # Supersede: the previous connection is closed before a new one opens
        previous = self._pump
        self._session_id += 1
        session_id = self._session_id
        if previous is not None and not previous.done():
            if not self._state.status.is_terminal:
                previous.cancel()
            await asyncio.gather(previous, return_exceptions=True)
            if session_id != self._session_id:
                # stopped or superseded again while the old stream was closing
                logger.debug("Search session %s abandoned before opening", session_id)
                return self._state

        self._set_state(ActiveState(keyword=word, progress=None))
        messages = self._stream.open(word)
        self._pump = asyncio.create_task(
            self._run(session_id, messages),
            name=f"word-search-{session_id}",
        )
        logger.debug("Search session %s started for %r", session_id, word)
        return self._state

    def stop(self) -> None:
        # invalidate first so any frame still in flight is stale
        self._session_id += 1
        pump = self._pump
        # a pump past its final status is already closing on its own
        if pump is not None and not pump.done() and not self._state.status.is_terminal:
            pump.cancel()
        if self._state.status.is_active:
            self._set_state(StoppedState(keyword=self._state.keyword))

    async def aclose(self) -> None:
        self.stop()
        await self.wait_closed()

    async def wait_closed(self) -> SessionState:
        pump = self._pump
        if pump is not None:
            await asyncio.gather(pump, return_exceptions=True)
        return self._state

    async def result(self) -> ResultSummary:
        state = await self.wait_closed()
        if isinstance(state, CompletedState):
            return state.result
        if isinstance(state, FailedState):
            raise state.error.to_exception()
        if isinstance(state, StoppedState):
            raise SessionStopped(state.keyword)
        raise SessionStopped()

    # ---------- Stream handling ----------

    def _ensure_current(self, session_id: int) -> None:
        if session_id != self._session_id:
            raise StaleEventError(session_id=session_id, current_session_id=self._session_id)

    def _handle_frame(self, session_id: int, raw: str) -> SessionState:
        self._ensure_current(session_id)
        new_state = apply(self._state, decode(raw))
        if new_state is not self._state:
            self._set_state(new_state)
        return new_state

    def _fail_transport(self, session_id: int) -> None:
        self._ensure_current(session_id)
        if not self._state.status.is_terminal:
            self._set_state(FailedState(error=ErrorInfo.connectivity()))

    async def _run(self, session_id: int, messages: AsyncIterator[str]) -> None:
        try:
            async for raw in messages:
                state = self._handle_frame(session_id, raw)
                if state.status.is_terminal:
                    # nothing further is expected from the server
                    break
            else:
                logger.warning("Search stream %s closed before a final status", session_id)
                self._fail_transport(session_id)
        except StaleEventError as e:
            logger.debug("Discarding stale frame: %s", e)
        except TransportError as e:
            logger.warning("Search stream %s failed: %s", session_id, e)
            self._discard_if_stale(session_id, self._fail_transport)
        except Exception:
            logger.exception("Unexpected error in search stream %s", session_id)
            self._discard_if_stale(session_id, self._fail_transport)
        finally:
            aclose = getattr(messages, "aclose", None)
            if aclose is not None:
                try:
                    await aclose()
                except Exception:
                    logger.exception("Failed to close search stream %s", session_id)
            logger.debug("Search stream %s closed", session_id)

    def _discard_if_stale(self, session_id: int, action: Callable[[int], None]) -> None:
        try:
            action(session_id)
        except StaleEventError as e:
            logger.debug("Discarding stale transport signal: %s", e)

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Search state listener %r failed", listener)
