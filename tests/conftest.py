import pytest

from word_search.application.search.session_controller import SessionController
from word_search.domain.search.state import SessionState
from tests.unit.fakes.search_stream import FakeSearchStream


@pytest.fixture
def stream() -> FakeSearchStream:
    return FakeSearchStream()


@pytest.fixture
def controller(stream: FakeSearchStream) -> SessionController:
    return SessionController(stream)


@pytest.fixture
def seen_states(controller: SessionController) -> list[SessionState]:
    states: list[SessionState] = []
    controller.subscribe(states.append)
    return states
