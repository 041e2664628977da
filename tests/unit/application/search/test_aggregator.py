from __future__ import annotations

import pytest

from word_search.application.search.aggregator import apply, STARTED_MESSAGE
from word_search.domain.search.enums import ErrorKind, SessionStatus
from word_search.domain.search.events import Started, Info, Progress, Completed, Error, Unrecognized
from word_search.domain.search.state import (
    ActiveState,
    CompletedState,
    FailedState,
    StoppedState,
    IDLE,
)
from word_search.domain.search.value_objects import ProgressSnapshot, ResultSummary, ErrorInfo


@pytest.fixture
def active() -> ActiveState:
    return ActiveState(keyword="cat", progress=None)


def _progress(processed: int, total: int, count: int = 0) -> Progress:
    return Progress(current_file="f.txt", count=count, processed_files=processed, total_files=total)


class TestNonTerminalEvents:
    def test_started_resets_counters(self, active: ActiveState) -> None:
        state = apply(active, Started())

        assert state == ActiveState(
            keyword="cat",
            progress=ProgressSnapshot(message=STARTED_MESSAGE, match_count=0, processed_files=0, total_files=0, percentage=0),
        )

    def test_started_mid_stream_resets(self, active: ActiveState) -> None:
        state = apply(apply(active, _progress(4, 10, count=7)), Started())

        assert state.progress.match_count == 0
        assert state.progress.processed_files == 0
        assert state.progress.percentage == 0

    def test_info_carries_counts_forward(self, active: ActiveState) -> None:
        state = apply(active, _progress(3, 10, count=5))
        state = apply(state, Info(message="still scanning", total_files=20))

        assert state.progress.message == "still scanning"
        assert state.progress.match_count == 5
        assert state.progress.processed_files == 3
        assert state.progress.total_files == 20
        # recomputed from the new total, not carried
        assert state.progress.percentage == 15

    def test_info_lowering_total_keeps_processed_within_it(self, active: ActiveState) -> None:
        state = apply(active, _progress(8, 10, count=2))
        state = apply(state, Info(message="rescanned", total_files=5))

        assert state.progress.processed_files == 5
        assert state.progress.total_files == 5
        assert state.progress.percentage == 100

    def test_info_without_total_keeps_previous_total(self, active: ActiveState) -> None:
        state = apply(active, Info(message="scanning", total_files=10))
        state = apply(state, Info(message="almost", total_files=None))

        assert state.progress.total_files == 10

    def test_info_from_idle_starts_from_zero(self) -> None:
        state = apply(IDLE, Info(message="scanning", total_files=10))

        assert isinstance(state, ActiveState)
        assert state.progress.match_count == 0
        assert state.progress.total_files == 10

    def test_progress_describes_current_file(self, active: ActiveState) -> None:
        state = apply(active, Progress(current_file="f3.txt", count=5, processed_files=3, total_files=10))

        assert state.progress.message == "processing file: f3.txt"
        assert state.progress.match_count == 5
        assert state.progress.percentage == 30

    @pytest.mark.parametrize(
        ("processed", "total", "expected"),
        [
            (0, 0, 0),
            (5, 0, 0),
            (0, 10, 0),
            (1, 3, 33),
            (2, 3, 67),
            (1, 8, 13),  # 12.5 rounds half up
            (10, 10, 100),
        ],
    )
    def test_percentage(self, active: ActiveState, processed: int, total: int, expected: int) -> None:
        state = apply(active, _progress(processed, total))
        assert state.progress.percentage == expected

    def test_keyword_is_kept(self, active: ActiveState) -> None:
        state = apply(apply(active, Started()), _progress(1, 2))
        assert state.keyword == "cat"

    def test_unrecognized_is_ignored(self, active: ActiveState) -> None:
        state = apply(active, _progress(1, 2))
        assert apply(state, Unrecognized(raw="garbage")) is state

    def test_states_are_replaced_not_mutated(self, active: ActiveState) -> None:
        first = apply(active, _progress(1, 4, count=1))
        second = apply(first, _progress(2, 4, count=3))

        assert first.progress.match_count == 1
        assert second.progress.match_count == 3


class TestTerminalEvents:
    def test_completed_uses_last_completed_fields(self, active: ActiveState) -> None:
        state = active
        for event in (Started(), Info(message="scanning", total_files=10), _progress(3, 10, 5), _progress(9, 10, 40)):
            state = apply(state, event)

        state = apply(state, Completed(word="cat", count=42, processed_files=10, total_files=10))

        assert state == CompletedState(
            result=ResultSummary(keyword="cat", match_count=42, processed_files=10, total_files=10)
        )
        assert state.status is SessionStatus.COMPLETED

    def test_completed_from_idle(self) -> None:
        state = apply(IDLE, Completed(word="x", count=0, processed_files=0, total_files=0))
        assert isinstance(state, CompletedState)

    def test_error_fails_with_server_message(self, active: ActiveState) -> None:
        state = apply(active, Error(message="index unavailable"))

        assert state == FailedState(error=ErrorInfo(message="index unavailable", kind=ErrorKind.SERVER))

    @pytest.mark.parametrize(
        "terminal",
        [
            CompletedState(result=ResultSummary(keyword="cat", match_count=1, processed_files=1, total_files=1)),
            FailedState(error=ErrorInfo(message="boom")),
            StoppedState(keyword="cat"),
        ],
    )
    @pytest.mark.parametrize(
        "event",
        [
            Started(),
            Info(message="late", total_files=3),
            _progress(1, 2),
            Completed(word="dog", count=9, processed_files=9, total_files=9),
            Error(message="late error"),
            Unrecognized(raw="?"),
        ],
    )
    def test_terminal_states_absorb_events(self, terminal, event) -> None:
        assert apply(terminal, event) is terminal
