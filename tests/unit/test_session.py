"""
Unit tests for GameSession and elapsed-time formatting.
"""
import pytest
import numpy as np
from minefield import Board, BoardConfig, GameSession, GameState, format_elapsed


# ============================================================================
# Time Formatting Tests
# ============================================================================

class TestFormatElapsed:
    """Test MM:SS formatting."""

    @pytest.mark.parametrize(
        "milliseconds, expected",
        [
            (0, "00:00"),
            (999, "00:00"),
            (1000, "00:01"),
            (61_000, "01:01"),
            (3_599_999, "59:59"),
            (6_000_000, "100:00"),
        ],
    )
    def test_formats_minutes_and_seconds(
        self, milliseconds: int, expected: str
    ) -> None:
        assert format_elapsed(milliseconds) == expected

    def test_negative_time_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            format_elapsed(-1)


# ============================================================================
# Session Tests
# ============================================================================

def start_game(session: GameSession, row: int, col: int) -> None:
    """Tap until the opening move leaves a game in progress."""
    session.on_cell_tap(row, col)
    while session.board.game_over:
        session.new_game()
        session.on_cell_tap(row, col)


class TestGameSession:
    """Test the single-player session controller."""

    def test_new_session_state(self, session: GameSession) -> None:
        assert session.board.game_state == GameState.UNINITIALIZED
        assert session.elapsed_ms == 0
        assert session.timer_running is False
        assert session.formatted_time == "00:00"

    def test_ticks_ignored_before_first_tap(self, session: GameSession) -> None:
        session.tick(500)
        assert session.elapsed_ms == 0

    def test_first_tap_starts_timer(self, session: GameSession) -> None:
        start_game(session, 4, 4)
        assert session.timer_running is True
        assert session.board.initialized is True

        for _ in range(25):
            session.tick(100)
        assert session.elapsed_ms == 2500
        assert session.formatted_time == "00:02"

    def test_long_press_flags_without_starting_timer(
        self, session: GameSession
    ) -> None:
        board = session.on_cell_long_press(0, 0)
        assert board.get_cell(0, 0).is_flagged is True
        assert session.board is board
        assert session.timer_running is False

    def test_loss_stops_timer(self, session: GameSession) -> None:
        start_game(session, 4, 4)
        session.tick(1500)
        mine = next(
            (cell.row, cell.col) for cell in session.board.cells() if cell.is_mine
        )

        board = session.on_cell_tap(*mine)

        assert board.is_lost is True
        assert session.timer_running is False
        session.tick(1000)
        assert session.elapsed_ms == 1500

    def test_win_stops_timer(self) -> None:
        session = GameSession(BoardConfig(3, 3, 8), rng=np.random.default_rng(0))
        board = session.on_cell_tap(1, 1)
        assert board.is_won is True
        assert session.timer_running is False

    def test_tap_after_game_over_keeps_timer_stopped(self) -> None:
        session = GameSession(BoardConfig(3, 3, 8), rng=np.random.default_rng(0))
        board = session.on_cell_tap(1, 1)
        assert session.on_cell_tap(0, 0) is board
        assert session.timer_running is False

    def test_new_game_replaces_board(self, session: GameSession) -> None:
        start_game(session, 0, 0)
        session.tick(3000)
        old_board = session.board

        board = session.new_game()

        assert board is not old_board
        assert isinstance(board, Board)
        assert board.initialized is False
        assert board.config == old_board.config
        assert session.elapsed_ms == 0
        assert session.timer_running is False

    def test_out_of_bounds_tap_leaves_timer_stopped(
        self, session: GameSession
    ) -> None:
        with pytest.raises(IndexError):
            session.on_cell_tap(99, 0)

        assert session.timer_running is False
        assert session.board.initialized is False
        session.tick(1000)
        assert session.elapsed_ms == 0

    def test_negative_tick_raises(self, session: GameSession) -> None:
        with pytest.raises(ValueError):
            session.tick(-5)
