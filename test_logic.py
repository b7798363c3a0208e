"""
Tests for the Teeko game logic.
Board, cursor, phase engine, win checker and game session.

Usage:
    pytest test_logic.py
"""

import typing

import pytest

from logic import (
    Board,
    CellState,
    Cursor,
    CursorGlyph,
    GameConfig,
    GameOver,
    GameSession,
    MoveValidator,
    Phase,
    PhaseChanged,
    PhaseEngine,
    Player,
    PlayerChanged,
    Reason,
    RedrawCell,
    TurnState,
    VisualState,
    WinChecker,
    Notification,
    normalize,
)
from logic.phase_engine import EngineStep


def move_to(session: GameSession, x: int, y: int):
    """Move the session cursor to (x, y) using directional input."""
    cx, cy = session.cursor.position
    session.apply_directional(x - cx, y - cy)


def select_at(session: GameSession, x: int, y: int):
    move_to(session, x, y)
    return session.apply_select()


def engine_select_at(engine: PhaseEngine, x: int, y: int):
    engine.cursor.x, engine.cursor.y = x, y
    return engine.select()


def board_with(cells, state=CellState.PLAYER_A) -> Board:
    board = Board()
    for x, y in cells:
        board.set_cell(x, y, state)
    return board


# Non-winning drop order: A on a spread-out pattern, B in between
QUIET_DROPS = [
    (0, 0), (1, 1),
    (2, 0), (3, 1),
    (0, 2), (1, 3),
    (2, 2), (3, 3),
]


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def moving_session(session):
    """A session that has finished the drop phase."""
    for x, y in QUIET_DROPS:
        assert select_at(session, x, y).outcome.is_applied
    return session


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert board.width == 5 and board.height == 5
    assert len(board.empty_cells()) == 25
    assert board.count(Player.A) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 5), (100, -100)])
def test_cell_at_out_of_bounds_is_empty(x, y):
    board = board_with([(0, 0), (4, 4), (0, 4), (4, 0)])
    assert board.cell_at(x, y) == CellState.EMPTY


def test_set_cell_overwrites_and_counts():
    board = Board()
    board.set_cell(1, 2, CellState.PLAYER_A)
    board.set_cell(1, 2, CellState.PLAYER_B)
    assert board.cell_at(1, 2) == CellState.PLAYER_B
    assert board.count(Player.B) == 1
    assert board.cells_of(Player.B) == [(1, 2)]
    assert board.cell_at(1, 2).owner == Player.B


def test_board_copy_is_independent():
    board = board_with([(0, 0)])
    copy = board.copy()
    copy.set_cell(0, 0, CellState.EMPTY)
    assert board.cell_at(0, 0) == CellState.PLAYER_A


def test_pretty_puts_top_row_first():
    board = board_with([(0, 4)])
    lines = board.pretty().splitlines()
    assert lines[0].startswith("4 1")
    assert lines[4].startswith("0 .")


# ==================== CURSOR ====================

def test_normalize_handles_negative_values():
    assert normalize(-1, 5) == 4
    assert normalize(-5, 5) == 0
    assert normalize(-6, 5) == 4
    assert normalize(7, 5) == 2


@pytest.mark.parametrize("start", [(0, 0), (2, 2), (4, 4), (0, 4)])
def test_move_by_always_stays_on_board(start):
    board = Board()
    for dx in range(-5, 6):
        for dy in range(-5, 6):
            cursor = Cursor(board)
            cursor.x, cursor.y = start
            cursor.move_by(dx, dy)
            assert 0 <= cursor.x < 5
            assert 0 <= cursor.y < 5
            assert cursor.position == ((start[0] + dx) % 5, (start[1] + dy) % 5)


def test_move_left_from_left_edge_wraps():
    cursor = Cursor(Board())
    cursor.x, cursor.y = 0, 3
    cursor.move_by(-1, 0)
    assert cursor.position == (4, 3)
    cursor.move_by(0, 2)
    assert cursor.position == (4, 0)


def test_cursor_starts_hidden_in_the_middle():
    cursor = Cursor(Board())
    assert cursor.position == (2, 2)
    assert cursor.visible is False
    assert cursor.glyph == CursorGlyph.SELECT


def test_move_by_returns_old_and_new_cells():
    board = board_with([(2, 2)])
    cursor = Cursor(board)
    redraws = cursor.move_by(1, 0)
    assert redraws == [
        RedrawCell(2, 2, VisualState.PLAYER_A),
        RedrawCell(3, 2, VisualState.CURSOR),
    ]
    assert cursor.visible is True


def test_move_by_full_lap_reports_one_cell():
    cursor = Cursor(Board())
    redraws = cursor.move_by(5, 0)
    assert redraws == [RedrawCell(2, 2, VisualState.CURSOR)]


def test_tick_blink_alternates_and_never_moves():
    board = board_with([(2, 2)], CellState.PLAYER_B)
    cursor = Cursor(board)
    seen = []
    for _ in range(6):
        redraws = cursor.tick_blink()
        assert cursor.position == (2, 2)
        seen.append(cursor.visible)
        expected = VisualState.CURSOR if cursor.visible else VisualState.PLAYER_B
        assert redraws == [RedrawCell(2, 2, expected)]
    assert seen == [True, False, True, False, True, False]


def test_tick_blink_uses_pick_up_glyph():
    cursor = Cursor(Board())
    cursor.set_glyph(CursorGlyph.PICK_UP)
    assert cursor.tick_blink() == [RedrawCell(2, 2, VisualState.PICK_UP_CURSOR)]


# ==================== MOVE VALIDATOR ====================

def test_validator_rejects_drop_when_no_pieces_left():
    validator = MoveValidator()
    turn = TurnState(pieces_placed={Player.A: 4, Player.B: 3})
    assert validator.check(Board(), turn, 0, 0) == Reason.NONE_REMAINING


def test_validator_lists_valid_pick_ups():
    validator = MoveValidator()
    board = board_with([(0, 0), (4, 4)])
    board.set_cell(1, 1, CellState.PLAYER_B)
    turn = TurnState(phase=Phase.PICK_UP, pieces_placed={Player.A: 2, Player.B: 1})
    assert sorted(validator.get_valid_moves(board, turn)) == [(0, 0), (4, 4)]


# ==================== PHASE ENGINE ====================

def make_engine(board=None) -> PhaseEngine:
    board = board or Board()
    return PhaseEngine(board, Cursor(board))


def test_drop_places_piece_and_switches_player():
    engine = make_engine()
    step = engine.select()
    assert step.outcome.is_applied
    assert engine.board.cell_at(2, 2) == CellState.PLAYER_A
    assert engine.active_player == Player.B
    assert engine.phase == Phase.DROP
    assert engine.turn.pieces_of(Player.A) == 1
    assert step.placed_by == Player.A
    assert PlayerChanged(Player.B) in step.notifications


def test_drop_on_occupied_cell_changes_nothing():
    engine = make_engine()
    engine.select()
    grid_before = engine.board.grid.copy()
    turn_before = engine.turn.copy()

    step = engine.select()

    assert not step.outcome.is_applied
    assert step.outcome.reason == Reason.OCCUPIED_CELL
    assert (engine.board.grid == grid_before).all()
    assert engine.turn == turn_before
    assert step.redraws == []


def test_eight_drops_move_to_pick_up_phase():
    engine = make_engine()
    a_cells = [(0, 0), (1, 0), (2, 0), (3, 0)]
    b_cells = [(0, 1), (1, 1), (2, 1), (3, 1)]

    for i, (a, b) in enumerate(zip(a_cells, b_cells)):
        assert engine_select_at(engine, *a).outcome.is_applied
        step = engine_select_at(engine, *b)
        assert step.outcome.is_applied
        if i < 3:
            assert engine.phase == Phase.DROP

    assert engine.phase == Phase.PICK_UP
    assert engine.active_player == Player.A
    assert PhaseChanged(Phase.PICK_UP) in step.notifications
    assert engine.turn.pieces_placed == {Player.A: 4, Player.B: 4}


def test_pick_up_does_not_switch_player():
    board = board_with([(2, 2)])
    engine = make_engine(board)
    engine.turn = TurnState(phase=Phase.PICK_UP, pieces_placed={Player.A: 4, Player.B: 4})

    step = engine.select()

    assert step.outcome.is_applied
    assert step.placed_by is None
    assert engine.active_player == Player.A
    assert engine.phase == Phase.PUT_DOWN
    assert engine.turn.picked_up_from == (2, 2)
    assert engine.turn.pieces_of(Player.A) == 3
    assert board.cell_at(2, 2) == CellState.EMPTY
    assert engine.cursor.glyph == CursorGlyph.PICK_UP


def test_pick_up_rejections():
    board = board_with([(0, 0)], CellState.PLAYER_B)
    engine = make_engine(board)
    engine.turn = TurnState(phase=Phase.PICK_UP, pieces_placed={Player.A: 4, Player.B: 4})

    assert engine_select_at(engine, 0, 0).outcome.reason == Reason.WRONG_OWNER
    assert engine_select_at(engine, 4, 4).outcome.reason == Reason.EMPTY_CELL
    assert engine.phase == Phase.PICK_UP
    assert board.cell_at(0, 0) == CellState.PLAYER_B


NEIGHBOURS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


@pytest.mark.parametrize("dx, dy", NEIGHBOURS)
def test_put_down_on_any_neighbour(dx, dy):
    board = board_with([(2, 2)])
    engine = make_engine(board)
    engine.turn = TurnState(phase=Phase.PICK_UP, pieces_placed={Player.A: 4, Player.B: 4})
    engine.select()

    step = engine_select_at(engine, 2 + dx, 2 + dy)

    assert step.outcome.is_applied
    assert board.cell_at(2 + dx, 2 + dy) == CellState.PLAYER_A
    assert board.cell_at(2, 2) == CellState.EMPTY
    assert engine.phase == Phase.PICK_UP
    assert engine.active_player == Player.B
    assert engine.turn.picked_up_from is None
    assert engine.turn.pieces_of(Player.A) == 4
    assert engine.cursor.glyph == CursorGlyph.SELECT
    assert step.placed_by == Player.A


def test_put_down_rejections():
    board = board_with([(2, 2)])
    board.set_cell(3, 3, CellState.PLAYER_B)
    engine = make_engine(board)
    engine.turn = TurnState(phase=Phase.PICK_UP, pieces_placed={Player.A: 4, Player.B: 4})
    engine.select()

    assert engine_select_at(engine, 2, 2).outcome.reason == Reason.SAME_CELL
    assert engine_select_at(engine, 4, 2).outcome.reason == Reason.NOT_ADJACENT
    assert engine_select_at(engine, 0, 0).outcome.reason == Reason.NOT_ADJACENT
    assert engine_select_at(engine, 3, 3).outcome.reason == Reason.OCCUPIED_CELL
    assert engine.phase == Phase.PUT_DOWN
    assert engine.turn.picked_up_from == (2, 2)


def test_validate_move_follows_cursor():
    board = board_with([(2, 2)])
    engine = make_engine(board)
    assert engine.validate_move() is False
    engine.cursor.x = 0
    assert engine.validate_move() is True
    assert engine.validate_move(Phase.PICK_UP) is False


def test_cancel_pick_up_puts_piece_back():
    board = board_with([(2, 2)])
    engine = make_engine(board)
    engine.turn = TurnState(phase=Phase.PICK_UP, pieces_placed={Player.A: 4, Player.B: 4})
    engine.select()
    engine.cursor.move_by(1, 1)

    step = engine.cancel_pick_up()

    assert step.outcome.is_applied
    assert board.cell_at(2, 2) == CellState.PLAYER_A
    assert engine.phase == Phase.PICK_UP
    assert engine.active_player == Player.A
    assert engine.turn.picked_up_from is None
    assert engine.turn.pieces_of(Player.A) == 4
    assert engine.cursor.glyph == CursorGlyph.SELECT
    assert RedrawCell(3, 3, VisualState.CURSOR) in step.redraws


def test_cancel_without_pick_up_is_rejected():
    engine = make_engine()
    assert engine.cancel_pick_up().outcome.reason == Reason.NOTHING_PICKED_UP


# ==================== WIN CHECKER ====================

def test_there_are_44_winning_shapes():
    assert len(WinChecker().patterns) == 44


@pytest.mark.parametrize("cells", [
    [(0, 0), (1, 0), (2, 0), (3, 0)],     # row
    [(1, 4), (2, 4), (3, 4), (4, 4)],     # row at the top
    [(4, 1), (4, 2), (4, 3), (4, 4)],     # column
    [(0, 0), (1, 1), (2, 2), (3, 3)],     # diagonal
    [(1, 4), (2, 3), (3, 2), (4, 1)],     # anti-diagonal
    [(2, 2), (3, 2), (2, 3), (3, 3)],     # square
])
def test_winning_shapes(cells):
    checker = WinChecker()
    board = board_with(cells)
    assert checker.evaluate(board, Player.A)
    assert not checker.evaluate(board, Player.B)
    assert checker.check_winner(board) == Player.A
    assert set(checker.get_winning_pattern(board, Player.A)) == set(cells)


@pytest.mark.parametrize("cells", [
    [(0, 0), (1, 0), (2, 0), (4, 0)],     # three plus a gap
    [(0, 0), (1, 0), (2, 0), (2, 1)],     # L shape
    [(0, 0), (2, 0), (0, 2), (2, 2)],     # big square
    [(3, 0), (4, 0), (0, 0), (1, 0)],     # no wrapping around the edge
])
def test_non_winning_shapes(cells):
    checker = WinChecker()
    assert checker.check_winner(board_with(cells)) is None


def test_full_board_does_not_crash():
    checker = WinChecker()
    board = Board()
    for x in range(5):
        for y in range(5):
            board.set_cell(x, y, CellState.PLAYER_A if (x + 2 * y) % 3 else CellState.PLAYER_B)
    assert checker.check_winner(board) in (Player.A, Player.B, None)


# ==================== GAME SESSION ====================

def test_first_drop_scenario(session):
    result = select_at(session, 2, 2)
    assert result.outcome.is_applied
    assert session.board.cell_at(2, 2) == CellState.PLAYER_A
    assert session.active_player == Player.B
    assert session.phase == Phase.DROP
    assert not session.is_over()
    assert session.winner() is None


def test_start_notifications(session):
    assert session.start_notifications() == [PlayerChanged(Player.A), PhaseChanged(Phase.DROP)]


def test_quiet_drops_reach_pick_up_with_player_a(moving_session):
    assert moving_session.phase == Phase.PICK_UP
    assert moving_session.active_player == Player.A
    assert not moving_session.is_over()


def test_full_move_in_moving_phase(moving_session):
    session = moving_session

    assert select_at(session, 1, 1).outcome.reason == Reason.WRONG_OWNER
    assert select_at(session, 4, 4).outcome.reason == Reason.EMPTY_CELL

    assert select_at(session, 0, 0).outcome.is_applied
    assert session.phase == Phase.PUT_DOWN
    assert session.active_player == Player.A

    assert select_at(session, 0, 0).outcome.reason == Reason.SAME_CELL
    assert select_at(session, 0, 3).outcome.reason == Reason.NOT_ADJACENT
    assert select_at(session, 1, 1).outcome.reason == Reason.OCCUPIED_CELL

    result = select_at(session, 1, 0)
    assert result.outcome.is_applied
    assert session.phase == Phase.PICK_UP
    assert session.active_player == Player.B
    assert session.turn.pieces_placed == {Player.A: 4, Player.B: 4}


def test_winning_drop_ends_the_game(session):
    drops = [(0, 0), (0, 4), (1, 0), (1, 4), (2, 0), (2, 4)]
    for x, y in drops:
        assert select_at(session, x, y).winner is None

    result = select_at(session, 3, 0)

    assert result.winner == Player.A
    assert GameOver(Player.A) in result.notifications
    assert session.is_over()
    assert session.winner() == Player.A
    assert select_at(session, 4, 4).outcome.reason == Reason.GAME_OVER
    assert session.apply_directional(1, 0) == []
    assert session.is_valid_target() is False


def test_winning_put_down_ends_the_game(session):
    # A: three in the bottom row plus (3, 1); B scattered
    drops = [(0, 0), (0, 4), (1, 0), (2, 4), (2, 0), (4, 3), (3, 1), (4, 1)]
    for x, y in drops:
        assert select_at(session, x, y).outcome.is_applied
    assert session.phase == Phase.PICK_UP

    select_at(session, 3, 1)
    result = select_at(session, 3, 0)

    assert result.winner == Player.A
    assert session.is_over()


def test_tick_blinks_after_interval(session):
    assert session.tick(200) == []
    assert session.tick(299) == []
    redraws = session.tick(1)
    assert redraws == [RedrawCell(2, 2, VisualState.CURSOR)]
    assert session.tick(499) == []
    assert session.tick(1) == [RedrawCell(2, 2, VisualState.EMPTY)]


def test_big_tick_blinks_once(session):
    assert len(session.tick(5000)) == 1
    assert session.cursor.visible is True
    assert session.tick(0) == []


def test_cursor_move_restarts_blink_timer(session):
    session.tick(400)
    session.apply_directional(1, 0)
    assert session.tick(400) == []
    assert session.cursor.visible is True


def test_pause_blocks_input_but_not_blinking(session):
    session.toggle_pause()
    assert session.paused
    assert session.apply_directional(1, 0) == []
    assert session.cursor.position == (2, 2)
    assert session.apply_select().outcome.reason == Reason.PAUSED
    assert session.board.cell_at(2, 2) == CellState.EMPTY
    assert len(session.tick(500)) == 1

    session.toggle_pause()
    assert session.apply_select().outcome.is_applied


def test_cancel_through_session(moving_session):
    session = moving_session
    assert session.apply_cancel().outcome.reason == Reason.NOTHING_PICKED_UP
    select_at(session, 0, 0)
    assert session.apply_cancel().outcome.is_applied
    assert session.phase == Phase.PICK_UP
    assert session.active_player == Player.A
    assert session.board.cell_at(0, 0) == CellState.PLAYER_A


def test_restart_clears_everything(session):
    drops = [(0, 0), (0, 4), (1, 0), (1, 4), (2, 0), (2, 4), (3, 0)]
    for x, y in drops:
        select_at(session, x, y)
    assert session.is_over()

    notifications = session.restart()

    assert notifications == session.start_notifications()
    assert not session.is_over()
    assert session.phase == Phase.DROP
    assert session.active_player == Player.A
    assert len(session.board.empty_cells()) == 25
    assert session.cursor.position == (2, 2)


def test_sessions_are_independent():
    first = GameSession()
    second = GameSession()
    first.apply_select()
    assert second.board.cell_at(2, 2) == CellState.EMPTY
    assert second.active_player == Player.A


def test_bad_config_is_rejected():
    config = GameConfig()
    config.BLINK_INTERVAL_MS = 0
    with pytest.raises(ValueError):
        GameSession(config)


def test_notifications_are_typed(session):
    kinds = typing.get_args(Notification)
    notifications = session.start_notifications() + select_at(session, 2, 2).notifications
    notifications += session.restart()
    assert notifications
    assert all(isinstance(n, kinds) for n in notifications)
    assert typing.get_type_hints(EngineStep)["notifications"] == typing.List[Notification]
