from __future__ import annotations

import dataclasses

import pytest

from tetris_board import new_board
from tetris_engine import BASE_POINTS, Command, Game, level_for_lines, line_points
from tetris_piece import COLS, ROWS, Piece, PieceKind, rotate


def _vertical_i_in_column_zero(y: int = ROWS - 4) -> Piece:
    # rotated I occupies matrix column 2
    return Piece(PieceKind.I, rotate(PieceKind.I.shape), -2, y)


def _fill_rows_except_first_column(game: Game, n: int) -> None:
    for r in range(ROWS - n, ROWS):
        game.board[r] = [0] + [PieceKind.T.cell] * (COLS - 1)


def test_line_points_table() -> None:
    assert [line_points(n, 1) for n in range(6)] == [0, 40, 100, 300, 1200, 0]
    assert line_points(4, 3) == 3600


def test_level_for_lines() -> None:
    assert level_for_lines(0) == 1
    assert level_for_lines(9) == 1
    assert level_for_lines(10) == 2
    assert level_for_lines(45) == 5


@pytest.mark.parametrize("n", [1, 2, 3, 4])
@pytest.mark.parametrize("level", [1, 3])
def test_clearing_n_rows_scores_base_points_times_level(n: int, level: int) -> None:
    game = Game(seed=0)
    game.level = level
    _fill_rows_except_first_column(game, n)
    game.current = _vertical_i_in_column_zero()
    assert game.lock() == n
    assert game.score == BASE_POINTS[n] * level
    assert game.lines == n


def test_lock_without_full_rows_scores_nothing() -> None:
    game = Game(seed=0)
    game.current = Piece(PieceKind.O, PieceKind.O.shape, 0, ROWS - 2)
    assert game.lock() == 0
    assert game.score == 0
    assert game.board[ROWS - 1][:2] == [2, 2]


def test_level_rises_every_ten_lines() -> None:
    game = Game(seed=0)
    game.lines = 9
    _fill_rows_except_first_column(game, 1)
    game.current = _vertical_i_in_column_zero()
    game.lock()
    assert game.lines == 10
    assert game.level == 2


def test_level_never_decreases() -> None:
    game = Game(seed=0)
    game.level = 5
    _fill_rows_except_first_column(game, 1)
    game.current = _vertical_i_in_column_zero()
    game.lock()
    assert game.level == 5
    assert game.score == 40 * 5


def test_filling_bottom_row_with_two_i_and_an_o_clears_it() -> None:
    game = Game(seed=0)
    game.current = Piece.spawn(PieceKind.I)
    game.current.x = 0
    assert game.hard_drop()
    game.current = Piece.spawn(PieceKind.I)
    game.current.x = 4
    assert game.hard_drop()
    assert game.board[ROWS - 1] == [1] * 8 + [0, 0]
    assert game.score == 0

    game.current = Piece.spawn(PieceKind.O)
    game.current.x = 8
    game.hard_drop()
    assert game.score == 40 * 1
    assert game.lines == 1
    assert game.board[ROWS - 1] == [0] * 8 + [2, 2]
    assert not any(game.board[ROWS - 2])


def test_spawn_into_filled_columns_ends_and_pauses_the_game() -> None:
    game = Game(seed=0)
    for r in range(ROWS):
        game.board[r][3:7] = [PieceKind.Z.cell] * 4
    game.spawn()
    assert game.game_over
    assert game.paused
    before = [r[:] for r in game.board]
    assert not game.gravity_tick()
    assert not game.hard_drop()
    assert not game.move_left()
    assert not game.toggle_pause()
    assert game.board == before
    assert game.paused


def test_restart_resets_session() -> None:
    game = Game(seed=0)
    game.score, game.level, game.lines = 500, 4, 33
    game.hold()
    game.board[ROWS - 1][0] = 1
    game.game_over = game.paused = True
    assert game.restart()
    assert (game.score, game.level, game.lines) == (0, 1, 0)
    assert game.board == new_board()
    assert game.hold_kind is None and game.hold_usable
    assert not game.game_over and not game.paused
    assert game.current is not None
    assert len(game.bag.queue) >= 3


def test_first_hold_stores_kind_and_takes_next_from_queue() -> None:
    game = Game(seed=11)
    first = game.current.kind
    upcoming = game.next_kinds()[0]
    assert game.hold()
    assert game.hold_kind is first
    assert game.current.kind is upcoming
    assert not game.hold_usable


def test_second_hold_before_lock_is_rejected() -> None:
    game = Game(seed=11)
    game.hold()
    state = (game.hold_kind, game.current.kind, game.current.x, game.current.y, game.next_kinds())
    assert not game.hold()
    assert state == (game.hold_kind, game.current.kind, game.current.x, game.current.y, game.next_kinds())


def test_hold_swap_after_lock_exchanges_without_consuming_queue() -> None:
    game = Game(seed=11)
    game.hold()
    held = game.hold_kind
    game.hard_drop()
    assert game.hold_usable
    active = game.current.kind
    game.move_left()
    queue = game.next_kinds()
    assert game.hold()
    assert game.hold_kind is active
    assert game.current.kind is held
    assert (game.current.x, game.current.y) == ((COLS - 4) // 2, 0)
    assert game.current.matrix == held.shape
    assert game.next_kinds() == queue


def test_moves_are_ignored_when_blocked() -> None:
    game = Game(seed=0)
    game.current = Piece(PieceKind.O, PieceKind.O.shape, 0, 0)
    assert not game.move_left()
    assert game.move_right()
    assert game.current.x == 1
    game.current.y = ROWS - 2
    assert not game.soft_drop()
    assert game.current.y == ROWS - 2


def test_commands_are_ignored_while_paused() -> None:
    game = Game(seed=0)
    assert game.toggle_pause()
    p = dataclasses.replace(game.current)
    for cmd in (game.move_left, game.move_right, game.soft_drop, game.rotate, game.hard_drop, game.hold, game.gravity_tick):
        assert not cmd()
    assert game.current == p
    assert game.toggle_pause()
    assert game.move_left()


def test_gravity_tick_moves_then_locks() -> None:
    game = Game(seed=0)
    game.current = Piece(PieceKind.O, PieceKind.O.shape, 0, ROWS - 3)
    assert game.gravity_tick()
    assert game.current.y == ROWS - 2
    assert game.gravity_tick()
    assert game.board[ROWS - 1][:2] == [2, 2]
    assert game.current.y == 0


def test_dispatch_routes_commands() -> None:
    game = Game(seed=0)
    x = game.current.x
    assert game.dispatch("right")
    assert game.dispatch(Command.LEFT)
    assert game.current.x == x
    assert game.dispatch(Command.PAUSE)
    assert game.paused


def test_snapshot_is_a_detached_read_only_view() -> None:
    game = Game(seed=0)
    snap = game.snapshot()
    assert len(snap.next) == 3
    assert snap.piece.kind is game.current.kind
    assert snap.ghost_y == game.ghost_y()
    assert (snap.score, snap.level, snap.lines) == (0, 1, 0)
    assert not snap.game_over and not snap.paused
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 10
    game.board[ROWS - 1][0] = 1
    assert snap.board[ROWS - 1][0] == 0


def test_ghost_query_does_not_move_piece() -> None:
    game = Game(seed=0)
    game.current = Piece(PieceKind.I, PieceKind.I.shape, 3, 0)
    assert game.ghost_y() == ROWS - 2
    assert game.current.y == 0


def _block_spawn_area(game: Game) -> None:
    # spawn columns 3..6 taken in the top rows, no row complete
    for r in range(4):
        game.board[r][3:7] = [PieceKind.Z.cell] * 4


def _state(game: Game):
    return ([r[:] for r in game.board], game.score, game.level, game.lines,
            game.hold_kind, game.hold_usable, game.paused, game.game_over,
            dataclasses.replace(game.current), game.next_kinds())


@pytest.mark.parametrize("bad", ["teleport", None, 3, ""])
def test_unknown_command_is_ignored_while_playing(bad) -> None:
    game = Game(seed=0)
    before = _state(game)
    assert not game.dispatch(bad)
    assert _state(game) == before


@pytest.mark.parametrize("bad", ["teleport", None])
def test_unknown_command_is_ignored_while_paused(bad) -> None:
    game = Game(seed=0)
    game.dispatch(Command.PAUSE)
    before = _state(game)
    assert not game.dispatch(bad)
    assert _state(game) == before
    assert game.paused


@pytest.mark.parametrize("bad", ["teleport", None])
def test_unknown_command_is_ignored_after_game_over(bad) -> None:
    game = Game(seed=0)
    _block_spawn_area(game)
    game.spawn()
    assert game.game_over
    before = _state(game)
    assert not game.dispatch(bad)
    assert _state(game) == before


def test_hold_from_empty_slot_into_blocked_spawn_ends_game() -> None:
    game = Game(seed=4)
    game.current = Piece(PieceKind.O, PieceKind.O.shape, 0, 10)
    _block_spawn_area(game)
    before = [r[:] for r in game.board]
    assert game.hold()
    assert game.hold_kind is PieceKind.O
    assert game.game_over and game.paused
    assert not game.hold_usable
    assert game.board == before


def test_hold_swap_into_blocked_spawn_ends_game() -> None:
    game = Game(seed=4)
    game.hold()
    held = game.hold_kind
    game.hard_drop()
    assert game.hold_usable
    game.current = Piece(PieceKind.O, PieceKind.O.shape, 0, 10)
    _block_spawn_area(game)
    before = [r[:] for r in game.board]
    assert game.hold()
    assert game.hold_kind is PieceKind.O
    assert game.current.kind is held
    assert game.game_over and game.paused
    assert not game.hold_usable
    assert game.board == before
    assert not game.hold()
