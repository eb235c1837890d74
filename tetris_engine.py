
"""
Game engine: owns board, active piece, hold slot, bag queue and session state.

Every command is synchronous and either fully applies or leaves the state
untouched. Blocked moves and commands issued while paused or after game over
return False instead of raising. Renderers read `snapshot()` between commands.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tetris_board import Board, can_position, ghost_y, merge, new_board, sweep
from tetris_config import CONFIG
from tetris_piece import Matrix, Piece, PieceKind, try_rotate
from tetris_rng import BagRandom

log = logging.getLogger(__name__)

LINES_PER_LEVEL = 10
BASE_POINTS = {1: 40, 2: 100, 3: 300, 4: 1200}


def line_points(n: int, level: int) -> int:
    """Score for clearing n rows with a single lock at the given level."""
    return BASE_POINTS.get(n, 0) * level


def level_for_lines(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1


class Command(Enum):
    LEFT = "left"
    RIGHT = "right"
    SOFT_DROP = "softDrop"
    ROTATE = "rotate"
    HARD_DROP = "hardDrop"
    HOLD = "hold"
    PAUSE = "pause"
    RESTART = "restart"


@dataclass(frozen=True)
class PieceView:
    kind: PieceKind
    matrix: Matrix
    x: int
    y: int


@dataclass(frozen=True)
class Snapshot:
    board: Tuple[Tuple[int, ...], ...]
    piece: Optional[PieceView]
    ghost_y: Optional[int]
    hold: Optional[PieceKind]
    hold_usable: bool
    next: Tuple[PieceKind, ...]
    score: int
    level: int
    lines: int
    game_over: bool
    paused: bool


class Game:
    def __init__(self, seed: Optional[int] = None, lookahead: Optional[int] = None):
        if lookahead is None:
            lookahead = CONFIG["PREVIEW_COUNT"]
        self.bag = BagRandom(seed, lookahead)
        self.board: Board = new_board()
        self.current: Optional[Piece] = None
        self.hold_kind: Optional[PieceKind] = None
        self.hold_usable = True
        self.score = 0
        self.level = 1
        self.lines = 0
        self.game_over = False
        self.paused = False
        self.restart()

    @property
    def active(self) -> bool:
        return self.current is not None and not (self.paused or self.game_over)

    # ---------- spawn / lock ----------
    def spawn(self) -> Piece:
        self._place(Piece.spawn(self.bag.next_piece()))
        return self.current

    def _place(self, piece: Piece):
        self.current = piece
        if not can_position(self.board, piece.matrix, piece.x, piece.y):
            self.game_over = True
            self.paused = True
            log.info("game over: %s blocked at spawn (score=%d lines=%d)", piece.kind.name, self.score, self.lines)

    def lock(self) -> int:
        """Commit the active piece, clear rows, score, and spawn the next piece."""
        merge(self.board, self.current)
        n = sweep(self.board)
        if n:
            gained = line_points(n, self.level)
            self.score += gained
            self.lines += n
            lvl = max(self.level, level_for_lines(self.lines))
            if lvl != self.level:
                log.info("level up: %d -> %d", self.level, lvl)
            self.level = lvl
            log.debug("cleared %d row(s) for %d points", n, gained)
        log.debug("locked %s at (%d, %d)", self.current.kind.name, self.current.x, self.current.y)
        self.spawn()
        self.hold_usable = True
        return n

    # ---------- commands ----------
    def _shift(self, dx: int, dy: int) -> bool:
        if not self.active:
            return False
        p = self.current
        if not can_position(self.board, p.matrix, p.x + dx, p.y + dy):
            return False
        p.x += dx
        p.y += dy
        return True

    def move_left(self) -> bool:
        return self._shift(-1, 0)

    def move_right(self) -> bool:
        return self._shift(1, 0)

    def soft_drop(self) -> bool:
        return self._shift(0, 1)

    def rotate(self) -> bool:
        if not self.active:
            return False
        return try_rotate(self.board, self.current)

    def hard_drop(self) -> bool:
        if not self.active:
            return False
        while self._shift(0, 1):
            pass
        self.lock()
        return True

    def hold(self) -> bool:
        """Swap the active piece with the hold slot; once per lock."""
        if not self.active or not self.hold_usable:
            return False
        kind = self.current.kind
        if self.hold_kind is None:
            self.hold_kind = kind
            self.spawn()
        else:
            self.hold_kind, swapped = kind, self.hold_kind
            self._place(Piece.spawn(swapped))
        self.hold_usable = False
        log.debug("held %s", kind.name)
        return True

    def gravity_tick(self) -> bool:
        """Move the piece down one row, locking it when it cannot fall."""
        if not self.active:
            return False
        if not self._shift(0, 1):
            self.lock()
        return True

    def toggle_pause(self) -> bool:
        if self.game_over:
            return False
        self.paused = not self.paused
        log.debug("paused" if self.paused else "resumed")
        return True

    def restart(self) -> bool:
        self.board = new_board()
        self.score, self.level, self.lines = 0, 1, 0
        self.hold_kind = None
        self.hold_usable = True
        self.game_over = False
        self.paused = False
        self.bag.reset()
        self.spawn()
        log.info("new game")
        return True

    def dispatch(self, command) -> bool:
        """Run a Command (or its string value); anything else is ignored."""
        try:
            cmd = Command(command)
        except ValueError:
            log.debug("ignored unknown command %r", command)
            return False
        handler = {
            Command.LEFT: self.move_left,
            Command.RIGHT: self.move_right,
            Command.SOFT_DROP: self.soft_drop,
            Command.ROTATE: self.rotate,
            Command.HARD_DROP: self.hard_drop,
            Command.HOLD: self.hold,
            Command.PAUSE: self.toggle_pause,
            Command.RESTART: self.restart,
        }[cmd]
        return handler()

    # ---------- queries ----------
    def ghost_y(self) -> Optional[int]:
        if self.current is None:
            return None
        return ghost_y(self.board, self.current)

    def next_kinds(self) -> Tuple[PieceKind, ...]:
        return tuple(self.bag.preview())

    def snapshot(self) -> Snapshot:
        p = self.current
        view = PieceView(p.kind, p.matrix, p.x, p.y) if p else None
        return Snapshot(
            board=tuple(tuple(r) for r in self.board),
            piece=view,
            ghost_y=self.ghost_y(),
            hold=self.hold_kind,
            hold_usable=self.hold_usable,
            next=self.next_kinds(),
            score=self.score,
            level=self.level,
            lines=self.lines,
            game_over=self.game_over,
            paused=self.paused,
        )
