
"""Piece model, shape catalog, rotation with horizontal kicks"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

COLS, ROWS = 10, 20
SIZE = 4

Matrix = Tuple[Tuple[int, ...], ...]

# catalog order is the board encoding: cell value = index + 1
_CATALOG = {
    "I": ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)),
    "O": ((1,1,0,0),(1,1,0,0),(0,0,0,0),(0,0,0,0)),
    "T": ((0,1,0,0),(1,1,1,0),(0,0,0,0),(0,0,0,0)),
    "S": ((0,1,1,0),(1,1,0,0),(0,0,0,0),(0,0,0,0)),
    "Z": ((1,1,0,0),(0,1,1,0),(0,0,0,0),(0,0,0,0)),
    "J": ((1,0,0,0),(1,1,1,0),(0,0,0,0),(0,0,0,0)),
    "L": ((0,0,1,0),(1,1,1,0),(0,0,0,0),(0,0,0,0)),
}

COLORS = {
    "I": "#00f0f5",
    "O": "#f5c542",
    "T": "#a55ee1",
    "S": "#2ecc71",
    "Z": "#e74c3c",
    "J": "#3498db",
    "L": "#f1c40f",
}


class PieceKind(Enum):
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6

    @property
    def index(self) -> int:
        return self.value

    @property
    def cell(self) -> int:
        return self.value + 1

    @property
    def shape(self) -> Matrix:
        return _CATALOG[self.name]

    @property
    def color(self) -> str:
        return COLORS[self.name]

    @classmethod
    def from_cell(cls, v: int) -> "PieceKind":
        if not 1 <= v <= len(cls):
            raise ValueError(f"board value {v!r} does not encode a piece kind")
        return cls(v - 1)


def rotate(m: Matrix) -> Matrix:
    """Rotate a square matrix 90 degrees clockwise: res[x][n-1-y] = m[y][x]."""
    n = len(m)
    res = [[0] * n for _ in range(n)]
    for y in range(n):
        for x in range(n):
            res[x][n - 1 - y] = m[y][x]
    return tuple(tuple(r) for r in res)


def cells(m: Matrix):
    """Yield (row, col) of every occupied cell of a matrix."""
    for i, row in enumerate(m):
        for j, v in enumerate(row):
            if v:
                yield i, j


@dataclass
class Piece:
    kind: PieceKind
    matrix: Matrix
    x: int
    y: int

    @staticmethod
    def spawn(kind: PieceKind) -> "Piece":
        return Piece(kind, kind.shape, (COLS - SIZE) // 2, 0)


# rotation

KICKS = (0, -1, 1, -2, 2)

def try_rotate(board, piece: Piece) -> bool:
    """Rotate in place, trying horizontal offsets in KICKS order; False if all collide."""
    from tetris_board import can_position
    ns = rotate(piece.matrix)
    for dx in KICKS:
        if can_position(board, ns, piece.x + dx, piece.y):
            piece.matrix = ns
            piece.x += dx
            return True
    return False
