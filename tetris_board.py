
"""Board helpers: can_position, merge, sweep, ghost"""
from typing import List
from tetris_piece import Piece, Matrix, COLS, ROWS, cells

Board = List[List[int]]

def new_board() -> Board:
    return [[0] * COLS for _ in range(ROWS)]

def can_position(board: Board, matrix: Matrix, x: int, y: int) -> bool:
    for i, j in cells(matrix):
        bx, by = x + j, y + i
        if bx < 0 or bx >= COLS or by < 0 or by >= ROWS: return False
        if board[by][bx]: return False
    return True

def merge(board: Board, piece: Piece):
    for i, j in cells(piece.matrix):
        bx, by = piece.x + j, piece.y + i
        if 0 <= by < ROWS and 0 <= bx < COLS:
            board[by][bx] = piece.kind.cell

def sweep(board: Board) -> int:
    """Drop every full row at once and pad the top with empty rows."""
    kept = [row for row in board if not all(row)]
    c = ROWS - len(kept)
    board[:] = [[0] * COLS for _ in range(c)] + kept
    return c

def ghost_y(board: Board, piece: Piece) -> int:
    y = piece.y
    while can_position(board, piece.matrix, piece.x, y + 1):
        y += 1
    return y
