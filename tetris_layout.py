# tetris_layout.py
from dataclasses import dataclass, field
from typing import List, Tuple
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS, SIZE

Pos = Tuple[int, int]

@dataclass
class Dims:
    cell: int
    mini: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    # side panel: a 4x4 mini grid per preview box, hold first, then the next queue
    box: int = 0
    hold_label_y: int = 0
    hold_pos: Pos = (0, 0)
    next_label_y: int = 0
    next_pos: List[Pos] = field(default_factory=list)

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    mini = max(12, int(cell * 0.6))
    margin = 16
    box = mini * SIZE + 12
    panel_w = max(200, box + 2 * margin)

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # score lines take the top of the panel, controls legend the bottom 56px
    hold_label_y = panel_y + 126
    hold_pos = (panel_x + 18, hold_label_y + 24)
    next_label_y = hold_pos[1] + box + 12
    first = next_label_y + 24
    bottom = panel_y + board_h - 56
    fits = max(1, (bottom - first + 4) // (box + 4))
    count = min(int(CONFIG["PREVIEW_COUNT"]), fits)
    next_pos = [(panel_x + 18, first + i * (box + 4)) for i in range(count)]

    return Dims(
        cell=cell, mini=mini, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        box=box, hold_label_y=hold_label_y, hold_pos=hold_pos,
        next_label_y=next_label_y, next_pos=next_pos
    )
