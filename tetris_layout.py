# tetris_layout.py
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tetris_config import CONFIG


@dataclass
class Dims:
    cell: int
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
    preview_cell: int
    hold_y: int
    next_y: int


def compute_dims(cols: Optional[int] = None, rows: Optional[int] = None) -> Dims:
    cols = cols if cols is not None else CONFIG["BOARD_WIDTH"]
    rows = rows if rows is not None else CONFIG["BOARD_HEIGHT"]
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # Preview boxes: hold under the stats, next queue below it
    preview_cell = max(10, cell // 2)
    hold_y = panel_y + 150
    next_y = hold_y + preview_cell * 4 + 40

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_cell=preview_cell, hold_y=hold_y, next_y=next_y,
    )


def next_slots(dims: Dims, count: int) -> List[Tuple[int, int]]:
    """Top-left pixel of each next-piece preview box, top to bottom."""
    step = dims.preview_cell * 4 + 8
    return [(dims.panel_x + 12, dims.next_y + i * step) for i in range(count)]
