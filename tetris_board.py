"""Board grid: collision, locking, line clears"""
import logging
from typing import List, Optional

from tetris_config import CONFIG
from tetris_piece import Piece

log = logging.getLogger(__name__)

Cell = Optional[str]  # None = empty, otherwise the color of a locked block
Grid = List[List[Cell]]


class Board:
    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        self.width = width if width is not None else CONFIG["BOARD_WIDTH"]
        self.height = height if height is not None else CONFIG["BOARD_HEIGHT"]
        self.grid: Grid = self._empty_grid()

    def _empty_grid(self) -> Grid:
        return [[None] * self.width for _ in range(self.height)]

    def is_valid_move(self, piece: Piece, x: int, y: int, rotation: int) -> bool:
        """Return True if piece fits at (x, y) in the given rotation state.

        Blocks above the top row are always allowed; that space is the spawn
        buffer and is never checked against the grid.
        """
        for r, row in enumerate(piece.shape_at(rotation)):
            for c, v in enumerate(row):
                if not v:
                    continue
                bx, by = x + c, y + r
                if bx < 0 or bx >= self.width or by >= self.height:
                    return False
                if by >= 0 and self.grid[by][bx] is not None:
                    return False
        return True

    def lock_piece(self, piece: Piece, color: Optional[str] = None) -> None:
        """Write the piece into the grid (no collision check)."""
        value = color or piece.color
        for bx, by in piece.cells():
            if 0 <= by < self.height and 0 <= bx < self.width:
                self.grid[by][bx] = value

    def clear_lines(self) -> int:
        """Clear full lines and return the number of cleared rows."""
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_line_full(y):
                self.remove_line(y)
                cleared += 1
                # rows above shifted into y, look at it again
                continue
            y -= 1
        if cleared:
            log.debug("cleared %d line(s)", cleared)
        return cleared

    def is_line_full(self, y: int) -> bool:
        return all(cell is not None for cell in self.grid[y])

    def remove_line(self, y: int) -> None:
        del self.grid[y]
        self.grid.insert(0, [None] * self.width)

    def get_completed_lines(self) -> List[int]:
        return [y for y in range(self.height) if self.is_line_full(y)]

    def is_game_over(self) -> bool:
        # Top two rows, one row of grace
        return any(cell is not None for row in self.grid[:2] for cell in row)

    def get_column_height(self, x: int) -> int:
        for y in range(self.height):
            if self.grid[y][x] is not None:
                return self.height - y
        return 0

    def get_drop_distance(self, piece: Piece) -> int:
        """Rows the piece can fall before it rests. Used by ghost and hard drop."""
        distance = 0
        while self.is_valid_move(piece, piece.x, piece.y + distance + 1, piece.state):
            distance += 1
        return distance

    def get_cell(self, x: int, y: int) -> Cell:
        if 0 <= y < self.height and 0 <= x < self.width:
            return self.grid[y][x]
        return None

    def set_cell(self, x: int, y: int, value: Cell) -> None:
        if 0 <= y < self.height and 0 <= x < self.width:
            self.grid[y][x] = value

    def reset(self) -> None:
        self.grid = self._empty_grid()

    def get_grid(self) -> Grid:
        return [row[:] for row in self.grid]

    def filled_cell_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def is_empty(self) -> bool:
        return self.filled_cell_count() == 0
