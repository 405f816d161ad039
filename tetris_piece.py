"""Piece catalog (shapes, colors) and the active piece model"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tetris_config import CONFIG

PIECE_TYPES = ("I", "O", "T", "S", "Z", "J", "L")

# Four rotation states per type, each a 4x4 grid (1 = block).
# State 0 is the spawn orientation, states advance clockwise.
SHAPES: Dict[str, List[List[List[int]]]] = {
    "I": [
        [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
        [[0,0,1,0],[0,0,1,0],[0,0,1,0],[0,0,1,0]],
        [[0,0,0,0],[0,0,0,0],[1,1,1,1],[0,0,0,0]],
        [[0,1,0,0],[0,1,0,0],[0,1,0,0],[0,1,0,0]],
    ],
    "O": [
        [[0,1,1,0],[0,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,1,0],[0,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,1,0],[0,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,1,0],[0,1,1,0],[0,0,0,0],[0,0,0,0]],
    ],
    "T": [
        [[0,1,0,0],[1,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,0,0],[0,1,1,0],[0,1,0,0],[0,0,0,0]],
        [[0,0,0,0],[1,1,1,0],[0,1,0,0],[0,0,0,0]],
        [[0,1,0,0],[1,1,0,0],[0,1,0,0],[0,0,0,0]],
    ],
    "S": [
        [[0,1,1,0],[1,1,0,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,0,0],[0,1,1,0],[0,0,1,0],[0,0,0,0]],
        [[0,0,0,0],[0,1,1,0],[1,1,0,0],[0,0,0,0]],
        [[1,0,0,0],[1,1,0,0],[0,1,0,0],[0,0,0,0]],
    ],
    "Z": [
        [[1,1,0,0],[0,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,0,1,0],[0,1,1,0],[0,1,0,0],[0,0,0,0]],
        [[0,0,0,0],[1,1,0,0],[0,1,1,0],[0,0,0,0]],
        [[0,1,0,0],[1,1,0,0],[1,0,0,0],[0,0,0,0]],
    ],
    "J": [
        [[1,0,0,0],[1,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,1,0],[0,1,0,0],[0,1,0,0],[0,0,0,0]],
        [[0,0,0,0],[1,1,1,0],[0,0,1,0],[0,0,0,0]],
        [[0,1,0,0],[0,1,0,0],[1,1,0,0],[0,0,0,0]],
    ],
    "L": [
        [[0,0,1,0],[1,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,0,0],[0,1,0,0],[0,1,1,0],[0,0,0,0]],
        [[0,0,0,0],[1,1,1,0],[1,0,0,0],[0,0,0,0]],
        [[1,1,0,0],[0,1,0,0],[0,1,0,0],[0,0,0,0]],
    ],
}

# Colors per type; board cells store these strings once a piece locks
COLORS: Dict[str, str] = {
    "I": "#00F0F0",
    "O": "#F0F000",
    "T": "#A000F0",
    "S": "#00F000",
    "Z": "#F00000",
    "J": "#0000F0",
    "L": "#F0A000",
}


class InvalidPieceError(ValueError):
    """Raised when a piece is built from a type outside PIECE_TYPES."""


def spawn_x(cols: Optional[int] = None) -> int:
    if cols is None:
        cols = CONFIG["BOARD_WIDTH"]
    return cols // 2 - 2


@dataclass
class Piece:
    t: str
    state: int = 0  # rotation state 0..3
    x: int = field(default_factory=spawn_x)
    y: int = 0

    def __post_init__(self):
        if self.t not in SHAPES:
            raise InvalidPieceError(f"Invalid piece type: {self.t!r}")

    @staticmethod
    def spawn(t: str, cols: Optional[int] = None) -> "Piece":
        return Piece(t, 0, spawn_x(cols), 0)

    @property
    def shape(self) -> List[List[int]]:
        return SHAPES[self.t][self.state]

    @property
    def color(self) -> str:
        return COLORS[self.t]

    def shape_at(self, state: int) -> List[List[int]]:
        return SHAPES[self.t][state % 4]

    def cells(self) -> List[Tuple[int, int]]:
        """Board (x, y) of every block, including ones above the board."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

    # Movement only; legality is checked by the game against the board

    def move(self, dx: int) -> None:
        self.x += dx

    def move_down(self) -> None:
        self.y += 1

    def rotate(self, direction: int = 1) -> None:
        self.state = (self.state + direction + 4) % 4

    def clone(self) -> "Piece":
        return Piece(self.t, self.state, self.x, self.y)

    def reset(self, cols: Optional[int] = None) -> None:
        self.state = 0
        self.x = spawn_x(cols)
        self.y = 0
