"""Game state machine: spawn, gravity, lock, score, level, hold"""
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, List, Optional

from tetris_board import Board, Grid
from tetris_config import CONFIG, LINE_CLEAR_KEYS, POINTS
from tetris_piece import Piece
from tetris_rng import SevenBag
from tetris_storage import HighScoreStore

log = logging.getLogger(__name__)

# Tried in order after the in-place rotation fails, as (dx, dy)
WALL_KICKS = [(-1, 0), (1, 0), (0, -1), (-2, 0), (2, 0)]


class GameState(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the renderer each frame."""
    score: int
    level: int
    lines: int
    high_score: int
    game_over: bool
    paused: bool
    current_piece: Optional[Piece]
    next_pieces: List[str]
    held_piece: Optional[str]
    board: Grid


def drop_interval_for(level: int) -> int:
    """Milliseconds between gravity drops at the given level."""
    return max(CONFIG["MIN_SPEED"],
               CONFIG["INITIAL_SPEED"] - (level - 1) * CONFIG["SPEED_DECREASE_PER_LEVEL"])


class Game:
    """
    Owns the board, the active piece and the bag, and applies every rule.

    The game never reads a clock itself. The front end drives gravity with
    update(now_ms) once per frame and the input timer calls the move/rotate/
    drop methods; everything runs on one thread, one call at a time.

    Movement methods report illegal moves by returning False (or 0 for
    hard_drop) and leave the state untouched.
    """

    def __init__(self, bag: Optional[SevenBag] = None, board: Optional[Board] = None,
                 store: Optional[HighScoreStore] = None):
        self.board = board if board is not None else Board()
        self.bag = bag if bag is not None else SevenBag(CONFIG["BAG_SEED"])
        self.store = store

        self.current_piece: Optional[Piece] = None
        self.next_pieces: Deque[str] = deque()
        self.held_piece: Optional[str] = None
        self.can_hold = True

        self.score = 0
        self.level = 1
        self.lines = 0

        self.last_drop_time = 0.0
        self.drop_interval = CONFIG["INITIAL_SPEED"]
        self.lock_delay = 0
        self.lock_delay_max = CONFIG["LOCK_DELAY_MS"]

        self.game_over = False
        self.paused = False
        self.started = False

        self.high_score = store.load() if store is not None else 0

    # ---------- lifecycle ----------

    def init(self) -> None:
        """Start a fresh game on the same board, bag and store."""
        self.board.reset()
        self.score = 0
        self.level = 1
        self.lines = 0
        self.game_over = False
        self.paused = False
        self.drop_interval = drop_interval_for(self.level)
        self.lock_delay = 0

        self.next_pieces = deque(self.bag.next_piece() for _ in range(CONFIG["NEXT_PIECES_COUNT"]))
        self.held_piece = None
        self.can_hold = True

        self.spawn_piece()

    def start(self, now_ms: float) -> None:
        if not self.started:
            self.started = True
            self.last_drop_time = now_ms

    def reset(self, now_ms: Optional[float] = None) -> None:
        self.started = False
        self.init()
        if now_ms is not None:
            self.start(now_ms)

    def pause(self) -> None:
        """Toggle pause. Has no effect before the first spawn or after game over."""
        if self.current_piece is None or self.game_over:
            return
        self.paused = not self.paused

    def end_game(self) -> None:
        self.game_over = True
        self.started = False
        log.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)
        if self.score > self.high_score:
            self.high_score = self.score
            if self.store is not None:
                self.store.save(self.high_score)

    @property
    def status(self) -> GameState:
        if self.game_over:
            return GameState.GAME_OVER
        if self.current_piece is None:
            return GameState.NOT_STARTED
        if self.paused:
            return GameState.PAUSED
        return GameState.PLAYING

    # ---------- gravity clock ----------

    def update(self, now_ms: float) -> None:
        if not self.started or self.paused or self.game_over or self.current_piece is None:
            return
        if now_ms - self.last_drop_time >= self.drop_interval:
            self.move_piece_down()
            self.last_drop_time = now_ms

    # ---------- pieces ----------

    def spawn_piece(self) -> None:
        t = self.next_pieces.popleft()
        self.next_pieces.append(self.bag.next_piece())

        self.current_piece = Piece.spawn(t, self.board.width)
        self.can_hold = True
        self.lock_delay = 0
        log.debug("spawned %s, next %s", t, list(self.next_pieces))

        p = self.current_piece
        if not self.board.is_valid_move(p, p.x, p.y, p.state):
            self.end_game()

    def _can_act(self) -> bool:
        return self.current_piece is not None and not self.game_over and not self.paused

    def move_piece_down(self) -> bool:
        """One gravity step. Locks the piece when it cannot descend."""
        if not self._can_act():
            return False
        p = self.current_piece
        if self.board.is_valid_move(p, p.x, p.y + 1, p.state):
            p.move_down()
            self.lock_delay = 0
            return True
        self.lock_current_piece()
        return False

    def _shift(self, dx: int) -> bool:
        if not self._can_act():
            return False
        p = self.current_piece
        if self.board.is_valid_move(p, p.x + dx, p.y, p.state):
            p.move(dx)
            return True
        return False

    def move_piece_left(self) -> bool:
        return self._shift(-1)

    def move_piece_right(self) -> bool:
        return self._shift(1)

    def rotate_piece(self, direction: int = 1) -> bool:
        """Rotate in place or at the first legal wall kick; all or nothing."""
        if not self._can_act():
            return False
        p = self.current_piece
        new_state = (p.state + direction + 4) % 4
        for dx, dy in [(0, 0)] + WALL_KICKS:
            if self.board.is_valid_move(p, p.x + dx, p.y + dy, new_state):
                p.x += dx
                p.y += dy
                p.rotate(direction)
                return True
        return False

    def hard_drop(self) -> int:
        """Drop to the floor, score 2 per row and lock at once. Returns rows dropped."""
        if not self._can_act():
            return 0
        distance = self.board.get_drop_distance(self.current_piece)
        self.current_piece.y += distance
        self.score += distance * POINTS["HARD_DROP"]
        self.lock_current_piece()
        return distance

    def soft_drop(self) -> bool:
        if self.move_piece_down():
            self.score += POINTS["SOFT_DROP"]
            return True
        return False

    def hold_piece(self) -> bool:
        if not self._can_act() or not self.can_hold:
            return False

        if self.held_piece is None:
            self.held_piece = self.current_piece.t
            self.spawn_piece()
        else:
            swap = Piece.spawn(self.held_piece, self.board.width)
            if not self.board.is_valid_move(swap, swap.x, swap.y, swap.state):
                return False
            self.held_piece, self.current_piece = self.current_piece.t, swap
            self.lock_delay = 0

        self.can_hold = False
        log.debug("held %s", self.held_piece)
        return True

    def lock_current_piece(self) -> None:
        if self.current_piece is None:
            return
        self.board.lock_piece(self.current_piece)

        cleared = self.board.clear_lines()
        if cleared > 0:
            self.calculate_score(cleared)
            self.lines += cleared
            self.update_level()

        if self.board.is_game_over():
            self.end_game()
            return
        self.spawn_piece()

    # ---------- scoring ----------

    def calculate_score(self, lines_cleared: int) -> None:
        key = LINE_CLEAR_KEYS.get(lines_cleared)
        base = POINTS[key] if key else 0
        self.score += base * self.level

    def update_level(self) -> None:
        new_level = self.lines // CONFIG["LINES_PER_LEVEL"] + 1
        if new_level != self.level:
            self.level = new_level
            self.update_speed()
            log.info("level %d, drop interval %d ms", self.level, self.drop_interval)

    def update_speed(self) -> None:
        self.drop_interval = drop_interval_for(self.level)

    # ---------- views ----------

    def get_ghost_piece(self) -> Optional[Piece]:
        if self.current_piece is None:
            return None
        ghost = self.current_piece.clone()
        ghost.y += self.board.get_drop_distance(self.current_piece)
        return ghost

    def get_state(self) -> GameSnapshot:
        return GameSnapshot(
            score=self.score,
            level=self.level,
            lines=self.lines,
            high_score=self.high_score,
            game_over=self.game_over,
            paused=self.paused,
            current_piece=self.current_piece,
            next_pieces=list(self.next_pieces),
            held_piece=self.held_piece,
            board=self.board.grid,
        )
