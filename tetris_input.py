"""DAS/ARR and soft drop timing"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Set

from tetris_config import CONFIG


class Command(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    HARD_DROP = "hard_drop"
    HOLD = "hold"
    PAUSE = "pause"


@dataclass
class RepeatState:
    active: bool = False
    elapsed: float = 0.0         # ms held since the press
    last_repeat_at: float = 0.0  # timer clock at the last move


class InputTimer:
    """
    Turns abstract press/release commands into game calls at a controlled cadence.

    • Left/Right move once on press, then after DAS_MS repeat every ARR_MS.
    • Down soft-drops once on press, then every SOFT_DROP_MS while held.
    • If both directions are held the most recent press wins; releasing it
      re-arms the other one with a fresh DAS delay.

    The timer keeps its own millisecond clock, advanced only by update(dt),
    so a paused game freezes repeats without resetting them.
    """

    def __init__(self, game):
        self.game = game
        self.das_delay = CONFIG["DAS_MS"]
        self.das_interval = CONFIG["ARR_MS"]
        self.soft_drop_interval = CONFIG["SOFT_DROP_MS"]

        self.clock = 0.0
        self.held: Set[Command] = set()
        self.das: Dict[Command, RepeatState] = {Command.LEFT: RepeatState(), Command.RIGHT: RepeatState()}
        self.soft_drop_active = False
        self.last_soft_drop = 0.0

    def _move(self, direction: Command) -> bool:
        if direction is Command.LEFT:
            return self.game.move_piece_left()
        return self.game.move_piece_right()

    @staticmethod
    def _opposite(direction: Command) -> Command:
        return Command.RIGHT if direction is Command.LEFT else Command.LEFT

    def _arm(self, direction: Command) -> None:
        state = self.das[direction]
        state.active = True
        state.elapsed = 0.0
        state.last_repeat_at = self.clock

    def _disarm(self, direction: Command) -> None:
        state = self.das[direction]
        state.active = False
        state.elapsed = 0.0

    def press(self, command: Command) -> None:
        if self.game.game_over or self.game.current_piece is None:
            return
        # Ignore OS key repeat; our own timers do the repeating
        if command in self.held:
            return
        self.held.add(command)

        if command in (Command.LEFT, Command.RIGHT):
            self._move(command)
            self._arm(command)
            self._disarm(self._opposite(command))
        elif command is Command.DOWN:
            self.soft_drop_active = True
            self.last_soft_drop = self.clock
            self.game.soft_drop()
        elif command is Command.ROTATE_CW:
            self.game.rotate_piece(1)
        elif command is Command.ROTATE_CCW:
            self.game.rotate_piece(-1)
        elif command is Command.HARD_DROP:
            self.game.hard_drop()
        elif command is Command.HOLD:
            self.game.hold_piece()
        elif command is Command.PAUSE:
            self.game.pause()

    def release(self, command: Command) -> None:
        self.held.discard(command)
        if command in (Command.LEFT, Command.RIGHT):
            was_active = self.das[command].active
            self._disarm(command)
            other = self._opposite(command)
            if was_active and other in self.held:
                self._arm(other)
        elif command is Command.DOWN:
            self.soft_drop_active = False

    def update(self, dt: float) -> None:
        """Advance the timer by dt ms and fire any repeats that are due."""
        if self.game.paused or self.game.game_over:
            return
        self.clock += dt

        for direction, state in self.das.items():
            if not state.active:
                continue
            state.elapsed += dt
            if state.elapsed >= self.das_delay and self.clock - state.last_repeat_at >= self.das_interval:
                self._move(direction)
                state.last_repeat_at = self.clock

        if self.soft_drop_active and self.clock - self.last_soft_drop >= self.soft_drop_interval:
            self.game.soft_drop()
            self.last_soft_drop = self.clock

    def reset(self) -> None:
        self.held.clear()
        for direction in self.das:
            self._disarm(direction)
        self.soft_drop_active = False
