import pytest

from tetris_board import Board
from tetris_game import Game
from tetris_input import Command, InputTimer
from tetris_rng import SevenBag


@pytest.fixture
def wide_game():
    # Wide board so repeats never hit a wall
    g = Game(bag=SevenBag(seed=11), board=Board(20, 20))
    g.init()
    return g


@pytest.fixture
def timer(wide_game):
    return InputTimer(wide_game)


def x_of(game):
    return game.current_piece.x


def test_press_moves_immediately(wide_game, timer):
    start = x_of(wide_game)
    timer.press(Command.LEFT)
    assert x_of(wide_game) == start - 1


def test_das_then_arr(wide_game, timer):
    start = x_of(wide_game)
    timer.press(Command.LEFT)
    timer.update(100)
    timer.update(69)
    assert x_of(wide_game) == start - 1
    timer.update(1)  # 170 ms held
    assert x_of(wide_game) == start - 2
    timer.update(49)
    assert x_of(wide_game) == start - 2
    timer.update(1)
    assert x_of(wide_game) == start - 3


def test_release_stops_repeat(wide_game, timer):
    start = x_of(wide_game)
    timer.press(Command.RIGHT)
    timer.update(100)
    timer.release(Command.RIGHT)
    timer.update(500)
    assert x_of(wide_game) == start + 1
    assert timer.das[Command.RIGHT].elapsed == 0


def test_os_key_repeat_is_ignored(wide_game, timer):
    start = x_of(wide_game)
    timer.press(Command.LEFT)
    timer.press(Command.LEFT)
    assert x_of(wide_game) == start - 1


def test_most_recent_direction_wins(wide_game, timer):
    start = x_of(wide_game)
    timer.press(Command.LEFT)
    timer.update(100)
    timer.press(Command.RIGHT)
    assert x_of(wide_game) == start
    assert not timer.das[Command.LEFT].active
    timer.update(170)
    assert x_of(wide_game) == start + 1

    timer.release(Command.RIGHT)
    assert timer.das[Command.LEFT].active
    assert x_of(wide_game) == start + 1  # no immediate move on re-arm
    timer.update(170)
    assert x_of(wide_game) == start


def test_soft_drop_repeat(wide_game, timer):
    timer.press(Command.DOWN)
    assert wide_game.current_piece.y == 1
    assert wide_game.score == 1
    timer.update(49)
    assert wide_game.current_piece.y == 1
    timer.update(1)
    assert wide_game.current_piece.y == 2
    timer.release(Command.DOWN)
    timer.update(200)
    assert wide_game.current_piece.y == 2


def test_pause_freezes_without_reset(wide_game, timer):
    start = x_of(wide_game)
    timer.press(Command.LEFT)
    timer.update(100)
    timer.press(Command.PAUSE)
    assert wide_game.paused
    timer.update(1000)
    assert x_of(wide_game) == start - 1
    assert timer.das[Command.LEFT].elapsed == 100

    timer.release(Command.PAUSE)
    timer.press(Command.PAUSE)
    assert not wide_game.paused
    timer.update(70)
    assert x_of(wide_game) == start - 2


def test_one_shot_commands(wide_game, timer):
    timer.press(Command.ROTATE_CW)
    assert wide_game.current_piece.state == 1
    timer.press(Command.ROTATE_CCW)
    assert wide_game.current_piece.state == 0

    first = wide_game.current_piece.t
    timer.press(Command.HOLD)
    assert wide_game.held_piece == first

    timer.press(Command.HARD_DROP)
    assert wide_game.score > 0
    assert not wide_game.board.is_empty()


def test_ignored_before_game_starts():
    g = Game(bag=SevenBag(seed=4))
    t = InputTimer(g)
    t.press(Command.LEFT)
    t.update(500)
    assert g.current_piece is None
    assert not t.held


def test_ignored_after_game_over(wide_game, timer):
    wide_game.end_game()
    timer.press(Command.RIGHT)
    assert not timer.das[Command.RIGHT].active


def test_reset_clears_everything(wide_game, timer):
    timer.press(Command.LEFT)
    timer.press(Command.DOWN)
    timer.reset()
    assert not timer.held
    assert not timer.soft_drop_active
    assert not any(s.active for s in timer.das.values())
