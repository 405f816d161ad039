import pytest

from tetris_board import Board
from tetris_game import Game
from tetris_rng import SevenBag


@pytest.fixture
def board():
    return Board(10, 20)


@pytest.fixture
def game():
    g = Game(bag=SevenBag(seed=1234), board=Board(10, 20))
    g.init()
    return g
