from collections import Counter

from tetris_piece import PIECE_TYPES
from tetris_rng import SevenBag


def test_fourteen_draws_hold_each_type_twice():
    bag = SevenBag(seed=7)
    counts = Counter(bag.next_piece() for _ in range(14))
    assert counts == Counter({t: 2 for t in PIECE_TYPES})


def test_each_bag_is_a_permutation():
    bag = SevenBag(seed=99)
    for _ in range(20):
        window = [bag.next_piece() for _ in range(7)]
        assert sorted(window) == sorted(PIECE_TYPES)


def test_no_type_more_than_twice_in_a_row():
    bag = SevenBag(seed=3)
    seq = [bag.next_piece() for _ in range(700)]
    for a, b, c in zip(seq, seq[1:], seq[2:]):
        assert not (a == b == c)


def test_same_seed_same_sequence():
    a, b = SevenBag(seed=42), SevenBag(seed=42)
    assert [a.next_piece() for _ in range(21)] == [b.next_piece() for _ in range(21)]


def test_remaining_counts_down_and_refills():
    bag = SevenBag(seed=0)
    assert bag.remaining() == 0
    bag.next_piece()
    assert bag.remaining() == 6
    for _ in range(6):
        bag.next_piece()
    assert bag.remaining() == 0
    bag.next_piece()
    assert bag.remaining() == 6


def test_bags_are_independent():
    a, b = SevenBag(seed=5), SevenBag(seed=5)
    for _ in range(3):
        a.next_piece()
    assert a.remaining() == 4
    assert b.remaining() == 0
