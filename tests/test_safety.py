import pytest

from board import Direction
from safety import safe_moves
from tests.helpers import make_snake

ALL = set(Direction)


@pytest.mark.parametrize(
    "neck, backward",
    [
        ((4, 5), Direction.LEFT),
        ((6, 5), Direction.RIGHT),
        ((5, 4), Direction.DOWN),
        ((5, 6), Direction.UP),
    ],
)
def test_never_reverses_into_neck(neck, backward):
    you = make_snake("you", (5, 5), neck)
    assert safe_moves(you, [you], 11, 11) == ALL - {backward}


def test_stacked_body_allows_everything():
    # Turn 0: every segment starts on the same cell
    you = make_snake("you", (5, 5), (5, 5), (5, 5))
    assert safe_moves(you, [you], 11, 11) == ALL


def test_single_segment_skips_neck_check():
    you = make_snake("you", (5, 5))
    assert safe_moves(you, [you], 11, 11) == ALL


@pytest.mark.parametrize(
    "head, excluded",
    [
        ((0, 5), {Direction.LEFT}),
        ((10, 5), {Direction.RIGHT}),
        ((5, 0), {Direction.DOWN}),
        ((5, 10), {Direction.UP}),
        ((0, 0), {Direction.LEFT, Direction.DOWN}),
        ((10, 10), {Direction.RIGHT, Direction.UP}),
        ((0, 10), {Direction.LEFT, Direction.UP}),
        ((10, 0), {Direction.RIGHT, Direction.DOWN}),
    ],
)
def test_walls(head, excluded):
    you = make_snake("you", head)
    assert safe_moves(you, [you], 11, 11) == ALL - excluded


def test_right_wall_excluded_with_neck_behind():
    you = make_snake("you", (10, 5), (9, 5))
    assert safe_moves(you, [you], 11, 11) == {Direction.UP, Direction.DOWN}


def test_one_by_n_board():
    you = make_snake("you", (0, 2))
    assert safe_moves(you, [you], 1, 5) == {Direction.UP, Direction.DOWN}


def test_own_body_blocks():
    # Curled up: the tail sits to the right of the head
    you = make_snake("you", (5, 5), (5, 4), (6, 4), (6, 5))
    assert safe_moves(you, [you], 11, 11) == {Direction.UP, Direction.LEFT}


def test_own_body_checked_even_when_not_on_board_list():
    you = make_snake("you", (5, 5), (5, 4), (6, 4), (6, 5))
    assert Direction.RIGHT not in safe_moves(you, [], 11, 11)


def test_opponent_body_blocks():
    you = make_snake("you", (5, 5), (5, 4))
    other = make_snake("other", (7, 6), (6, 6), (6, 5), (6, 4))
    assert safe_moves(you, [you, other], 11, 11) == {Direction.UP, Direction.LEFT}


@pytest.mark.parametrize(
    "cell, blocked",
    [
        ((6, 5), Direction.RIGHT),
        ((4, 5), Direction.LEFT),
        ((5, 6), Direction.UP),
    ],
)
def test_opponent_blocks_every_direction(cell, blocked):
    you = make_snake("you", (5, 5), (5, 4))
    other = make_snake("other", (0, 0), cell)
    assert blocked not in safe_moves(you, [you, other], 11, 11)


def test_boxed_in_has_no_safe_moves():
    you = make_snake("you", (0, 0), (0, 1), (1, 1), (1, 0))
    assert safe_moves(you, [you], 11, 11) == set()


def test_does_not_mutate_inputs():
    you = make_snake("you", (5, 5), (5, 4))
    snakes = [you]
    safe_moves(you, snakes, 11, 11)
    assert snakes == [you]
