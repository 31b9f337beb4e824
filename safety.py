# Safety filter: which of the four moves will not kill us next turn.
#
# Starts with every direction allowed and strikes out the ones that would
# reverse into our neck, leave the board, or run into a snake body.

import logging
import typing

from board import Battlesnake, Coord, Direction

logger = logging.getLogger(__name__)


def safe_moves(
    you: Battlesnake,
    snakes: typing.Iterable[Battlesnake],
    width: int,
    height: int,
) -> typing.Set[Direction]:
    is_move_safe = {d: True for d in Direction}
    head = you.head

    # Don't reverse into our own neck
    neck = you.neck
    if neck is not None:
        if neck.x < head.x:
            is_move_safe[Direction.LEFT] = False
        elif neck.x > head.x:
            is_move_safe[Direction.RIGHT] = False
        elif neck.y < head.y:
            is_move_safe[Direction.DOWN] = False
        elif neck.y > head.y:
            is_move_safe[Direction.UP] = False

    # Stay on the board
    if head.x == width - 1:
        is_move_safe[Direction.RIGHT] = False
    if head.x == 0:
        is_move_safe[Direction.LEFT] = False
    if head.y == height - 1:
        is_move_safe[Direction.UP] = False
    if head.y == 0:
        is_move_safe[Direction.DOWN] = False

    # Don't run into ourselves. The tail counts as an obstacle even though it
    # usually moves away this turn.
    _exclude_body(is_move_safe, head, you.body, "self")

    # Don't run into anyone else (our own entry on the board is checked again)
    for snake in snakes:
        _exclude_body(is_move_safe, head, snake.body, snake.id)

    safe = {d for d, ok in is_move_safe.items() if ok}
    logger.debug("safe moves from %s: %s", head, sorted(d.value for d in safe))
    return safe


def _exclude_body(
    is_move_safe: typing.Dict[Direction, bool],
    head: Coord,
    body: typing.Sequence[Coord],
    owner: str,
) -> None:
    cells = set(body)
    for direction, ok in is_move_safe.items():
        if not ok:
            continue
        target = head.step(direction)
        if target in cells:
            logger.debug("colliding with %s at %s going %s", owner, target, direction.value)
            is_move_safe[direction] = False
