# Food seeking.
#
# seek_food() is the strategy the snake plays with: a breadth-first search over
# the board that heads for the nearest reachable food.
#
# probe_food() is the older spiral probe walk. It only looks one cell around
# each probe position and turns clockwise when it finds nothing, so it gives
# up after circling back to where it started. It stays around so games can be
# replayed with the old behaviour.

import logging
import typing
from collections import deque

from board import ORDER, Coord, Direction

logger = logging.getLogger(__name__)


class NoPathFound(LookupError):
    """Raised when a food search ends without finding any food."""


def seek_food(
    head: Coord,
    food: typing.Iterable[Coord],
    width: int,
    height: int,
    obstacles: typing.Iterable[Coord] = (),
) -> Direction:
    """
    Return the first move on a shortest path from head to the nearest food.

    Neighbours are expanded right, left, up, down, so when two foods are the
    same distance away the one reached through the earlier direction wins.
    The search never leaves the board and never enters an obstacle cell.
    """
    targets = set(food)
    if not targets:
        raise NoPathFound("no food on the board")
    blocked = set(obstacles)

    came_from: typing.Dict[Coord, typing.Tuple[Coord, Direction]] = {}
    seen = {head}
    queue = deque([head])

    while queue:
        current = queue.popleft()

        if current != head and current in targets:
            # Walk back to the cell next to the head
            while True:
                previous, direction = came_from[current]
                if previous == head:
                    logger.debug("nearest food %s, first step %s", current, direction.value)
                    return direction
                current = previous

        for direction in ORDER:
            neighbor = current.step(direction)
            if (0 <= neighbor.x < width and 0 <= neighbor.y < height
                    and neighbor not in seen and neighbor not in blocked):
                seen.add(neighbor)
                came_from[neighbor] = (current, direction)
                queue.append(neighbor)

    raise NoPathFound(f"no reachable food from {head}")


def probe_food(
    head: Coord,
    food: typing.Iterable[Coord],
    width: int,
    height: int,
    max_steps: typing.Optional[int] = None,
) -> Direction:
    """Spiral probe walk: report the first food found next to a probe position."""
    if max_steps is None:
        max_steps = width * height
    targets = set(food)

    visited: typing.List[Coord] = []
    probe = head
    last_direction = Direction.UP

    for _ in range(max_steps):
        if probe in visited:
            raise NoPathFound(f"probe walk returned to {probe}")
        logger.debug("checking %s", probe)

        direction = _adjacent_food(probe, targets, width, height)
        if direction is not None:
            return direction

        visited.append(probe)
        last_direction = last_direction.rotate()
        probe = probe.step(last_direction)

    raise NoPathFound(f"probe walk gave up after {max_steps} steps")


def _adjacent_food(
    probe: Coord,
    targets: typing.Set[Coord],
    width: int,
    height: int,
) -> typing.Optional[Direction]:
    # Strict bounds: the lower edges only accept coordinates above 0.
    for direction in ORDER:
        candidate = probe.step(direction)
        if candidate not in targets:
            continue
        if direction is Direction.RIGHT and candidate.x < width:
            return direction
        if direction is Direction.LEFT and candidate.x > 0:
            return direction
        if direction is Direction.UP and candidate.y < height:
            return direction
        if direction is Direction.DOWN and candidate.y > 0:
            return direction
    return None
