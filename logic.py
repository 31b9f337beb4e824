# Per-turn decision logic.
#
# The safety filter says which moves won't kill us, the food seeker says which
# way the food is. We only follow the food seeker when its answer is safe;
# otherwise we take the safe move closest to food, and only when nothing is
# safe do we go with an unsafe move.

import logging
import typing

from board import ORDER, Battlesnake, Board, Coord, Direction, Game, manhattan
from food import NoPathFound, probe_food, seek_food
from safety import safe_moves

logger = logging.getLogger(__name__)

NEAREST = "nearest"
PROBE = "probe"
STRATEGIES = (NEAREST, PROBE)


class UnknownStrategy(ValueError):
    """Raised for a food strategy name we don't implement."""


def check_strategy(strategy: str) -> str:
    if strategy not in STRATEGIES:
        raise UnknownStrategy(
            f"unknown food strategy {strategy!r}, expected one of {', '.join(STRATEGIES)}"
        )
    return strategy


def on_game_start(game: Game, turn: int, board: Board, you: Battlesnake) -> None:
    logger.info("GAME START %s (%s, %dx%d)", game.id, game.ruleset, board.width, board.height)


def on_game_end(game: Game, turn: int, board: Board, you: Battlesnake) -> None:
    logger.info("GAME OVER %s after %d turns", game.id, turn)


def find_food(
    board: Board,
    you: Battlesnake,
    strategy: str = NEAREST,
    avoid_bodies: bool = True,
) -> typing.Optional[Direction]:
    """Ask the food seeker for a direction, or None when it finds nothing."""
    check_strategy(strategy)
    try:
        if strategy == PROBE:
            return probe_food(you.head, board.food, board.width, board.height)
        obstacles = board.occupied() if avoid_bodies else ()
        return seek_food(
            you.head, board.food, board.width, board.height,
            obstacles=obstacles,
        )
    except NoPathFound as e:
        logger.warning("food search failed: %s", e)
        return None


def rank_by_food(
    head: Coord,
    directions: typing.Iterable[Direction],
    food: typing.Iterable[Coord],
) -> typing.List[Direction]:
    """Order directions by how close their destination is to the nearest food."""
    food = list(food)

    def key(direction: Direction) -> typing.Tuple[float, int]:
        target = head.step(direction)
        distance = min((manhattan(target, f) for f in food), default=float("inf"))
        return distance, ORDER.index(direction)

    return sorted(directions, key=key)


def decide_move(
    game: Game,
    turn: int,
    board: Board,
    you: Battlesnake,
    strategy: str = NEAREST,
) -> Direction:
    safe = safe_moves(you, board.snakes, board.width, board.height)
    preferred = find_food(board, you, strategy)
    if not safe and preferred is None and strategy == NEAREST:
        # Boxed in: every neighbour is a body, so look for food straight through them
        preferred = find_food(board, you, strategy, avoid_bodies=False)

    if preferred is not None and preferred in safe:
        chosen = preferred
    elif safe:
        chosen = rank_by_food(you.head, safe, board.food)[0]
        if preferred is not None:
            logger.warning(
                "MOVE %d: food is %s but that's unsafe, going %s",
                turn, preferred.value, chosen.value,
            )
    elif preferred is not None:
        logger.warning("MOVE %d: no safe moves! Heading for food anyway.", turn)
        chosen = preferred
    else:
        logger.warning("MOVE %d: no safe moves and no food! Panic move.", turn)
        chosen = Direction.UP

    logger.info("MOVE %d: %s", turn, chosen.value)
    return chosen
