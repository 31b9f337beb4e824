# Board model for a single turn.
#
# Every request from the Battlesnake engine carries the whole game state as JSON.
# parse_game_state() turns that payload into small immutable objects so the
# move logic can work with coordinates and directions instead of raw dicts.
# See https://docs.battlesnake.com/api/objects/board for the payload layout.

import enum
import typing
from dataclasses import dataclass

GameState = typing.Dict[str, typing.Any]


class InvalidGameState(ValueError):
    """Raised when a request body is not a usable Battlesnake game state."""


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> typing.Tuple[int, int]:
        return _DELTAS[self]

    def rotate(self) -> "Direction":
        """Quarter turn clockwise: up -> right -> down -> left -> up."""
        return _ROTATIONS[self]


_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_ROTATIONS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

# Priority when several directions are equally good (food checks, tie-breaks).
ORDER = (Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN)


class Coord(typing.NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Coord":
        dx, dy = direction.delta
        return Coord(self.x + dx, self.y + dy)


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


@dataclass(frozen=True)
class Battlesnake:
    id: str
    body: typing.Tuple[Coord, ...]
    name: str = ""
    health: int = 100

    @property
    def head(self) -> Coord:
        return self.body[0]

    @property
    def neck(self) -> typing.Optional[Coord]:
        # Only snakes with at least two segments have a neck.
        return self.body[1] if len(self.body) >= 2 else None


@dataclass(frozen=True)
class Board:
    width: int
    height: int
    food: typing.FrozenSet[Coord] = frozenset()
    snakes: typing.Tuple[Battlesnake, ...] = ()
    hazards: typing.FrozenSet[Coord] = frozenset()

    def occupied(self) -> typing.Set[Coord]:
        """All body cells of all snakes (including our own)."""
        cells = set()
        for snake in self.snakes:
            cells.update(snake.body)
        return cells


@dataclass(frozen=True)
class Game:
    id: str
    ruleset: str = "standard"
    timeout: int = 500


def parse_coord(raw: typing.Dict[str, int]) -> Coord:
    return Coord(int(raw["x"]), int(raw["y"]))


def parse_snake(raw: typing.Dict[str, typing.Any]) -> Battlesnake:
    body = tuple(parse_coord(seg) for seg in raw["body"])
    if not body:
        raise InvalidGameState(f"snake {raw.get('id')!r} has an empty body")
    return Battlesnake(
        id=str(raw["id"]),
        body=body,
        name=raw.get("name", ""),
        health=int(raw.get("health", 100)),
    )


def parse_board(raw: typing.Dict[str, typing.Any]) -> Board:
    width, height = int(raw["width"]), int(raw["height"])
    if width <= 0 or height <= 0:
        raise InvalidGameState(f"board must have positive dimensions, got {width}x{height}")
    return Board(
        width=width,
        height=height,
        food=frozenset(parse_coord(f) for f in raw.get("food", [])),
        snakes=tuple(parse_snake(s) for s in raw.get("snakes", [])),
        hazards=frozenset(parse_coord(h) for h in raw.get("hazards", [])),
    )


def parse_game(raw: typing.Dict[str, typing.Any]) -> Game:
    ruleset = raw.get("ruleset") or {}
    return Game(
        id=str(raw.get("id", "")),
        ruleset=ruleset.get("name", "standard"),
        timeout=int(raw.get("timeout", 500)),
    )


def parse_game_state(
    game_state: GameState,
) -> typing.Tuple[Game, int, Board, Battlesnake]:
    """Split a request body into (game, turn, board, you)."""
    try:
        game = parse_game(game_state.get("game") or {})
        turn = int(game_state.get("turn", 0))
        board = parse_board(game_state["board"])
        you = parse_snake(game_state["you"])
    except InvalidGameState:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise InvalidGameState(f"malformed game state: {e!r}") from e
    return game, turn, board, you
