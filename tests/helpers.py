import typing

from board import Battlesnake, Coord

Cells = typing.Sequence[typing.Tuple[int, int]]


def make_snake(snake_id: str, *cells: typing.Tuple[int, int]) -> Battlesnake:
    """Battlesnake model from (x, y) pairs, head first."""
    return Battlesnake(id=snake_id, body=tuple(Coord(x, y) for x, y in cells))


def snake_json(snake_id: str, body: Cells, health: int = 100) -> typing.Dict:
    segments = [{"x": x, "y": y} for x, y in body]
    return {
        "id": snake_id,
        "name": snake_id,
        "health": health,
        "body": segments,
        "head": segments[0],
        "length": len(segments),
    }


def game_state_json(
    you: Cells,
    others: typing.Sequence[Cells] = (),
    food: Cells = (),
    width: int = 11,
    height: int = 11,
    turn: int = 0,
) -> typing.Dict:
    """Request body the Battlesnake engine would send for /move."""
    me = snake_json("you", you)
    snakes = [me] + [snake_json(f"opponent-{i}", body) for i, body in enumerate(others)]
    return {
        "game": {
            "id": "game-1",
            "ruleset": {"name": "standard", "version": "v1.0.0"},
            "timeout": 500,
        },
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": [{"x": x, "y": y} for x, y in food],
            "hazards": [],
            "snakes": snakes,
        },
        "you": me,
    }
