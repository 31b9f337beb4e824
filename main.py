import logging
import typing

# Welcome to
# __________         __    __  .__                               __
# \______   \_____ _/  |__/  |_|  |   ____   ______ ____ _____  |  | __ ____
#  |    |  _/\__  \\   __\   __\  | _/ __ \ /  ___//    \\__  \ |  |/ // __ \
#  |    |   \ / __ \|  |  |  | |  |_\  ___/ \___ \|   |  \/ __ \|    <\  ___/
#  |________/(______/__|  |__| |____/\_____>______>___|__(______/__|__\\_____>
#
# These are the handlers the server calls. The decision itself lives in
# logic.py: safety.py filters out deadly moves, food.py finds the food.
#
# For more info see docs.battlesnake.com
from board import GameState, parse_game_state
from config import load_settings
from logic import decide_move, on_game_end, on_game_start

logger = logging.getLogger(__name__)

settings = load_settings()


# info is called when you create your Battlesnake on play.battlesnake.com
# and controls your Battlesnake's appearance
# TIP: If you open your Battlesnake URL in a browser you should see this data
def info() -> typing.Dict:
    logger.info("INFO")
    return settings.appearance()


# start is called when your Battlesnake begins a game
def start(game_state: GameState):
    on_game_start(*parse_game_state(game_state))


# end is called when your Battlesnake finishes a game
def end(game_state: GameState):
    on_game_end(*parse_game_state(game_state))


# move is called on every turn and returns your next move
# Valid moves are "up", "down", "left", or "right"
# See https://docs.battlesnake.com/api/example-move for available data
def move(game_state: GameState) -> typing.Dict:
    game, turn, board, you = parse_game_state(game_state)
    chosen = decide_move(game, turn, board, you, strategy=settings.food_strategy)
    return {"move": chosen.value}


# Start server when `python main.py` is run
if __name__ == "__main__":
    from server import run_server

    run_server({"info": info, "start": start, "move": move, "end": end}, settings)
