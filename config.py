import os
import typing
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from logic import NEAREST, check_strategy


def load_env() -> None:
    # Prefer a .env next to the code, fall back to searching from CWD.
    root_env = Path(__file__).resolve().parent / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    food_strategy: str = NEAREST
    # Appearance, see https://docs.battlesnake.com/guides/customizations
    author: str = ""
    color: str = "#888888"
    head: str = "default"
    tail: str = "default"

    def appearance(self) -> typing.Dict[str, str]:
        return {
            "apiversion": "1",
            "author": self.author,
            "color": self.color,
            "head": self.head,
            "tail": self.tail,
        }


def load_settings() -> Settings:
    load_env()
    return Settings(
        host=(os.getenv("HOST") or "0.0.0.0").strip(),
        port=int(os.getenv("PORT") or "8000"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        food_strategy=check_strategy((os.getenv("FOOD_STRATEGY") or NEAREST).strip().lower()),
        author=os.getenv("SNAKE_AUTHOR") or "",
        color=os.getenv("SNAKE_COLOR") or "#888888",
        head=os.getenv("SNAKE_HEAD") or "default",
        tail=os.getenv("SNAKE_TAIL") or "default",
    )
