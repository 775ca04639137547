from pydantic import BaseModel, Field
from enum import Enum
from uuid import UUID


class Player(str, Enum):
    X = "X"  # X always moves first
    O = "O"


class GameStatus(str, Enum):
    waiting = "waiting"
    in_progress = "in_progress"
    completed = "completed"


class GameResult(str, Enum):
    X_wins = "X_wins"
    O_wins = "O_wins"
    draw = "draw"
    ongoing = "ongoing"


class CreateGameModel(BaseModel):
    """No inputs needed, a game starts with default values."""


class MakeMoveModel(BaseModel):
    game_id: UUID
    # 0-8, row-major on the 3x3 board. Strict so true or "4" are not coerced.
    position: int = Field(ge=0, le=8, strict=True)
    player: Player


class GameIdModel(BaseModel):
    game_id: UUID


class HealthCheckModel(BaseModel):
    status: str
    timestamp: str
