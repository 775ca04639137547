from pydantic import BaseModel, Field, model_validator
from typing import Annotated, Optional, Tuple
from uuid import UUID
from datetime import datetime

from tictactoe_server.models.dc_models import GameResult, GameStatus, Player

BOARD_SIZE = 9

Cell = Optional[Player]
# Row-major 3x3 board, index = row * 3 + col. None is an empty cell.
Board = Annotated[Tuple[Cell, ...], Field(min_length=BOARD_SIZE, max_length=BOARD_SIZE)]

EMPTY_BOARD: Tuple[Cell, ...] = (None,) * BOARD_SIZE

WINNERS_BY_RESULT = {
    GameResult.X_wins: Player.X,
    GameResult.O_wins: Player.O,
}


class GameSchema(BaseModel):
    game_id: UUID
    board: Board
    current_player: Player
    status: GameStatus
    result: GameResult
    winner: Player | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        frozen = True

    @model_validator(mode="after")
    def check_result_consistency(self) -> "GameSchema":
        """Reject records whose winner or status disagrees with the result."""
        expected_winner = WINNERS_BY_RESULT.get(self.result)
        if self.winner != expected_winner:
            raise ValueError(
                f"winner {self.winner} does not match result {self.result.value}"
            )
        completed = self.result != GameResult.ongoing
        if (self.status == GameStatus.completed) != completed:
            raise ValueError(
                f"status {self.status.value} does not match result {self.result.value}"
            )
        return self
