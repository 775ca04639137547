"""Failure kinds raised by the game rules and the game services.

Every failure carries a ``kind`` so callers can dispatch on it without
matching on message text. All of them are caused by caller input or stale
state and are never worth retrying with the same input.
"""

from enum import Enum
from uuid import UUID

from tictactoe_server.models.dc_models import Player


class GameErrorKind(str, Enum):
    not_found = "not_found"
    game_already_completed = "game_already_completed"
    game_not_started = "game_not_started"
    wrong_turn = "wrong_turn"
    position_out_of_range = "position_out_of_range"
    position_occupied = "position_occupied"


class GameError(Exception):
    kind: GameErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GameNotFound(GameError):
    kind = GameErrorKind.not_found

    def __init__(self, game_id: UUID):
        super().__init__(f"Game with id {game_id} not found")
        self.game_id = game_id


class GameAlreadyCompleted(GameError):
    kind = GameErrorKind.game_already_completed

    def __init__(self):
        super().__init__("Game is already completed")


class GameNotStarted(GameError):
    kind = GameErrorKind.game_not_started

    def __init__(self):
        super().__init__("Game is not yet started")


class WrongTurn(GameError):
    kind = GameErrorKind.wrong_turn

    def __init__(self, player: Player, current_player: Player):
        super().__init__(
            f"It's not {player.value}'s turn. Current player is {current_player.value}"
        )
        self.player = player
        self.current_player = current_player


class PositionOutOfRange(GameError):
    kind = GameErrorKind.position_out_of_range

    def __init__(self, position: int):
        super().__init__(f"Position {position} is out of range (0-8)")
        self.position = position


class PositionOccupied(GameError):
    kind = GameErrorKind.position_occupied

    def __init__(self, position: int):
        super().__init__(f"Position {position} is already occupied")
        self.position = position
