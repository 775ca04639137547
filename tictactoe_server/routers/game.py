import logging
from datetime import datetime
from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from tictactoe_server.domain.errors import GameError, GameErrorKind
from tictactoe_server.models.dc_models import (
    CreateGameModel,
    GameIdModel,
    HealthCheckModel,
    MakeMoveModel,
)
from tictactoe_server.models.schema_models import GameSchema
from tictactoe_server.services import game_db

game_router = APIRouter()

ERROR_STATUS_CODES = {
    GameErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    GameErrorKind.game_already_completed: status.HTTP_409_CONFLICT,
    GameErrorKind.game_not_started: status.HTTP_409_CONFLICT,
    GameErrorKind.wrong_turn: status.HTTP_409_CONFLICT,
    GameErrorKind.position_out_of_range: status.HTTP_422_UNPROCESSABLE_ENTITY,
    GameErrorKind.position_occupied: status.HTTP_409_CONFLICT,
}


def to_http_exception(error: GameError) -> HTTPException:
    """Translate a game failure into the HTTP error sent to the client

    Args:
        error (GameError): Failure raised by the rules or the service layer

    Returns:
        HTTPException: detail carries the failure kind and its message
    """
    return HTTPException(
        status_code=ERROR_STATUS_CODES[error.kind],
        detail={"kind": error.kind.value, "message": error.message},
    )


class HealthAPI:
    @staticmethod
    @game_router.get("/healthcheck", response_model=HealthCheckModel)
    async def healthcheck():
        return HealthCheckModel(status="ok", timestamp=datetime.now().isoformat())


class GameAPI:
    @staticmethod
    @game_router.post("/create_game", response_model=GameSchema)
    async def create_game(request: CreateGameModel = CreateGameModel()):
        return await game_db.create_game()

    @staticmethod
    @game_router.post("/make_move", response_model=GameSchema)
    async def make_move(request: MakeMoveModel):
        try:
            return await game_db.make_move(
                request.game_id, request.position, request.player
            )
        except GameError as e:
            raise to_http_exception(e)

    @staticmethod
    @game_router.get("/get_game/{game_id}", response_model=GameSchema | None)
    async def get_game(game_id: UUID):
        game = await game_db.read_game(game_id)
        if game is None:
            logging.info(f"Game {game_id} not found")
        return game

    @staticmethod
    @game_router.post("/reset_game", response_model=GameSchema)
    async def reset_game(request: GameIdModel):
        try:
            return await game_db.reset_game(request.game_id)
        except GameError as e:
            raise to_http_exception(e)

    @staticmethod
    @game_router.get("/get_games", response_model=List[GameSchema])
    async def get_games():
        return await game_db.read_games()
