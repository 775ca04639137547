"""DB service layer for game use cases.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session/transaction boundaries.
- Moves and resets are one read-modify-write per game_id: serialized in this
  process by GameSyncManager and across processes by the row lock.
"""

import logging
from datetime import datetime
from typing import List
from uuid import UUID

from uuid6 import uuid7

from tictactoe_server.crud import CreateData, ReadData, UpdateData
from tictactoe_server.db import Session, engine
from tictactoe_server.domain.errors import GameError, GameNotFound
from tictactoe_server.domain.game_rules import initial_state, reset_record, resolve_move
from tictactoe_server.game_sync_manager import GameSyncManager
from tictactoe_server.models.dc_models import Player
from tictactoe_server.models.schema_models import GameSchema
from tictactoe_server.models.schemas import Base

game_sync_manager = GameSyncManager()


async def create_tables() -> None:
    """Create tables if not exists"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def create_game() -> GameSchema:
    game = initial_state(uuid7(), datetime.now())
    async with Session() as session:
        async with session.begin():
            await CreateData.add_game_data(game, session)
    logging.info(f"Created game {game.game_id}")
    return game


async def read_game(game_id: UUID) -> GameSchema | None:
    async with Session() as session:
        return await ReadData.read_game_data(game_id, session)


async def read_games() -> List[GameSchema]:
    async with Session() as session:
        return await ReadData.read_all_games_data(session)


async def make_move(game_id: UUID, position: int, player: Player) -> GameSchema:
    """Resolve one move against the stored game and persist the result.

    Raises:
        GameNotFound: The game_id is unknown
        GameError: The move breaks a game rule; nothing is written
    """
    async with game_sync_manager.hold(game_id):
        try:
            async with Session() as session:
                async with session.begin():
                    game = await ReadData.read_game_data_for_update(game_id, session)
                    if game is None:
                        raise GameNotFound(game_id)

                    updated_game = resolve_move(game, position, player, datetime.now())
                    await UpdateData.update_game_data(updated_game, session)
        except GameError as e:
            logging.info(f"Rejected move on game {game_id}: {e.kind.value}: {e}")
            raise

    logging.info(
        f"Game {game_id}: {player.value} played {position}, "
        f"result={updated_game.result.value}"
    )
    return updated_game


async def reset_game(game_id: UUID) -> GameSchema:
    """Put a stored game back to its initial state, keeping game_id and created_at.

    Raises:
        GameNotFound: The game_id is unknown
    """
    async with game_sync_manager.hold(game_id):
        async with Session() as session:
            async with session.begin():
                game = await ReadData.read_game_data_for_update(game_id, session)
                if game is None:
                    logging.info(f"Rejected reset on unknown game {game_id}")
                    raise GameNotFound(game_id)

                reset = reset_record(game.game_id, game.created_at, datetime.now())
                await UpdateData.update_game_data(reset, session)

    logging.info(f"Reset game {game_id}")
    return reset
