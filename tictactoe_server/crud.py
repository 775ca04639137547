from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from typing import List
import logging
from uuid import UUID

from tictactoe_server.models.schema_models import GameSchema
from tictactoe_server.models.schemas import Game


def _board_to_json(game: GameSchema) -> list:
    return [cell.value if cell is not None else None for cell in game.board]


class CreateData:
    @staticmethod
    async def add_game_data(game: GameSchema, session: AsyncSession) -> UUID:
        """Add a new game row to the session without committing

        Args:
            game (GameSchema): Initial state of the game
            session (AsyncSession): AsyncSession object to interact with database

        Returns:
            UUID: game_id of the stored game
        """
        try:
            new_game = Game(
                game_id=game.game_id,
                board=_board_to_json(game),
                current_player=game.current_player,
                status=game.status,
                result=game.result,
                winner=game.winner,
                created_at=game.created_at,
                updated_at=game.updated_at,
            )
            session.add(new_game)
            await session.flush()
            return new_game.game_id
        except Exception as e:
            logging.error(f"Failed to create game data: {e}")
            raise


class ReadData:
    @staticmethod
    async def read_game_data(game_id: UUID, session: AsyncSession) -> GameSchema | None:
        """Read game data from database

        Args:
            game_id (UUID): To identify the game

        Returns:
            GameSchema | None: Validated game data, None if the game does not exist
        """
        try:
            stmt = select(Game).where(Game.game_id == game_id)
            result = await session.execute(stmt)
            result = result.scalars().first()

            if result is None:
                return None

            return GameSchema.model_validate(result)
        except Exception as e:
            logging.error(f"Failed to read game data: {e}")
            raise

    @staticmethod
    async def read_game_data_for_update(
        game_id: UUID, session: AsyncSession
    ) -> GameSchema | None:
        """Read game data and lock the row until the surrounding transaction ends

        Args:
            game_id (UUID): To identify the game

        Returns:
            GameSchema | None: Validated game data, None if the game does not exist
        """
        try:
            stmt = select(Game).where(Game.game_id == game_id).with_for_update()
            result = await session.execute(stmt)
            result = result.scalars().first()

            if result is None:
                return None

            return GameSchema.model_validate(result)
        except Exception as e:
            logging.error(f"Failed to read game data for update: {e}")
            raise

    @staticmethod
    async def read_all_games_data(session: AsyncSession) -> List[GameSchema]:
        """Read every game, most recently created first

        Returns:
            List[GameSchema]: Validated game data
        """
        try:
            stmt = select(Game).order_by(desc(Game.created_at), desc(Game.game_id))
            result = await session.execute(stmt)
            return [GameSchema.model_validate(game) for game in result.scalars().all()]
        except Exception as e:
            logging.error(f"Failed to read games data: {e}")
            raise


class UpdateData:
    @staticmethod
    async def update_game_data(game: GameSchema, session: AsyncSession) -> bool:
        """Overwrite the stored state of a game without committing

        created_at is never written here.

        Args:
            game (GameSchema): New state of the game

        Returns:
            bool: False if the game does not exist
        """
        try:
            stmt = select(Game).where(Game.game_id == game.game_id)
            result = await session.execute(stmt)
            result = result.scalars().first()

            if result is None:
                return False

            result.board = _board_to_json(game)
            result.current_player = game.current_player
            result.status = game.status
            result.result = game.result
            result.winner = game.winner
            result.updated_at = game.updated_at
            await session.flush()
            return True
        except Exception as e:
            logging.error(f"Failed to update game data: {e}")
            raise
