from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import JSON, DateTime, Enum, Uuid
from uuid6 import uuid7
from datetime import datetime

from tictactoe_server.models.dc_models import GameResult, GameStatus, Player


def _enum_values(enum_class) -> list[str]:
    return [member.value for member in enum_class]


# Shared so PostgreSQL only creates the "player" type once.
player_enum = Enum(Player, name="player", values_callable=_enum_values)
game_status_enum = Enum(GameStatus, name="game_status", values_callable=_enum_values)
game_result_enum = Enum(GameResult, name="game_result", values_callable=_enum_values)


class Base(DeclarativeBase):
    pass


class Game(Base):
    __tablename__ = "games"
    game_id = Column(Uuid, primary_key=True, default=uuid7)
    board = Column(JSON, nullable=False)  # 9 cells of "X", "O" or null
    current_player = Column(player_enum, nullable=False)
    status = Column(game_status_enum, nullable=False)
    result = Column(game_result_enum, nullable=False)
    winner = Column(player_enum, nullable=True)  # Only set when the game is won
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, nullable=False)
