"""Tic-tac-toe rules that are independent from HTTP and DB.

Rule of thumb:
- OK: validation, win/draw detection, pure state transitions.
- Not OK: touching DB sessions, FastAPI, datetime.now(), uuid generation.

Every function returns a new GameSchema; records passed in are never mutated.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from tictactoe_server.domain.errors import (
    GameAlreadyCompleted,
    GameNotStarted,
    PositionOccupied,
    PositionOutOfRange,
    WrongTurn,
)
from tictactoe_server.models.dc_models import GameResult, GameStatus, Player
from tictactoe_server.models.schema_models import (
    BOARD_SIZE,
    EMPTY_BOARD,
    Cell,
    GameSchema,
)

WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

WIN_RESULTS = {
    Player.X: GameResult.X_wins,
    Player.O: GameResult.O_wins,
}


def opponent(player: Player) -> Player:
    return Player.O if player == Player.X else Player.X


def check_win(board: Sequence[Cell], player: Player) -> bool:
    """Return True if any winning line is fully occupied by ``player``."""
    return any(
        all(board[position] == player for position in line) for line in WINNING_LINES
    )


def is_board_full(board: Sequence[Cell]) -> bool:
    return all(cell is not None for cell in board)


def determine_game_result(board: Sequence[Cell], player: Player) -> GameResult:
    """Classify the board right after ``player`` has moved.

    Only the player who just moved can have completed a line, so the other
    mark is not checked.
    """
    if check_win(board, player):
        return WIN_RESULTS[player]
    if is_board_full(board):
        return GameResult.draw
    return GameResult.ongoing


def initial_state(game_id: UUID, now: datetime) -> GameSchema:
    """Build a fresh game: empty board, X to move."""
    return GameSchema(
        game_id=game_id,
        board=EMPTY_BOARD,
        current_player=Player.X,
        status=GameStatus.in_progress,
        result=GameResult.ongoing,
        winner=None,
        created_at=now,
        updated_at=now,
    )


def reset_record(game_id: UUID, created_at: datetime, now: datetime) -> GameSchema:
    """Build the initial state again, keeping the identifier and creation time."""
    game = initial_state(game_id, now)
    return game.model_copy(update={"created_at": created_at})


def resolve_move(
    game: GameSchema, position: int, player: Player, now: datetime
) -> GameSchema:
    """Apply ``player``'s mark at ``position`` and compute the resulting state.

    Preconditions are checked in order and the first failure is raised:
    completed game, game not started, wrong turn, position out of range,
    occupied position.

    Args:
        game (GameSchema): Current state of the game
        position (int): Board index 0-8, row-major
        player (Player): The player making the move
        now (datetime): Timestamp stored as updated_at

    Returns:
        GameSchema: The new game state. When the move ends the game,
        current_player stays on the player who just moved.
    """
    if game.status == GameStatus.completed:
        raise GameAlreadyCompleted()
    if game.status == GameStatus.waiting:
        raise GameNotStarted()
    if player != game.current_player:
        raise WrongTurn(player, game.current_player)
    if not 0 <= position < BOARD_SIZE:
        raise PositionOutOfRange(position)
    if game.board[position] is not None:
        raise PositionOccupied(position)

    board = list(game.board)
    board[position] = player

    result = determine_game_result(board, player)
    completed = result != GameResult.ongoing

    return game.model_copy(
        update={
            "board": tuple(board),
            "current_player": player if completed else opponent(player),
            "status": GameStatus.completed if completed else GameStatus.in_progress,
            "result": result,
            "winner": player if result == WIN_RESULTS[player] else None,
            "updated_at": now,
        }
    )
