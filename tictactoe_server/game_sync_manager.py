from asyncio import Lock
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import UUID


class GameSyncManager:
    """Serializes read-modify-write cycles per game_id within this process."""

    def __init__(self):
        self.locks = {}  # Lock per game_id
        self.waiter_counts = {}  # Holders and waiters per game_id
        self.lock = Lock()  # Protects locks and waiter_counts

    @asynccontextmanager
    async def hold(self, game_id: UUID) -> AsyncIterator[None]:
        """Hold the lock of the specified game_id for the duration of the block

        Args:
            game_id (UUID): ID to identify the game
        """
        async with self.lock:
            if game_id not in self.locks:
                self.locks[game_id] = Lock()
                self.waiter_counts[game_id] = 0
            self.waiter_counts[game_id] += 1
            game_lock = self.locks[game_id]
        try:
            async with game_lock:
                yield
        finally:
            await self.cleanup(game_id)

    async def get_waiter_count(self, game_id: UUID) -> int:
        """Get how many callers currently hold or wait for the game_id lock

        Args:
            game_id (UUID): ID to identify the game

        Returns:
            int: holder and waiter count, 0 if the game_id is not tracked
        """
        async with self.lock:
            return self.waiter_counts.get(game_id, 0)

    async def cleanup(self, game_id: UUID):
        """Release one reference and drop the Lock once nobody uses it

        Args:
            game_id (UUID): ID to identify the game
        """
        async with self.lock:
            self.waiter_counts[game_id] -= 1
            if self.waiter_counts[game_id] == 0:
                del self.locks[game_id]
                del self.waiter_counts[game_id]
