import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from tictactoe_server.load_secrets import (
    allowed_origins,
    log_level,
    server_host,
    server_port,
)
from tictactoe_server.routers import game
from tictactoe_server.services import game_db

logging.basicConfig(level=log_level)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app):
    """Create the games table if needed.
    This function is called to start the server.
    """
    await game_db.create_tables()
    logging.info("Start Server")
    try:
        yield
    finally:
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(game.game_router)


def run():
    logging.info(f"Game server listening at {server_host}:{server_port}")
    uvicorn.run(app, host=server_host, port=server_port)


if __name__ == "__main__":
    run()
