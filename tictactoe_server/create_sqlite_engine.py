from sqlalchemy.ext.asyncio import create_async_engine

from tictactoe_server.load_secrets import sqlite_path

sqlite_url = f"sqlite+aiosqlite:///{sqlite_path}"


engine = create_async_engine(url=sqlite_url, echo=False)
