from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import create_async_engine

from tictactoe_server.load_secrets import (
    db_max_overflow,
    db_name,
    db_pool_size,
    host,
    password,
    port,
    user,
)


def build_postgres_url(
    user: str, password: str, host: str, port: str, db_name: str
) -> URL:
    """Build the asyncpg URL; credentials are escaped by SQLAlchemy, not formatted in."""
    return URL.create(
        "postgresql+asyncpg",
        username=user,
        password=password,
        host=host,
        port=int(port),
        database=db_name,
    )


POSTGRES_DATABASE_URL = build_postgres_url(user, password, host, port, db_name)

engine = create_async_engine(
    POSTGRES_DATABASE_URL, pool_size=db_pool_size, max_overflow=db_max_overflow
)
