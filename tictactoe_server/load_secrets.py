import os
import pathlib
from dotenv import load_dotenv

load_dotenv()

db_backend = os.getenv("DB_BACKEND", "postgres")
user = os.getenv("DB_USER", "postgres")
password = os.getenv("DB_PASSWORD", "postgres")
host = os.getenv("DB_HOST", "localhost")
port = os.getenv("DB_PORT", "5432")
db_name = os.getenv("DB_NAME", "tictactoe")
db_pool_size = int(os.getenv("DB_POOL_SIZE", "20"))
db_max_overflow = int(os.getenv("DB_MAX_OVERFLOW", "20"))
sqlite_path = os.getenv(
    "SQLITE_PATH", str(pathlib.Path(__file__).parent / "games.sqlite3")
)

server_host = os.getenv("SERVER_HOST", "0.0.0.0")
server_port = int(os.getenv("SERVER_PORT", "2022"))
allowed_origins = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
log_level = os.getenv("LOG_LEVEL", "INFO").upper()

if __name__ == "__main__":
    print(db_backend, user, host, port, db_name, sqlite_path, server_port)
