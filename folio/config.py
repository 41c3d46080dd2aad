import os
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _bool_env(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


def _async_database_url(url: str) -> str:
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


class Settings:
    def __init__(self):
        self.SECRET_KEY = os.getenv("SECRET_KEY")
        if not self.SECRET_KEY:
            raise ValueError("SECRET_KEY must be set in environment variables")

        self.DATABASE_URL = self._resolve_database_url()

        self.DEBUG = _bool_env("DEBUG", False)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = _int_env("PORT", 3000)
        self.FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

        self.ALGORITHM = os.getenv("ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES = _int_env("ACCESS_TOKEN_EXPIRE_MINUTES", 7 * 24 * 60)
        self.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES = _int_env("PASSWORD_RESET_TOKEN_EXPIRE_MINUTES", 30)

        self.REDIS_URL: Optional[str] = os.getenv("REDIS_URL") or None
        self.UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join("storage", "uploads"))

        self.DB_POOL_SIZE = _int_env("DB_POOL_SIZE", 10)
        self.CREATE_TABLES = _bool_env("CREATE_TABLES", True)

    @staticmethod
    def _resolve_database_url() -> str:
        database_url = os.getenv("DATABASE_URL")
        if database_url:
            return _async_database_url(database_url)

        host = os.getenv("PGHOST")
        database = os.getenv("PGDATABASE")
        if not host or not database:
            raise ValueError("DATABASE_URL or PGHOST/PGDATABASE must be set in environment variables")

        return URL.create(
            "postgresql+asyncpg",
            username=os.getenv("PGUSER"),
            password=os.getenv("PGPASSWORD"),
            host=host,
            port=_int_env("PGPORT", 5432),
            database=database,
        ).render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")
