# app/core/config.py
"""
Environment configuration for the users service.

Values come from the process environment; a local ``.env.local`` file is
loaded first without overriding variables that are already set.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL

from app.core.errors import ConfigError

ENV_FILE = ".env.local"

REQUIRED_ENV_VARS = (
    "DATABASE_HOST",
    "DATABASE_PORT",
    "DATABASE_USER",
    "DATABASE_PASSWORD",
    "DATABASE_NAME",
)

PRODUCTION = "production"


def _as_bool(raw: Optional[str]) -> bool:
    if raw is None:
        return False
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_host: str
    database_port: int
    database_user: str
    database_password: str
    database_name: str
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    database_echo: bool = False

    @property
    def synchronize(self) -> bool:
        """Tables are created from the models everywhere except production."""
        return self.app_env != PRODUCTION

    @property
    def database_url(self) -> URL:
        return URL.create(
            "postgresql+psycopg2",
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        )


def _parse_int(env: Mapping[str, str], name: str, default: Optional[int] = None) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        if default is None:
            raise ConfigError(f"Missing required environment variables: {name}")
        return default
    try:
        return int(raw, 10)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from ``env`` (defaults to os.environ after loading .env.local).
    Raises ConfigError listing every missing required variable.
    """
    if env is None:
        load_dotenv(ENV_FILE)
        env = os.environ

    missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    return Settings(
        database_host=env["DATABASE_HOST"],
        database_port=_parse_int(env, "DATABASE_PORT"),
        database_user=env["DATABASE_USER"],
        database_password=env["DATABASE_PASSWORD"],
        database_name=env["DATABASE_NAME"],
        app_env=env.get("APP_ENV") or env.get("NODE_ENV") or "development",
        host=env.get("HOST") or "0.0.0.0",
        port=_parse_int(env, "PORT", default=3000),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        database_echo=_as_bool(env.get("DATABASE_ECHO")),
    )
