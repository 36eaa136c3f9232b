"""Configuration loader for database, server, and logging settings."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass(frozen=True)
class DatabaseConfig:
    path: str


@dataclass(frozen=True)
class ServerConfig:
    host: str
    port: int


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    format: str


@dataclass(frozen=True)
class AppConfig:
    database: DatabaseConfig
    server: ServerConfig
    logging: LoggingConfig


DEFAULT_CONFIG_REL_PATH = Path("config/app.yaml")
CONFIG_PATH_ENV = "TRAVEL_PREMIUM_CONFIG_PATH"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_default_config_path() -> Path:
    """Resolve configuration path for source and packaged execution."""
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)

    candidates: list[Path] = []

    if getattr(sys, "frozen", False):
        exe_dir = Path(sys.executable).resolve().parent
        candidates.append(exe_dir / DEFAULT_CONFIG_REL_PATH)

    candidates.append(Path.cwd() / DEFAULT_CONFIG_REL_PATH)
    candidates.append(Path(__file__).resolve().parents[3] / DEFAULT_CONFIG_REL_PATH)

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return candidates[0] if candidates else DEFAULT_CONFIG_REL_PATH


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load the app configuration from YAML."""
    path = config_path or resolve_default_config_path()
    with path.open("r", encoding="utf-8") as file:
        raw = yaml.safe_load(file) or {}

    if "db" not in raw or "path" not in (raw["db"] or {}):
        raise RuntimeError(f"Configuration is missing db.path: {path}")

    server = raw.get("server") or {}
    logging_section = raw.get("logging") or {}

    return AppConfig(
        database=DatabaseConfig(
            path=str(raw["db"]["path"]),
        ),
        server=ServerConfig(
            host=str(server.get("host", DEFAULT_HOST)),
            port=int(server.get("port", DEFAULT_PORT)),
        ),
        logging=LoggingConfig(
            level=str(logging_section.get("level", DEFAULT_LOG_LEVEL)).upper(),
            format=str(logging_section.get("format", DEFAULT_LOG_FORMAT)),
        ),
    )
