"""YAML config loading and validation."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]
DEFAULT_CORS_METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS", "PUT"]
DEFAULT_CORS_HEADERS = ["Content-Type", "Authorization"]


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    cors_methods: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_METHODS))
    cors_headers: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_HEADERS))


@dataclass
class DatabaseConfig:
    url: str = "sqlite:///data/me_api.db"
    echo: bool = False


@dataclass
class QueryConfig:
    top_skills_limit: int = 5


@dataclass
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Server (PORT env var takes precedence, as on most hosting platforms)
    server_raw = raw.get("server", {})
    config.server = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=int(os.environ.get("PORT", server_raw.get("port", 3001))),
        cors_origins=server_raw.get("cors_origins", list(DEFAULT_CORS_ORIGINS)),
        cors_methods=server_raw.get("cors_methods", list(DEFAULT_CORS_METHODS)),
        cors_headers=server_raw.get("cors_headers", list(DEFAULT_CORS_HEADERS)),
    )

    # Database (DATABASE_URL env var takes precedence)
    database_raw = raw.get("database", {})
    config.database = DatabaseConfig(
        url=os.environ.get("DATABASE_URL", database_raw.get("url", "sqlite:///data/me_api.db")),
        echo=database_raw.get("echo", False),
    )

    # Query
    query_raw = raw.get("query", {})
    config.query = QueryConfig(
        top_skills_limit=int(query_raw.get("top_skills_limit", 5)),
    )

    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = str(raw.get("log_level", "INFO")).upper()

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not config.server.cors_origins:
        warnings.append("No CORS origins configured - browser clients on other origins will be blocked")

    if config.database.url.startswith("sqlite") and ":memory:" in config.database.url:
        warnings.append("In-memory SQLite database configured - profiles will be lost on restart")

    if config.query.top_skills_limit < 1:
        warnings.append("query.top_skills_limit is below 1 - top skills will always be empty")

    if not isinstance(logging.getLevelName(config.log_level), int):
        warnings.append(f"Unknown log level '{config.log_level}' - falling back to INFO")

    return warnings
