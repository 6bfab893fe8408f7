import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

CONFIG_FILE_ENV = "GLOSSA_CONFIG_FILE"
LOG_FILE_ENV = "GLOSSA_LOG_FILE"

# Chatty libraries kept at WARNING regardless of the configured level
_QUIET_LOGGERS = ("asyncio", "aiosqlite", "sqlalchemy.engine", "httpx")


class YamlFileSource(PydanticBaseSettingsSource):
    """Settings from the YAML file named by GLOSSA_CONFIG_FILE.

    The file is parsed once per Config instantiation. A missing file is not
    an error; the source simply contributes nothing.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._data = _read_yaml(os.environ.get(CONFIG_FILE_ENV))

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {key: value for key, value in self._data.items() if value is not None}


def _read_yaml(location: str | None) -> dict[str, Any]:
    if not location:
        return {}
    path = Path(location).expanduser()
    if not path.is_file():
        return {}
    loaded = yaml.safe_load(path.read_text())
    return loaded if isinstance(loaded, dict) else {}


class Server(BaseModel):
    name: str = "Glossa"
    version: str = "0.1.0"
    description: str = "Translation management with project-scoped access control"


class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///glossa.db"
    echo: bool = False
    auto_create: bool = True  # metadata.create_all at startup


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Log to this file instead of stderr when GLOSSA_LOG_FILE is set."""
        return os.environ.get(LOG_FILE_ENV)


class JwtConfig(BaseModel):
    """Verification settings for session tokens issued by the web frontend."""

    secret: str = ""
    algorithm: str = "HS256"
    audience: str | None = None
    leeway_seconds: int = 0


class AuthConfig(BaseModel):
    jwt: JwtConfig = JwtConfig()
    session_cookie: str = "auth_token"
    api_key_prefix: str = "tk_"
    api_key_length: int = 48


class Config(BaseSettings):
    """Root settings.

    Precedence, highest first: constructor kwargs, GLOSSA_* env vars, .env,
    the YAML config file, secrets directory. Nested fields use ``__``, e.g.
    ``GLOSSA_AUTH__JWT__SECRET``.
    """

    server: Server = Server()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    auth: AuthConfig = AuthConfig()

    model_config = SettingsConfigDict(
        env_prefix="GLOSSA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlFileSource(settings_cls),
            file_secret_settings,
        )


def _build_handler(config: LoggingConfig) -> logging.Handler:
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    return handler


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(config.level)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(_build_handler(config))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, file=%s", config.level, config.file or "<stderr>"
    )
