import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    logging: LoggingSettings


def load_settings() -> Settings:
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))

    logging_backend = _get_env_or_default("PRCHECK_LOGGER_BACKEND", "console").lower()
    logging_name = _get_env_or_default("PRCHECK_LOGGER_NAME", "prcheck")
    logging_level = _get_env_or_default("PRCHECK_LOG_LEVEL", "INFO").upper()
    logfire_token = _get_env_or_default("PRCHECK_LOGFIRE_TOKEN")

    return Settings(
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            level=logging_level,
            logfire_token=logfire_token,
        ),
    )


def _get_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value
