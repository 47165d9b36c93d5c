from typing import Any

from prcheck.core.ports.logger import Logger


def _load_logfire():
    try:
        import logfire
    except ImportError as error:
        raise RuntimeError('logfire library is not installed') from error
    return logfire


def configure_logfire(api_token: str, service_name: str = 'prcheck') -> None:
    logfire = _load_logfire()
    logfire.configure(token=api_token, service_name=service_name)


class LogfireLogger(Logger):
    """Forwards records to logfire, tagging each with the logger name."""

    def __init__(self, name: str) -> None:
        self._logfire = _load_logfire()
        self._name = name

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logfire.debug(message, logger_name=self._name, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logfire.info(message, logger_name=self._name, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logfire.warn(message, logger_name=self._name, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logfire.error(message, logger_name=self._name, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logfire.exception(message, logger_name=self._name, **kwargs)
