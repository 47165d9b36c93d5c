from typing import Any

from prcheck.core.ports.logger import Logger


class NullLogger(Logger):
    """Discards every record."""

    def debug(self, message: str, **kwargs: Any) -> None:
        return

    def info(self, message: str, **kwargs: Any) -> None:
        return

    def warning(self, message: str, **kwargs: Any) -> None:
        return

    def error(self, message: str, **kwargs: Any) -> None:
        return

    def exception(self, message: str, **kwargs: Any) -> None:
        return
