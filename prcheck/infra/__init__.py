from prcheck.infra.clock import SystemClock
from prcheck.infra.logging import (
    ConsoleLogger,
    LogfireLogger,
    NullLogger,
    configure_logfire,
)

__all__ = [
    'ConsoleLogger',
    'LogfireLogger',
    'NullLogger',
    'configure_logfire',
    'SystemClock',
]
