from prcheck.core.ports.clock import Clock
from prcheck.core.ports.logger import Logger

__all__ = [
    "Clock",
    "Logger",
]
