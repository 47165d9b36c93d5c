from prcheck.infra.logging.console import ConsoleLogger
from prcheck.infra.logging.logfire import LogfireLogger, configure_logfire
from prcheck.infra.logging.null import NullLogger

__all__ = ["ConsoleLogger", "LogfireLogger", "NullLogger", "configure_logfire"]
