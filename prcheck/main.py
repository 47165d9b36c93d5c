import json
from typing import TextIO

from prcheck.api import generate_check_report
from prcheck.config import Settings, load_settings
from prcheck.core.ports.logger import Logger
from prcheck.core.schema import PRData
from prcheck.infra import ConsoleLogger, LogfireLogger, SystemClock, configure_logfire

REPORT_HEADER = 'PR check report:'
REPORT_INDENT = 2

EXAMPLE_PR = PRData(
    number=123,
    title='feat(api): 添加用户认证功能',
    additions=150,
    deletions=30,
    files=('src/auth.js', 'src/utils.js', 'README.md'),
)


def main(out: TextIO | None = None) -> int:
    settings = load_settings()
    logger = _build_logger(settings)

    report = generate_check_report(EXAMPLE_PR, logger=logger, clock=SystemClock())
    print(REPORT_HEADER, file=out)
    print(
        json.dumps(report.to_dict(), indent=REPORT_INDENT, ensure_ascii=False),
        file=out,
    )
    return 0


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, level=settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ValueError(
                'Logfire backend selected but PRCHECK_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ValueError(f'Unknown logging backend {settings.logging.backend}')
