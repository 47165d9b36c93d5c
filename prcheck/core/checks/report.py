from datetime import timezone
from typing import Any, Mapping, Union

from prcheck.core.checks.file_types import validate_file_types
from prcheck.core.checks.lines import check_changed_lines
from prcheck.core.checks.title import validate_pr_title
from prcheck.core.ports.clock import Clock
from prcheck.core.ports.logger import Logger
from prcheck.core.schema.check import CheckResult, NamedCheckResult
from prcheck.core.schema.pr import PRData
from prcheck.core.schema.report import Report

TITLE_FORMAT = 'Title Format'
CHANGED_LINES = 'Changed Lines'
FILE_TYPES = 'File Types'


class ReportGenerator:
    def __init__(self, logger: Logger, clock: Clock) -> None:
        self._logger = logger
        self._clock = clock

    def generate(self, pr_data: Union[PRData, Mapping[str, Any]]) -> Report:
        timestamp = _format_timestamp(self._clock)
        if not isinstance(pr_data, PRData):
            pr_data = PRData.from_mapping(pr_data)

        checks = (
            self._named(TITLE_FORMAT, validate_pr_title(pr_data.title), pr_data),
            self._named(
                CHANGED_LINES,
                check_changed_lines(pr_data.additions, pr_data.deletions),
                pr_data,
            ),
            self._named(FILE_TYPES, validate_file_types(pr_data.files), pr_data),
        )
        report = Report(
            timestamp=timestamp,
            pr_number=pr_data.number,
            checks=checks,
        )
        self._logger.info(
            'Generated PR check report',
            pr_number=report.pr_number,
            passed=report.passed,
            failed_checks=list(report.failed_checks),
        )
        return report

    def _named(
        self,
        name: str,
        result: CheckResult,
        pr_data: PRData,
    ) -> NamedCheckResult:
        self._logger.debug(
            'PR check finished',
            pr_number=pr_data.number,
            check=name,
            passed=result.passed,
        )
        return NamedCheckResult(name=name, result=result)


def _format_timestamp(clock: Clock) -> str:
    now = clock.now().astimezone(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
