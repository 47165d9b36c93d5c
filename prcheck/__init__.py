from prcheck.api import generate_check_report
from prcheck.core.checks import (
    ReportGenerator,
    check_changed_lines,
    validate_file_types,
    validate_pr_title,
)
from prcheck.core.exceptions import PRCheckError, PRDataError
from prcheck.core.schema import (
    CheckStatus,
    FileTypeCheck,
    LineCountCheck,
    NamedCheckResult,
    PRData,
    Report,
    TitleCheck,
)

__all__ = [
    "validate_pr_title",
    "check_changed_lines",
    "validate_file_types",
    "generate_check_report",
    "ReportGenerator",
    "PRData",
    "Report",
    "CheckStatus",
    "TitleCheck",
    "LineCountCheck",
    "FileTypeCheck",
    "NamedCheckResult",
    "PRCheckError",
    "PRDataError",
]
