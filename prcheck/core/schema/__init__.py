from prcheck.core.schema.check import (
    CheckResult,
    CheckStatus,
    FileTypeCheck,
    LineCountCheck,
    NamedCheckResult,
    TitleCheck,
)
from prcheck.core.schema.pr import PRData
from prcheck.core.schema.report import Report

__all__ = [
    "PRData",
    "CheckStatus",
    "CheckResult",
    "TitleCheck",
    "LineCountCheck",
    "FileTypeCheck",
    "NamedCheckResult",
    "Report",
]
