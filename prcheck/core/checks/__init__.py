from prcheck.core.checks.file_types import (
    ALLOWED_EXTENSIONS,
    file_extension,
    validate_file_types,
)
from prcheck.core.checks.lines import MAX_CHANGED_LINES, check_changed_lines
from prcheck.core.checks.report import ReportGenerator
from prcheck.core.checks.title import (
    ALLOWED_PREFIXES,
    TITLE_PATTERN,
    validate_pr_title,
)

__all__ = [
    "ALLOWED_EXTENSIONS",
    "ALLOWED_PREFIXES",
    "MAX_CHANGED_LINES",
    "TITLE_PATTERN",
    "ReportGenerator",
    "check_changed_lines",
    "file_extension",
    "validate_file_types",
    "validate_pr_title",
]
