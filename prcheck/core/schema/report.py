from dataclasses import dataclass
from typing import Any, Dict, Tuple

from prcheck.core.schema.check import NamedCheckResult


@dataclass(frozen=True, slots=True)
class Report:
    timestamp: str
    pr_number: int
    checks: Tuple[NamedCheckResult, ...]

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failed_checks(self) -> Tuple[str, ...]:
        return tuple(check.name for check in self.checks if not check.passed)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp,
            'prNumber': self.pr_number,
            'checks': [check.to_dict() for check in self.checks],
        }
