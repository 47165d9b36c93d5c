from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union


class CheckStatus(str, Enum):
    SUCCESS = 'success'
    WARNING = 'warning'


@dataclass(frozen=True, slots=True)
class TitleCheck:
    valid: bool
    message: str

    @property
    def passed(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return {'valid': self.valid, 'message': self.message}


@dataclass(frozen=True, slots=True)
class LineCountCheck:
    status: CheckStatus
    message: str
    total: int

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {'status': self.status.value, 'message': self.message}


@dataclass(frozen=True, slots=True)
class FileTypeCheck:
    valid: bool
    invalid_files: Tuple[str, ...]
    message: str

    @property
    def passed(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'invalidFiles': list(self.invalid_files),
            'message': self.message,
        }


CheckResult = Union[TitleCheck, LineCountCheck, FileTypeCheck]


@dataclass(frozen=True, slots=True)
class NamedCheckResult:
    name: str
    result: CheckResult

    @property
    def passed(self) -> bool:
        return self.result.passed

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, **self.result.to_dict()}
