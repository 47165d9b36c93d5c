from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from prcheck.core.exceptions import PRDataError

# A missing title is a failed title check, not a malformed record.
_REQUIRED_FIELDS = ('number', 'additions', 'deletions', 'files')


@dataclass(frozen=True, slots=True)
class PRData:
    number: int
    title: Optional[str]
    additions: int
    deletions: int
    files: Tuple[str, ...]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'PRData':
        for field in _REQUIRED_FIELDS:
            if field not in data:
                raise PRDataError(f'PR data is missing {field!r}', field=field)
        files = data['files']
        if isinstance(files, str):
            raise TypeError('PR files must be a sequence of filenames, not str')
        return cls(
            number=data['number'],
            title=data.get('title'),
            additions=data['additions'],
            deletions=data['deletions'],
            files=tuple(files),
        )
