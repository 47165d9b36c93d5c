from typing import Iterable, List

from prcheck.core.schema.check import FileTypeCheck

ALLOWED_EXTENSIONS = frozenset(
    ('.js', '.jsx', '.ts', '.tsx', '.json', '.md', '.yml', '.yaml')
)


def file_extension(filename: str) -> str:
    """Return ``filename`` from its last dot onwards.

    A name without any dot is returned whole, so ``Makefile`` has the
    extension ``Makefile`` and never appears in the allowlist.
    """
    index = filename.rfind('.')
    if index == -1:
        return filename
    return filename[index:]


def validate_file_types(files: Iterable[str]) -> FileTypeCheck:
    if isinstance(files, str):
        raise TypeError('files must be a sequence of filenames, not str')
    invalid_files: List[str] = [
        filename
        for filename in files
        if file_extension(filename) not in ALLOWED_EXTENSIONS
    ]

    if invalid_files:
        message = f'Disallowed file types found: {", ".join(invalid_files)}'
    else:
        message = 'All file types are allowed'

    return FileTypeCheck(
        valid=not invalid_files,
        invalid_files=tuple(invalid_files),
        message=message,
    )
