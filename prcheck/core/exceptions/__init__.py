from prcheck.core.exceptions.errors import PRCheckError, PRDataError

__all__ = [
    "PRCheckError",
    "PRDataError",
]
