class PRCheckError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PRDataError(PRCheckError):
    def __init__(self, message: str, field: str) -> None:
        self.field = field
        super().__init__(message)
