"""Local precondition faults raised by the SDK."""


class CodeAuthError(RuntimeError):
    """Base class for SDK misuse errors."""


class NotInitializedError(CodeAuthError):
    """An operation was called before initialize()."""

    def __init__(self, message: str = "CodeAuth has not been initialized"):
        super().__init__(message)


class AlreadyInitializedError(CodeAuthError):
    """initialize() was called a second time."""

    def __init__(self, message: str = "CodeAuth has already been initialized"):
        super().__init__(message)
