class PathDecodeError(ValueError):
    """Raised when a path token cannot be decoded into a drawing command."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token
        self.index: int | None = None


class EmptyTokenError(PathDecodeError):
    pass


class InvalidCommandError(PathDecodeError):
    pass


class NumericParseError(PathDecodeError):
    pass


class ArityMismatchError(PathDecodeError):
    pass


class UnsupportedCommandError(PathDecodeError):
    """Raised in strict mode for commands that parse but cannot be drawn (S, Q, T, A)."""
