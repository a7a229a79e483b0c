"""
SAFEFAO - Custom Exception Classes

Defines the exception hierarchy for the package.
All custom exceptions inherit from SafeFaoError.
"""


class SafeFaoError(Exception):
    """Base exception for all SAFEFAO errors."""

    pass


class ConfigurationError(SafeFaoError):
    """Raised when there are configuration issues."""

    pass


class UnwrapError(SafeFaoError):
    """Raised when the error of a successful result is requested."""

    pass


class FileAccessError(SafeFaoError):
    """
    Tagged failure produced when a file access call raises.

    The original fault is kept verbatim in ``cause`` and chained through
    ``__cause__`` for tracebacks. ``tag`` and ``name`` both equal the
    concrete class name so callers can branch on either.
    """

    tag = "FileAccessError"

    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.tag}: {self.cause}"

    @property
    def name(self) -> str:
        return self.tag

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileAccessError):
            return NotImplemented
        return self.tag == other.tag and self.cause is other.cause

    def __hash__(self) -> int:
        return hash((self.tag, id(self.cause)))


class ExistsError(FileAccessError):
    """Raised into a result when an existence check fails."""

    tag = "ExistsError"


class ReadFileError(FileAccessError):
    """Raised into a result when reading a file fails."""

    tag = "ReadFileError"
