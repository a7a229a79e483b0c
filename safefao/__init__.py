"""
SAFEFAO - Safe File Access

Turns exceptions raised by file access calls into tagged error results.
"""

from safefao.core.errors import ExistsError, FileAccessError, ReadFileError, SafeFaoError
from safefao.core.types import Err, Ok, Result
from safefao.infrastructure.filesystem import FileAccessObject, MockFileAccess, RealFileAccess
from safefao.infrastructure.safe import SafeFileAccess, safe_fao

__all__ = [
    "Err",
    "ExistsError",
    "FileAccessError",
    "FileAccessObject",
    "MockFileAccess",
    "Ok",
    "ReadFileError",
    "RealFileAccess",
    "Result",
    "SafeFaoError",
    "SafeFileAccess",
    "safe_fao",
]
