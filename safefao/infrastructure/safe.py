"""
SAFEFAO - Safe File Access

Wraps a FileAccessObject so that raised exceptions come back as
tagged error results instead of propagating to the caller.
"""

from typing import Optional

from safefao.config.settings import AppConfig
from safefao.core.errors import ExistsError, ReadFileError
from safefao.core.types import Err, Ok, Result
from .filesystem import FileAccessObject


class SafeFileAccess:
    """
    Exception-free view of a FileAccessObject.

    Every operation returns Ok with the capability's value unchanged, or
    Err with a tagged error whose ``cause`` is the exception that was
    raised. Only Exception subclasses are captured, so cancellation of
    the async operations propagates as usual.
    """

    def __init__(self, fao: FileAccessObject, default_encoding: str = "utf-8"):
        self._fao = fao
        self._default_encoding = default_encoding

    @property
    def default_encoding(self) -> str:
        return self._default_encoding

    def _encoding(self, encoding: Optional[str]) -> str:
        return self._default_encoding if encoding is None else encoding

    def exists_sync(self, path: str) -> Result[bool, ExistsError]:
        try:
            return Ok(self._fao.exists_sync(path))
        except Exception as e:
            return Err(ExistsError(e))

    async def exists(self, path: str) -> Result[bool, ExistsError]:
        try:
            return Ok(await self._fao.exists(path))
        except Exception as e:
            return Err(ExistsError(e))

    async def read_file(
        self, path: str, encoding: Optional[str] = None
    ) -> Result[str, ReadFileError]:
        """
        Read a file without blocking the event loop.

        Args:
            path: File to read
            encoding: Text encoding, defaults to the adapter's default

        Returns:
            Ok with the file contents, or Err(ReadFileError)
        """
        try:
            return Ok(await self._fao.read_file(path, self._encoding(encoding)))
        except Exception as e:
            return Err(ReadFileError(e))

    def read_file_sync(
        self, path: str, encoding: Optional[str] = None
    ) -> Result[str, ReadFileError]:
        try:
            return Ok(self._fao.read_file_sync(path, self._encoding(encoding)))
        except Exception as e:
            return Err(ReadFileError(e))


def safe_fao(fao: FileAccessObject, config: Optional[AppConfig] = None) -> SafeFileAccess:
    """
    Create a SafeFileAccess for the given file access object.

    Args:
        fao: Capability performing the real file access
        config: Optional configuration supplying the default encoding

    Returns:
        SafeFileAccess instance
    """
    config = config or AppConfig()
    return SafeFileAccess(fao, default_encoding=config.default_encoding)
