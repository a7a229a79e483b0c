"""
SAFEFAO - Filesystem Abstraction

Provides the file access capability wrapped by the safe adapter.
This allows mocking in tests and makes the code more testable.
"""

import logging
import os
from typing import Protocol

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


class FileAccessObject(Protocol):
    """Protocol for the file access operations the safe adapter wraps."""

    def exists_sync(self, path: str) -> bool:
        """Check if a file exists."""
        ...

    async def exists(self, path: str) -> bool:
        """Check if a file exists without blocking the event loop."""
        ...

    async def read_file(self, path: str, encoding: str) -> str:
        """Read file contents as string without blocking the event loop."""
        ...

    def read_file_sync(self, path: str, encoding: str) -> str:
        """Read file contents as string."""
        ...


class RealFileAccess:
    """Real filesystem implementation."""

    def exists_sync(self, path: str) -> bool:
        logger.debug(f"exists_sync: {path}")
        return os.path.exists(path)

    async def exists(self, path: str) -> bool:
        logger.debug(f"exists: {path}")
        return await aiofiles.os.path.exists(path)

    async def read_file(self, path: str, encoding: str) -> str:
        logger.debug(f"read_file: {path} ({encoding})")
        async with aiofiles.open(path, "r", encoding=encoding) as f:
            return await f.read()

    def read_file_sync(self, path: str, encoding: str) -> str:
        logger.debug(f"read_file_sync: {path} ({encoding})")
        with open(path, "r", encoding=encoding) as f:
            return f.read()


class MockFileAccess:
    """Mock file access for testing."""

    def __init__(self):
        self._files: dict[str, str] = {}

    def exists_sync(self, path: str) -> bool:
        return path in self._files

    async def exists(self, path: str) -> bool:
        return path in self._files

    async def read_file(self, path: str, encoding: str) -> str:
        return self.read_file_sync(path, encoding)

    def read_file_sync(self, path: str, encoding: str) -> str:
        if path not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        return self._files[path]

    def write(self, path: str, content: str) -> None:
        self._files[path] = content

    def delete(self, path: str) -> None:
        if path in self._files:
            del self._files[path]
