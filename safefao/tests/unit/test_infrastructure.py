"""
Unit tests for infrastructure components.
"""

import asyncio

import pytest
from safefao.infrastructure.filesystem import MockFileAccess, RealFileAccess


class TestMockFileAccess:
    """Tests for MockFileAccess."""

    def test_exists_returns_false_for_nonexistent_file(self):
        fao = MockFileAccess()
        assert fao.exists_sync("/nonexistent.txt") is False
        assert asyncio.run(fao.exists("/nonexistent.txt")) is False

    def test_write_and_read(self):
        fao = MockFileAccess()
        fao.write("/test.txt", "Hello, World!")
        assert fao.read_file_sync("/test.txt", "utf-8") == "Hello, World!"
        assert asyncio.run(fao.read_file("/test.txt", "utf-8")) == "Hello, World!"

    def test_exists_returns_true_after_write(self):
        fao = MockFileAccess()
        fao.write("/test.txt", "content")
        assert fao.exists_sync("/test.txt") is True

    def test_delete(self):
        fao = MockFileAccess()
        fao.write("/test.txt", "content")
        fao.delete("/test.txt")
        assert fao.exists_sync("/test.txt") is False

    def test_read_nonexistent_raises_error(self):
        fao = MockFileAccess()
        with pytest.raises(FileNotFoundError):
            fao.read_file_sync("/nonexistent.txt", "utf-8")


class TestRealFileAccess:
    """Tests for RealFileAccess."""

    def test_exists(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("x")
        fao = RealFileAccess()

        assert fao.exists_sync(str(path)) is True
        assert asyncio.run(fao.exists(str(path))) is True
        assert fao.exists_sync(str(tmp_path / "b.txt")) is False
        assert asyncio.run(fao.exists(str(tmp_path / "b.txt"))) is False

    def test_read_respects_encoding(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("café".encode("latin-1"))
        fao = RealFileAccess()

        assert fao.read_file_sync(str(path), "latin-1") == "café"
        assert asyncio.run(fao.read_file(str(path), "latin-1")) == "café"

    def test_read_nonexistent_raises_error(self, tmp_path):
        fao = RealFileAccess()
        with pytest.raises(FileNotFoundError):
            fao.read_file_sync(str(tmp_path / "missing.txt"), "utf-8")
        with pytest.raises(FileNotFoundError):
            asyncio.run(fao.read_file(str(tmp_path / "missing.txt"), "utf-8"))
