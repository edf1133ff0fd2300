"""File system operations implementation."""

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

from .errors import FileOperationError

logger = logging.getLogger(__name__)


def normalize_path(path: str, base_dir: Optional[str] = None) -> Path:
    """Resolve a path to absolute form, relative paths against base_dir."""
    expanded = Path(path)
    if not expanded.is_absolute():
        expanded = Path(base_dir or os.getcwd()) / expanded
    return expanded.resolve()


def _read_text(path: Path) -> str:
    # Undecodable bytes become U+FFFD; line endings are left as written
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


class FileSystem:
    """Async file access rooted at a base directory.

    Every failure is raised as FileOperationError carrying the resolved path.
    Blocking calls run in a worker thread.
    """

    def __init__(self, base_dir: Optional[str] = None) -> None:
        self.base_dir = str(normalize_path(base_dir or os.getcwd()))
        if not os.path.isdir(self.base_dir):
            raise ValueError(f"Valid, existing base directory is required, got: {self.base_dir}")
        logger.info("FileSystem initialized. Base directory: %s", self.base_dir)

    def resolve(self, path: str) -> Path:
        return normalize_path(path, self.base_dir)

    async def read_file(self, path: str) -> str:
        """Read the complete contents of a file."""
        full_path = self.resolve(path)
        try:
            return await asyncio.to_thread(_read_text, full_path)
        except OSError as e:
            logger.warning("Failed to read %s: %s", full_path, e)
            raise FileOperationError(str(full_path), f"Failed to read file {full_path}: {e}") from e

    async def write_file(self, path: str, content: str) -> Path:
        """Create a new file or overwrite an existing file. The parent must exist."""
        full_path = self.resolve(path)
        try:
            await asyncio.to_thread(_write_text, full_path, content)
        except OSError as e:
            logger.warning("Failed to write %s: %s", full_path, e)
            raise FileOperationError(str(full_path), f"Failed to write file {full_path}: {e}") from e
        return full_path

    async def list_directory(self, path: str) -> List[str]:
        """Names of the immediate entries of a directory, sorted."""
        full_path = self.resolve(path)
        try:
            names = await asyncio.to_thread(os.listdir, full_path)
        except NotADirectoryError as e:
            raise FileOperationError(str(full_path), f"Path is not a directory: {full_path}") from e
        except OSError as e:
            logger.warning("Failed to list %s: %s", full_path, e)
            raise FileOperationError(str(full_path), f"Failed to list directory {full_path}: {e}") from e
        return sorted(names)

    async def create_directory(self, path: str) -> Path:
        """Create a directory, including parents if needed."""
        full_path = self.resolve(path)
        try:
            await asyncio.to_thread(full_path.mkdir, parents=True, exist_ok=True)
        except FileExistsError as e:
            raise FileOperationError(str(full_path), f"Path exists but is not a directory: {full_path}") from e
        except OSError as e:
            logger.warning("Failed to create directory %s: %s", full_path, e)
            raise FileOperationError(str(full_path), f"Failed to create directory {full_path}: {e}") from e
        return full_path

    async def search_keyword_in_file(self, path: Path, keyword: str) -> List[str]:
        """Lines containing keyword as `<basename>:<line>: <stripped line>`.

        Unreadable files yield no matches.
        """
        try:
            content = await asyncio.to_thread(_read_text, path)
        except OSError:
            return []

        return [
            f"{path.name}:{index}: {line.strip()}"
            for index, line in enumerate(content.split("\n"), start=1)
            if keyword in line
        ]
