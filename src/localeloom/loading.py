"""Loader infrastructure for locale data files.

A loader fetches raw file content by path, synchronously and/or
asynchronously. It knows nothing about locales, roots or merging: the
orchestrator decides which paths to ask for, the loader only answers "here
is the content" or "no content" (None).

Components:
    Loader - Base class; implements batch loading on top of load_file()
    FileLoader - Filesystem loader
    MemoryLoader - Mapping-backed loader for embedded data and tests

Error Policy:
    Batch loads never fail as a whole. A path that is missing or whose load
    raises yields None at its index, and the failure is logged at debug
    level. Only the refusal of a synchronous batch by a loader without
    synchronous support escapes.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import posixpath
from collections.abc import Mapping, Sequence
from pathlib import Path

from localeloom.errors import LoaderUnavailableError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base class
    "Loader",
    # Concrete loaders
    "FileLoader",
    "MemoryLoader",
]

logger = logging.getLogger(__name__)

type FileContent = str | bytes | object


class Loader:
    """Base class for locale data loaders.

    Subclasses implement load_file() and, when they cannot block, override
    supports_sync() to return False and load_file_async() to fetch without
    calling load_file(). Batch methods are provided here and preserve index
    alignment with their input.

    Example:
        >>> class HttpLoader(Loader):
        ...     def supports_sync(self) -> bool:
        ...         return False
        ...     async def load_file_async(self, path: str) -> str | None:
        ...         return await fetch_text(f"https://cdn.example.com/{path}")
    """

    def supports_sync(self) -> bool:
        """Return True if load_file() may be called."""
        return True

    def load_file(self, path: str) -> FileContent | None:
        """Load one file synchronously.

        Args:
            path: File path or URI

        Returns:
            File content, or None if the file does not exist

        Raises:
            LoaderUnavailableError: If synchronous loading is unsupported
            OSError: If the file exists but cannot be read
        """
        raise NotImplementedError

    async def load_file_async(self, path: str) -> FileContent | None:
        """Load one file asynchronously.

        The default implementation runs load_file() in a worker thread.
        """
        return await asyncio.to_thread(self.load_file, path)

    def load_files(self, paths: Sequence[str | None]) -> list[FileContent | None]:
        """Load several files synchronously.

        Args:
            paths: Paths to load; None entries are skipped

        Returns:
            Content per input index; None where the path was None, missing,
            or failed to load

        Raises:
            LoaderUnavailableError: If synchronous loading is unsupported
        """
        if not self.supports_sync():
            msg = f"{type(self).__name__} does not support synchronous loading"
            raise LoaderUnavailableError(msg)

        results: list[FileContent | None] = []
        for path in paths:
            if path is None:
                results.append(None)
                continue
            try:
                results.append(self.load_file(path))
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.debug("Failed to load %s: %s", self.describe_path(path), e)
                results.append(None)
        return results

    async def load_files_async(
        self, paths: Sequence[str | None]
    ) -> list[FileContent | None]:
        """Load several files concurrently.

        Results are returned in input order regardless of completion order.

        Args:
            paths: Paths to load; None entries are skipped

        Returns:
            Content per input index; None where the path was None, missing,
            or failed to load
        """

        async def skip() -> None:
            return None

        outcomes = await asyncio.gather(
            *(self.load_file_async(path) if path is not None else skip() for path in paths),
            return_exceptions=True,
        )

        results: list[FileContent | None] = []
        for path, outcome in zip(paths, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.debug("Failed to load %s: %s", self.describe_path(path or ""), outcome)
                results.append(None)
            else:
                results.append(outcome)
        return results

    def is_reachable(self, root: str) -> bool:
        """Return True if the root can be read at all.

        The default assumes every root is reachable.
        """
        return True

    def describe_path(self, path: str) -> str:
        """Return human-readable path for diagnostics."""
        return path


class FileLoader(Loader):
    """Filesystem loader.

    Returns file content as bytes; decoding is left to the codecs.

    Example:
        >>> loader = FileLoader()
        >>> loader.load_file("locale/en/localeinfo.json")
        b'{"clock": "12"}'

    Attributes:
        sync: Whether synchronous loading is offered (default: True)
    """

    __slots__ = ("_sync",)

    def __init__(self, *, sync: bool = True) -> None:
        """Initialize filesystem loader.

        Args:
            sync: Offer synchronous loading. Pass False to emulate a loader
                for a platform where blocking I/O is not allowed.
        """
        self._sync = sync

    def supports_sync(self) -> bool:
        """Return True if load_file() may be called."""
        return self._sync

    @staticmethod
    def _read(path: str) -> bytes | None:
        try:
            return Path(path).read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            return None

    def load_file(self, path: str) -> bytes | None:
        """Read a file from disk.

        Raises:
            LoaderUnavailableError: If constructed with sync=False
            OSError: If the file exists but cannot be read
        """
        if not self._sync:
            msg = "FileLoader was created without synchronous support"
            raise LoaderUnavailableError(msg)
        return self._read(path)

    async def load_file_async(self, path: str) -> bytes | None:
        """Read a file from disk in a worker thread."""
        return await asyncio.to_thread(self._read, path)

    def is_reachable(self, root: str) -> bool:
        """Return True if the root is an existing directory."""
        return Path(root).is_dir()

    def describe_path(self, path: str) -> str:
        """Return the absolute path for diagnostics."""
        return str(Path(path).absolute())


def _normalize(path: str) -> str:
    return posixpath.normpath(path.replace("\\", "/"))


class MemoryLoader(Loader):
    """Loader serving files from a mapping of path to content.

    Content may be text, bytes, or already-decoded data (a mapping or a
    callable producing one). Useful for data embedded in an application and
    for tests.

    Example:
        >>> loader = MemoryLoader({"locale/localeinfo.json": '{"clock": "24"}'})
        >>> loader.load_file("./locale/localeinfo.json")
        '{"clock": "24"}'
    """

    __slots__ = ("_files", "_sync")

    def __init__(
        self,
        files: Mapping[str, FileContent] | None = None,
        *,
        sync: bool = True,
    ) -> None:
        """Initialize memory loader.

        Args:
            files: Initial content keyed by path
            sync: Offer synchronous loading (default: True)
        """
        self._files: dict[str, FileContent] = {}
        self._sync = sync
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_file(self, path: str, content: FileContent) -> None:
        """Add or replace a file."""
        self._files[_normalize(path)] = content

    def remove_file(self, path: str) -> None:
        """Remove a file. No-op if absent."""
        self._files.pop(_normalize(path), None)

    def set_sync_support(self, value: bool) -> None:
        """Toggle synchronous support at run time."""
        self._sync = value

    def supports_sync(self) -> bool:
        """Return True if load_file() may be called."""
        return self._sync

    def load_file(self, path: str) -> FileContent | None:
        """Look up a file.

        Raises:
            LoaderUnavailableError: If synchronous support is switched off
        """
        if not self._sync:
            msg = "MemoryLoader synchronous support is switched off"
            raise LoaderUnavailableError(msg)
        return self._files.get(_normalize(path))

    async def load_file_async(self, path: str) -> FileContent | None:
        """Look up a file."""
        return self._files.get(_normalize(path))

    def is_reachable(self, root: str) -> bool:
        """Return True if any file lives under the root."""
        prefix = _normalize(root)
        if prefix == ".":
            return bool(self._files)
        return any(
            key == prefix or key.startswith(prefix.rstrip("/") + "/") for key in self._files
        )

    def __len__(self) -> int:
        return len(self._files)
