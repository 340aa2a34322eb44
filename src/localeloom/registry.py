"""Process-wide list of locale data roots.

A root is a path prefix under which locale data files are organized. The
global root list is shared by every LocaleData instance; each instance also
has a private root, which always has the lowest precedence.

Most recently added roots take precedence: adding a root prepends it. This
lets an application override data shipped with a package simply by
registering its own directory at startup.

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import TypeIs

__all__ = [
    "RootRegistry",
    "add_global_root",
    "clear_global_roots",
    "get_global_roots",
    "get_root_registry",
    "remove_global_root",
]

logger = logging.getLogger(__name__)


def _is_valid_root(root: object) -> TypeIs[str]:
    return isinstance(root, str) and bool(root)


class RootRegistry:
    """Ordered, de-duplicated list of search roots, highest precedence first.

    Thread-safe. Invalid roots (non-strings, None, empty strings) passed to
    add() or remove() are ignored without raising.

    Example:
        >>> registry = RootRegistry()
        >>> registry.add("/usr/share/locale-data")
        >>> registry.add("/opt/app/locale")
        >>> registry.roots
        ('/opt/app/locale', '/usr/share/locale-data')
    """

    __slots__ = ("_lock", "_roots")

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._lock = RLock()
        self._roots: list[str] = []

    @property
    def roots(self) -> tuple[str, ...]:
        """Snapshot of the roots, highest precedence first."""
        with self._lock:
            return tuple(self._roots)

    def add(self, root: object) -> None:
        """Add a root at the highest precedence.

        No-op if the root is already registered or is not a non-empty string.
        """
        if not _is_valid_root(root):
            return
        with self._lock:
            if root in self._roots:
                return
            self._roots.insert(0, root)
        logger.debug("Added global root %r", root)

    def remove(self, root: object) -> None:
        """Remove a root. No-op if it is not registered or invalid."""
        if not _is_valid_root(root):
            return
        with self._lock:
            if root not in self._roots:
                return
            self._roots.remove(root)
        logger.debug("Removed global root %r", root)

    def clear(self) -> None:
        """Remove all roots."""
        with self._lock:
            self._roots.clear()

    def reset(self) -> None:
        """Return to the process-start state (no roots)."""
        self.clear()

    def __contains__(self, root: object) -> bool:
        with self._lock:
            return root in self._roots

    def __len__(self) -> int:
        with self._lock:
            return len(self._roots)

    def __repr__(self) -> str:
        return f"RootRegistry(roots={self.roots!r})"


_default_registry = RootRegistry()


def get_root_registry() -> RootRegistry:
    """Get the process-wide root registry."""
    return _default_registry


def add_global_root(root: object) -> None:
    """Add a root to the process-wide registry at the highest precedence."""
    _default_registry.add(root)


def remove_global_root(root: object) -> None:
    """Remove a root from the process-wide registry."""
    _default_registry.remove(root)


def clear_global_roots() -> None:
    """Remove every root from the process-wide registry."""
    _default_registry.clear()


def get_global_roots() -> tuple[str, ...]:
    """Get the process-wide roots, highest precedence first."""
    return _default_registry.roots
