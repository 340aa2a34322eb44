"""LocaleLoom exception hierarchy.

Only call-level problems surface as exceptions. A missing file, an
unreadable file or an undecodable file is absorbed at the loader boundary
and treated as "no data"; an unreachable root during prefetch is reported
through a boolean result.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DepthLimitExceededError",
    "LoaderUnavailableError",
    "LocaleDataError",
]


class LocaleDataError(Exception):
    """Base exception for all LocaleLoom errors."""


class ConfigurationError(LocaleDataError, ValueError):
    """Invalid arguments supplied by the caller.

    Examples:
    - LocaleData constructed without a private root path
    - Locale tag that cannot be parsed
    - Basename containing path traversal sequences
    - most_specific combined with cross_roots
    """


class LoaderUnavailableError(LocaleDataError, RuntimeError):
    """Synchronous load requested from a loader that cannot do it.

    Raised only when the data needed to answer the request is not already
    cached. Asynchronous loads never raise this error.
    """


class DecodeError(LocaleDataError, ValueError):
    """File content could not be turned into locale data.

    Attributes:
        path: Path of the file that failed to decode
    """

    def __init__(self, message: str, path: str) -> None:
        """Initialize DecodeError.

        Args:
            message: Human-readable description of the failure
            path: Path of the offending file
        """
        super().__init__(message)
        self.path = path


class DepthLimitExceededError(LocaleDataError):
    """Locale data nests deeper than the merge engine will walk.

    This error indicates either:
    - Malformed or adversarial data files
    - Self-referencing structures built programmatically
    """
