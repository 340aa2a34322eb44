"""Configuration for LocaleData.

Provides a single frozen dataclass that encapsulates every option of a
LocaleData instance, validated once at construction.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from localeloom.codecs import get_codec
from localeloom.constants import DEFAULT_EXTENSIONS, MANIFEST_FILE_NAME
from localeloom.errors import ConfigurationError

__all__ = ["LocaleDataConfig"]


@dataclass(frozen=True, slots=True)
class LocaleDataConfig:
    """Immutable configuration for LocaleData.

    All fields have sensible defaults; constructing ``LocaleDataConfig()``
    with no arguments produces a usable asynchronous configuration.

    Attributes:
        sync: Operate synchronously by default (default: False). Only honored
            when the loader supports synchronous operation.
        use_cache: Read and write the shared caches (default: True). When
            False every call probes the loader again; this trades speed for
            memory on small devices.
        extensions: File extensions probed for each (root, level), in order.
            The first extension with content wins. Each must have a codec.
        manifest_name: File name of the optional per-root manifest.
        concat_arrays: Concatenate lists when merging levels instead of
            letting the more specific list replace the inherited one
            (default: False).

    Example:
        >>> config = LocaleDataConfig(sync=True, extensions=(".json",))
        >>> locale_data = LocaleData("./locale", config=config)
    """

    sync: bool = False
    use_cache: bool = True
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    manifest_name: str = MANIFEST_FILE_NAME
    concat_arrays: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If extensions is empty or names an extension
                without a codec, or if manifest_name is empty.
        """
        if isinstance(self.extensions, str) or not self.extensions:
            msg = "extensions must be a non-empty tuple of file extensions"
            raise ConfigurationError(msg)
        for extension in self.extensions:
            if get_codec(extension) is None:
                msg = f"No decoder registered for extension {extension!r}"
                raise ConfigurationError(msg)
        if not self.manifest_name or not isinstance(self.manifest_name, str):
            msg = "manifest_name must be a non-empty string"
            raise ConfigurationError(msg)
        object.__setattr__(self, "extensions", tuple(self.extensions))
