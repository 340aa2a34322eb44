"""Tests for LocaleDataConfig validation."""

import dataclasses

import pytest

from localeloom.config import LocaleDataConfig
from localeloom.constants import DEFAULT_EXTENSIONS, MANIFEST_FILE_NAME
from localeloom.errors import ConfigurationError


class TestLocaleDataConfig:
    """Construction and validation."""

    def test_defaults(self) -> None:
        """Defaults are asynchronous, cached, all extensions."""
        config = LocaleDataConfig()
        assert config.sync is False
        assert config.use_cache is True
        assert config.extensions == DEFAULT_EXTENSIONS
        assert config.manifest_name == MANIFEST_FILE_NAME
        assert config.concat_arrays is False

    def test_frozen(self) -> None:
        """Configurations are immutable."""
        config = LocaleDataConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.sync = True  # type: ignore[misc]

    def test_extensions_coerced_to_tuple(self) -> None:
        """A list of extensions is stored as a tuple."""
        config = LocaleDataConfig(extensions=[".yaml", ".json"])  # type: ignore[arg-type]
        assert config.extensions == (".yaml", ".json")

    @pytest.mark.parametrize("extensions", [(), ".json", (".toml",), ("json",)])
    def test_invalid_extensions(self, extensions: object) -> None:
        """Empty, bare-string and unregistered extensions are rejected."""
        with pytest.raises(ConfigurationError):
            LocaleDataConfig(extensions=extensions)  # type: ignore[arg-type]

    def test_empty_manifest_name(self) -> None:
        """An empty manifest name is rejected."""
        with pytest.raises(ConfigurationError):
            LocaleDataConfig(manifest_name="")
