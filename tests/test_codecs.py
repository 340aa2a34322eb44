"""Tests for locale data decoding."""

from pathlib import Path

import pytest

from localeloom.codecs import decode, decode_value, get_codec, register_codec, registered_extensions
from localeloom.enums import DataFormat
from localeloom.errors import DecodeError


class TestRegistry:
    """Codec registration."""

    def test_builtin_extensions(self) -> None:
        """JSON, YAML and data modules are registered."""
        assert {".json", ".yaml", ".yml", ".py"} <= set(registered_extensions())
        codec = get_codec(".JSON")
        assert codec is not None
        assert codec.data_format is DataFormat.JSON

    def test_unknown_extension(self) -> None:
        """Unknown extensions have no codec."""
        assert get_codec(".toml") is None

    def test_extension_needs_dot(self) -> None:
        """Extensions are registered with their leading dot."""
        with pytest.raises(ValueError, match="must start with"):
            register_codec("json", DataFormat.JSON, lambda text, path: text)


class TestDecode:
    """decode() per encoding."""

    def test_json_text(self) -> None:
        """JSON text decodes to a dict."""
        assert decode('{"a": "b"}', "locale/info.json") == {"a": "b"}

    def test_json_bytes_with_bom(self) -> None:
        """UTF-8 bytes with a byte order mark decode."""
        content = "\ufeff{\"a\": \"ü\"}".encode()
        assert decode(content, "locale/info.json") == {"a": "ü"}

    def test_yaml(self) -> None:
        """YAML decodes with safe_load."""
        assert decode("a: b\nc:\n  d: 1\n", "locale/info.yaml") == {"a": "b", "c": {"d": 1}}

    def test_data_module_function(self) -> None:
        """A data module's get_locale_data() provides the data."""
        source = "def get_locale_data():\n    return {'a': 'b'}\n"
        assert decode(source, "locale/info.py") == {"a": "b"}

    def test_data_module_constant(self) -> None:
        """A data module's DATA constant provides the data."""
        assert decode("DATA = {'a': 1}\n", "locale/info.py") == {"a": 1}

    def test_data_module_without_data(self) -> None:
        """A data module defining neither yields None."""
        assert decode("X = 1\n", "locale/info.py") is None

    def test_data_module_error(self) -> None:
        """A failing data module raises DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode("raise RuntimeError('boom')\n", "locale/info.py")
        assert exc_info.value.path == "locale/info.py"

    def test_decoded_content_passes_through(self) -> None:
        """Mappings and callables from in-memory loaders bypass decoders."""
        assert decode({"a": 1}, "locale/info.json") == {"a": 1}
        assert decode(lambda: {"a": 2}, "locale/info.json") == {"a": 2}

    def test_none(self) -> None:
        """No content decodes to None."""
        assert decode(None, "locale/info.json") is None

    def test_empty_yaml_is_none(self) -> None:
        """An empty YAML document holds no data."""
        assert decode("", "locale/info.yaml") is None

    @pytest.mark.parametrize(
        ("content", "path"),
        [
            ("{not json", "locale/info.json"),
            ("a: [unclosed", "locale/info.yaml"),
            ("[1, 2]", "locale/info.json"),
            ("{}", "locale/info.toml"),
            (b"\xff\xfe\x00", "locale/info.json"),
        ],
    )
    def test_invalid_content(self, content: str | bytes, path: str) -> None:
        """Malformed, non-mapping or unregistered content raises DecodeError."""
        with pytest.raises(DecodeError):
            decode(content, path)


class TestDecodeValue:
    """decode_value() keeps non-mapping shapes."""

    def test_list(self) -> None:
        """Lists are returned as decoded."""
        assert decode_value('["en/info.json"]', "locale/localemanifest.json") == [
            "en/info.json"
        ]


class TestDataModules:
    """Data modules are built through the import machinery."""

    def test_fetched_source_is_used(self, tmp_path: Path) -> None:
        """The loaded content is compiled, not whatever the path holds on disk."""
        path = tmp_path / "info.py"
        path.write_text("DATA = {'a': 'disk'}\n", encoding="utf-8")

        assert decode(b"DATA = {'a': 'fetched'}\n", str(path)) == {"a": "fetched"}

    def test_no_bytecode_written(self, tmp_path: Path) -> None:
        """Decoding never leaves a __pycache__ beside locale data."""
        path = tmp_path / "info.py"
        path.write_text("DATA = {'a': 1}\n", encoding="utf-8")

        assert decode(path.read_bytes(), str(path)) == {"a": 1}
        assert not (tmp_path / "__pycache__").exists()

    def test_module_attributes(self) -> None:
        """The module knows its origin, so providers can report it."""
        source = "def get_locale_data():\n    return {'file': __file__.endswith('info.py')}\n"
        assert decode(source, "locale/en/info.py") == {"file": True}

    def test_syntax_error(self) -> None:
        """A data module that does not compile raises DecodeError."""
        with pytest.raises(DecodeError):
            decode("DATA = {\n", "locale/info.py")
