"""Decoding of locale data files.

Every supported file extension is registered once, at import time, with a
decoder that turns raw file content into locale data. The orchestrator picks
the decoder from the extension of the path it loaded; there is no runtime
discovery.

Built-in encodings:
    .json        - structured data (json)
    .yaml, .yml  - structured data (PyYAML safe_load)
    .py          - data module defining get_locale_data() or DATA

Loaders may also hand back content that is already decoded (a mapping, or
a callable producing one), as in-memory loaders do; such content bypasses
the decoders.

Python 3.13+.
"""

from __future__ import annotations

import importlib.machinery
import importlib.util
import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath

import yaml

from localeloom.enums import DataFormat
from localeloom.errors import DecodeError

__all__ = [
    "Codec",
    "decode",
    "decode_value",
    "get_codec",
    "register_codec",
    "registered_extensions",
]

type Decoder = Callable[[str, str], object]


@dataclass(frozen=True, slots=True)
class Codec:
    """Decoder registered for one file extension.

    Attributes:
        extension: File extension including the dot (".json")
        data_format: Encoding family of the extension
        decoder: Callable taking (text, path) and returning decoded data
    """

    extension: str
    data_format: DataFormat
    decoder: Decoder


_CODECS: dict[str, Codec] = {}


def register_codec(extension: str, data_format: DataFormat, decoder: Decoder) -> None:
    """Register (or replace) the decoder for a file extension.

    Args:
        extension: Extension including the leading dot, case-insensitive
        data_format: Encoding family
        decoder: Callable taking (text, path) and returning data

    Raises:
        ValueError: If the extension does not start with a dot
    """
    if not extension.startswith(".") or len(extension) < 2:
        msg = f"Extension must start with '.', got {extension!r}"
        raise ValueError(msg)
    key = extension.lower()
    _CODECS[key] = Codec(extension=key, data_format=data_format, decoder=decoder)


def get_codec(extension: str) -> Codec | None:
    """Get the codec registered for an extension, if any."""
    return _CODECS.get(extension.lower())


def registered_extensions() -> tuple[str, ...]:
    """Extensions with a registered decoder, in registration order."""
    return tuple(_CODECS)


def _as_text(content: str | bytes, path: str) -> str:
    if isinstance(content, str):
        return content.removeprefix("\ufeff")
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        msg = f"Locale data file is not valid UTF-8: {path}"
        raise DecodeError(msg, path) from e


def _decode_json(text: str, path: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {path}: {e}"
        raise DecodeError(msg, path) from e


def _decode_yaml(text: str, path: str) -> object:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise DecodeError(msg, path) from e


class _DataModuleLoader(importlib.machinery.SourceFileLoader):
    """Import loader for data module source already fetched by a Loader.

    Serves the fetched text instead of reading the path, and never reads or
    writes bytecode caches next to locale data.
    """

    def __init__(self, fullname: str, path: str, source: bytes) -> None:
        super().__init__(fullname, path)
        self._source = source

    def get_data(self, path: str) -> bytes:
        return self._source

    def path_stats(self, path: str) -> Mapping[str, object]:
        msg = f"No bytecode caching for data module {path}"
        raise OSError(msg)


def _decode_module(text: str, path: str) -> object:
    name = PurePosixPath(path).stem
    loader = _DataModuleLoader(name, path, text.encode("utf-8"))
    spec = importlib.util.spec_from_file_location(name, path, loader=loader)
    if spec is None:
        msg = f"Could not create module spec for data module {path}"
        raise DecodeError(msg, path)
    module = importlib.util.module_from_spec(spec)
    try:
        loader.exec_module(module)
    except Exception as e:  # pylint: disable=broad-exception-caught
        msg = f"Data module {path} failed to execute: {e}"
        raise DecodeError(msg, path) from e

    provider = getattr(module, "get_locale_data", None)
    if provider is None:
        provider = getattr(module, "DATA", None)
    return _unwrap(provider, path)


def _unwrap(value: object, path: str) -> object:
    """Resolve callables and provider objects to the data they produce."""
    if callable(value):
        try:
            return value()
        except Exception as e:
            msg = f"Locale data provider in {path} raised: {e}"
            raise DecodeError(msg, path) from e
    getter = getattr(value, "get_locale_data", None)
    if callable(getter) and not isinstance(value, Mapping):
        return _unwrap(getter, path)
    return value


def decode_value(content: object, path: str) -> object:
    """Decode loaded file content without checking its shape.

    Used for auxiliary files such as manifests, which may hold lists.

    Raises:
        DecodeError: If the content is malformed or the extension has no codec
    """
    if content is None:
        return None
    if isinstance(content, str | bytes):
        extension = PurePosixPath(path).suffix
        codec = get_codec(extension)
        if codec is None:
            msg = f"No decoder registered for extension {extension!r}: {path}"
            raise DecodeError(msg, path)
        return codec.decoder(_as_text(content, path), path)
    return _unwrap(content, path)


def decode(content: object, path: str) -> dict[str, object] | None:
    """Turn loaded file content into locale data.

    Args:
        content: What the loader returned (text, bytes, or decoded data)
        path: Path the content was loaded from; its extension selects the codec

    Returns:
        Decoded mapping, or None if the content holds no data

    Raises:
        DecodeError: If the content is malformed, the extension has no codec,
            or the decoded value is not a mapping
    """
    match decode_value(content, path):
        case None:
            return None
        case Mapping() as data:
            return dict(data)
        case other:
            msg = f"Locale data must be a mapping, got {type(other).__name__}: {path}"
            raise DecodeError(msg, path)


register_codec(".json", DataFormat.JSON, _decode_json)
register_codec(".yaml", DataFormat.YAML, _decode_yaml)
register_codec(".yml", DataFormat.YAML, _decode_yaml)
register_codec(".py", DataFormat.MODULE, _decode_module)
