"""
Operation Options

One options type per operation family, replacing loosely typed
"options or encoding string or callback" arguments. Encodings are
checked when the options are built, so a bad encoding fails at the call
site instead of inside a completion.

Author: memfs contributors
Version: 1.0.0
"""

import base64
import binascii
import codecs
from dataclasses import dataclass
from typing import Optional, Union


Data = Union[str, bytes, bytearray, memoryview]

# Encodings handled here rather than by the codecs registry.
BINARY_TEXT_ENCODINGS = ('hex', 'base64')


def check_encoding(encoding: str) -> str:
    """
    Validate an encoding name.

    Raises:
        ValueError: If the encoding is unknown
    """
    if encoding in BINARY_TEXT_ENCODINGS:
        return encoding
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError):
        raise ValueError(f"Unknown encoding: {encoding!r}") from None
    return encoding


def encode_data(data: Data, encoding: str) -> bytes:
    """Turn caller data into the bytes stored in a file."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if not isinstance(data, str):
        raise TypeError(f"data must be str or bytes-like, not {type(data).__name__}")
    if encoding == 'hex':
        try:
            return bytes.fromhex(data)
        except ValueError as e:
            raise ValueError(f"Invalid hex data: {e}") from None
    if encoding == 'base64':
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 data: {e}") from None
    return data.encode(encoding)


def decode_content(content: bytes, encoding: Optional[str]) -> Union[str, bytes]:
    """Render stored bytes for a reader; None keeps them binary."""
    if encoding is None:
        return bytes(content)
    if encoding == 'hex':
        return content.hex()
    if encoding == 'base64':
        return base64.b64encode(content).decode('ascii')
    return content.decode(encoding)


@dataclass(frozen=True)
class ReadOptions:
    """Options for read_file. ``encoding=None`` returns bytes."""
    encoding: Optional[str] = None

    def __post_init__(self) -> None:
        if self.encoding is not None:
            check_encoding(self.encoding)


@dataclass(frozen=True)
class WriteOptions:
    """Options for write_file and append_file; encodes str data."""
    encoding: str = 'utf-8'

    def __post_init__(self) -> None:
        check_encoding(self.encoding)


@dataclass(frozen=True)
class MakeDirectoryOptions:
    """Options for make_directory."""
    recursive: bool = False


@dataclass(frozen=True)
class RemoveDirectoryOptions:
    """Options for remove_directory."""
    recursive: bool = False
