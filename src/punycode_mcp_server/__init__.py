"""Punycode (RFC 3492) codec and IDN conversion, with an MCP server front end."""

from .exceptions import (
    BootstringOverflowError,
    ErrorKind,
    InvalidInputError,
    NotBasicError,
    PunycodeError,
)
from .punycode import decode, encode, to_ascii, to_unicode
from .server import PunycodeMCPServer, run_server
from .ucs2 import ucs2_decode, ucs2_encode

__version__ = "0.1.0"

__all__ = [
    "BootstringOverflowError",
    "ErrorKind",
    "InvalidInputError",
    "NotBasicError",
    "PunycodeError",
    "PunycodeMCPServer",
    "decode",
    "encode",
    "run_server",
    "to_ascii",
    "to_unicode",
    "ucs2_decode",
    "ucs2_encode",
]
