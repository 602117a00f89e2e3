"""Exception types and error processing for Punycode operations.

This module defines the error taxonomy raised by the Bootstring codec and a helper
used by the MCP tool layer to turn raised errors into user-friendly messages.

The module serves three main purposes:
1. Define the three terminal codec error kinds and their fixed messages
2. Provide a single raising helper so every failure site reports the same text
3. Map codec errors and dnspython name errors to human-readable messages

Note: Codec errors are never caught inside the codec, the domain mapper or the
domain-facing API. Only the tool layer converts them into failed tool results.
"""

from enum import Enum
from typing import NoReturn

import dns.exception
import dns.name


class ErrorKind(str, Enum):
    """The three ways a Bootstring conversion can fail."""

    OVERFLOW = "overflow"
    NOT_BASIC = "not-basic"
    INVALID_INPUT = "invalid-input"


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.OVERFLOW: "Overflow: input needs wider integers to process",
    ErrorKind.NOT_BASIC: "Illegal input >= 0x80 (not a basic code point)",
    ErrorKind.INVALID_INPUT: "Invalid input",
}


class PunycodeError(ValueError):
    """Base exception for Bootstring encoding and decoding errors."""

    kind: ErrorKind | None = None

    def __init__(self, *args: object) -> None:
        # Subclasses default to the fixed message of their kind.
        if not args and self.kind is not None:
            args = (ERROR_MESSAGES[self.kind],)
        super().__init__(*args)


class BootstringOverflowError(PunycodeError):
    """Arithmetic would exceed the maximum representable integer."""

    kind = ErrorKind.OVERFLOW


class NotBasicError(PunycodeError):
    """A code point before the last delimiter is not a basic code point."""

    kind = ErrorKind.NOT_BASIC


class InvalidInputError(PunycodeError):
    """Malformed or truncated generalized variable-length integer."""

    kind = ErrorKind.INVALID_INPUT


_ERROR_CLASSES: dict[ErrorKind, type[PunycodeError]] = {
    ErrorKind.OVERFLOW: BootstringOverflowError,
    ErrorKind.NOT_BASIC: NotBasicError,
    ErrorKind.INVALID_INPUT: InvalidInputError,
}


def error(kind: ErrorKind) -> NoReturn:
    """Raise the exception matching the given error kind."""
    raise _ERROR_CLASSES[kind]()


def handle_codec_error(e: Exception) -> str:
    """Convert codec and DNS name exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(e)}"
    if isinstance(e, PunycodeError) and e.kind is not None:
        return ERROR_MESSAGES[e.kind]
    if isinstance(e, dns.name.LabelTooLong):
        err_str = "Domain name label too long"
    elif isinstance(e, dns.name.NameTooLong):
        err_str = "Domain name too long"
    elif isinstance(e, dns.name.EmptyLabel):
        err_str = "Domain name contains an empty label"
    elif isinstance(e, dns.exception.DNSException):
        err_str = f"DNS error: {str(e)}"
    return err_str
