"""Punycode (RFC 3492) transcoding and IDNA-style domain name conversion.

This module implements the Bootstring algorithm instantiated with the Punycode
parameters, plus the label-wise `to_ascii`/`to_unicode` wrappers used to move
internationalized domain names and email addresses to and from their `xn--`
ASCII-compatible form.

Only the mechanical transform is performed: there is no nameprep, no NFC
normalization and no STD3 or bidi validation. All functions are pure; errors are
raised as subclasses of `PunycodeError` and never caught here.
"""

import re

from .domain import map_domain
from .exceptions import ErrorKind, error
from .typedefs import RFC3492
from .ucs2 import code_points_to_text, ucs2_decode

# Highest value of a signed 32-bit integer; no codec state may exceed it.
MAX_INT = 0x7FFFFFFF

BASE = RFC3492.base
TMIN = RFC3492.tmin
TMAX = RFC3492.tmax
SKEW = RFC3492.skew
DAMP = RFC3492.damp
INITIAL_BIAS = RFC3492.initial_bias
INITIAL_N = RFC3492.initial_n
DELIMITER = RFC3492.delimiter

MAX_CODE_POINT = 0x10FFFF
PUNYCODE_PREFIX = "xn--"

# U+007F DEL counts as ASCII.
_NON_ASCII_RE = re.compile(r"[^\x00-\x7f]")


def basic_to_digit(code_point: int) -> int:
    """Return the digit value of a basic code point.

    Args:
        code_point (int): The basic code point.

    Returns:
        int: A value in the range `0` to `BASE - 1`, or `BASE` when the code point
        does not represent a digit.
    """
    if 0x30 <= code_point < 0x3A:
        return 26 + (code_point - 0x30)
    if 0x41 <= code_point < 0x5B:
        return code_point - 0x41
    if 0x61 <= code_point < 0x7B:
        return code_point - 0x61
    return BASE


def digit_to_basic(digit: int, uppercase: bool = False) -> int:
    """Return the basic code point whose digit value is `digit`.

    0..25 map to a..z (or A..Z when `uppercase` is set) and 26..35 map to 0..9.
    The result is undefined if `uppercase` is set and `digit` has no uppercase
    form.
    """
    return digit + 22 + 75 * (digit < 26) - (uppercase << 5)


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """Bias adaptation function as per section 3.4 of RFC 3492."""
    k = 0
    delta = delta // DAMP if first_time else delta >> 1
    delta += delta // num_points
    while delta > ((BASE - TMIN) * TMAX) >> 1:
        delta //= BASE - TMIN
        k += BASE
    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)


def _threshold(k: int, bias: int) -> int:
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def decode(text: str) -> str:
    """Convert a Punycode string of ASCII-only symbols to a string of Unicode symbols.

    Args:
        text (str): The Punycode string, without any `xn--` prefix.

    Returns:
        str: The decoded string.

    Raises:
        NotBasicError: A code point before the last delimiter is not basic.
        InvalidInputError: A digit is malformed or the input ends mid-integer.
        BootstringOverflowError: A value exceeds the 32-bit signed range.
    """
    output: list[int] = []
    length = len(text)
    i = 0
    n = INITIAL_N
    bias = INITIAL_BIAS

    # Copy the code points before the last delimiter, if any, to the output.
    basic = max(text.rfind(DELIMITER), 0)
    for char in text[:basic]:
        if ord(char) >= 0x80:
            error(ErrorKind.NOT_BASIC)
        output.append(ord(char))

    # Deltas start after the last delimiter, or at the beginning when no basic
    # code points were copied.
    index = basic + 1 if basic > 0 else 0
    while index < length:
        # Accumulate into `i` directly and recover the delta as `i - old_i`.
        old_i = i
        w = 1
        k = BASE
        while True:
            if index >= length:
                error(ErrorKind.INVALID_INPUT)
            code_point = ord(text[index])
            index += 1
            digit = basic_to_digit(code_point)
            if digit >= BASE:
                if code_point >= 0x80:
                    error(ErrorKind.OVERFLOW)
                error(ErrorKind.INVALID_INPUT)
            if digit > (MAX_INT - i) // w:
                error(ErrorKind.OVERFLOW)
            i += digit * w
            t = _threshold(k, bias)
            if digit < t:
                break
            base_minus_t = BASE - t
            if w > MAX_INT // base_minus_t:
                error(ErrorKind.OVERFLOW)
            w *= base_minus_t
            k += BASE

        out = len(output) + 1
        bias = adapt(i - old_i, out, old_i == 0)

        # `i` wraps around from `out` to 0, incrementing `n` each time.
        if i // out > MAX_INT - n:
            error(ErrorKind.OVERFLOW)
        n += i // out
        i %= out
        if n > MAX_CODE_POINT:
            error(ErrorKind.INVALID_INPUT)

        output.insert(i, n)
        i += 1

    return code_points_to_text(output)


def encode(text: str) -> str:
    """Convert a string of Unicode symbols to a Punycode string of ASCII-only symbols.

    Args:
        text (str): The string to encode, typically a single domain label.

    Returns:
        str: The Punycode string, without any `xn--` prefix.

    Raises:
        BootstringOverflowError: A delta exceeds the 32-bit signed range.
    """
    code_points = ucs2_decode(text)
    input_length = len(code_points)

    output = [chr(value) for value in code_points if value < 0x80]
    basic_length = len(output)
    handled = basic_length
    if basic_length:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    while handled < input_length:
        # Every non-basic code point below `n` is handled already.
        m = min(value for value in code_points if value >= n)

        # Advance the decoder's <n, i> state to <m, 0>.
        if m - n > (MAX_INT - delta) // (handled + 1):
            error(ErrorKind.OVERFLOW)
        delta += (m - n) * (handled + 1)
        n = m

        for value in code_points:
            if value < n:
                delta += 1
                if delta > MAX_INT:
                    error(ErrorKind.OVERFLOW)
            if value == n:
                q = delta
                k = BASE
                while True:
                    t = _threshold(k, bias)
                    if q < t:
                        break
                    base_minus_t = BASE - t
                    output.append(chr(digit_to_basic(t + (q - t) % base_minus_t)))
                    q = (q - t) // base_minus_t
                    k += BASE
                output.append(chr(digit_to_basic(q)))
                bias = adapt(delta, handled + 1, handled == basic_length)
                delta = 0
                handled += 1

        delta += 1
        n += 1

    return "".join(output)


def _label_to_ascii(label: str) -> str:
    if _NON_ASCII_RE.search(label):
        return PUNYCODE_PREFIX + encode(label)
    return label


def _label_to_unicode(label: str) -> str:
    if label[: len(PUNYCODE_PREFIX)].lower() == PUNYCODE_PREFIX:
        return decode(label[len(PUNYCODE_PREFIX) :].lower())
    return label


def to_ascii(text: str) -> str:
    """Convert a Unicode domain name or email address to Punycode.

    Only labels holding non-ASCII code points are converted, so calling this on
    a domain that is already ASCII returns it unchanged. The local part of an
    email address is never converted.

    Args:
        text (str): The domain name or email address.

    Returns:
        str: The ASCII-compatible form.
    """
    return map_domain(text, _label_to_ascii)


def to_unicode(text: str) -> str:
    """Convert a Punycoded domain name or email address to Unicode.

    Only labels starting with `xn--` (in any case) are converted, so calling this
    on a domain that is already Unicode returns it unchanged.

    Args:
        text (str): The domain name or email address.

    Returns:
        str: The Unicode form.
    """
    return map_domain(text, _label_to_unicode)
