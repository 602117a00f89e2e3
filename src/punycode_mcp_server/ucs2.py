"""Conversion between UTF-16 style strings and sequences of code points.

A Python `str` may carry a supplementary character either natively or as a
surrogate pair (for example text that went through `surrogatepass`). Both forms
decode to the same scalar value. Lone surrogates are passed through unchanged in
both directions; no Unicode validation is performed here.
"""

from collections.abc import Iterable

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
SUPPLEMENTARY_MIN = 0x10000


def ucs2_decode(text: str) -> list[int]:
    """Return the code points of `text`, joining surrogate pairs.

    Args:
        text (str): The UTF-16 style input string.

    Returns:
        list[int]: One integer per scalar value, in input order.
    """
    output: list[int] = []
    counter = 0
    length = len(text)
    while counter < length:
        value = ord(text[counter])
        counter += 1
        if HIGH_SURROGATE_MIN <= value <= HIGH_SURROGATE_MAX and counter < length:
            extra = ord(text[counter])
            if LOW_SURROGATE_MIN <= extra <= LOW_SURROGATE_MAX:
                counter += 1
                output.append(((value & 0x3FF) << 10) + (extra & 0x3FF) + SUPPLEMENTARY_MIN)
                continue
        # Unmatched surrogates and every other unit are kept as they are.
        output.append(value)
    return output


def ucs2_encode(code_points: Iterable[int]) -> str:
    """Return the UTF-16 style string for a sequence of code points.

    Supplementary code points are written as a surrogate pair. The argument is
    only iterated, never modified.

    Args:
        code_points (Iterable[int]): The code points to encode.

    Returns:
        str: The string of UTF-16 code units.
    """
    units: list[str] = []
    for value in code_points:
        if value >= SUPPLEMENTARY_MIN:
            value -= SUPPLEMENTARY_MIN
            units.append(chr(HIGH_SURROGATE_MIN + (value >> 10)))
            units.append(chr(LOW_SURROGATE_MIN + (value & 0x3FF)))
        else:
            units.append(chr(value))
    return "".join(units)


def code_points_to_text(code_points: Iterable[int]) -> str:
    """Return a native string holding one character per code point."""
    return "".join(map(chr, code_points))
