import dns.exception
import dns.name
from fastmcp.utilities.logging import get_logger

from ..domain import split_labels
from ..exceptions import PunycodeError, handle_codec_error
from ..punycode import decode, encode, to_ascii, to_unicode
from ..typedefs import ToolResult
from ..ucs2 import code_points_to_text, ucs2_decode, ucs2_encode

logger = get_logger(__name__)


def _codec_failure(e: PunycodeError) -> ToolResult:
    return ToolResult(
        success=False,
        error=handle_codec_error(e),
        details={"kind": e.kind.value} if e.kind is not None else {},
    )


def _escape_surrogates(text: str) -> str:
    """Backslash-escape lone surrogates so the text can be sent as UTF-8 JSON."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _lone_surrogates(text: str) -> list[str]:
    return [f"U+{ord(char):04X}" for char in text if 0xD800 <= ord(char) <= 0xDFFF]


def _dns_name_report(ascii_domain: str) -> dict[str, object]:
    """Check whether an ASCII domain parses as a DNS name."""
    try:
        name = dns.name.from_text(ascii_domain)
    except dns.exception.DNSException as e:
        return {"valid": False, "error": handle_codec_error(e)}
    return {"valid": True, "fqdn": name.to_text()}


async def punycode_encode_impl(text: str) -> ToolResult:
    """Encode a Unicode string (a single label) to Punycode.

    Args:
        text (str): The string to encode.

    Returns:
        ToolResult: Punycode string or error details.
    """
    try:
        punycode = encode(text)
    except PunycodeError as e:
        logger.debug("Encoding %r failed: %s", text, e)
        return _codec_failure(e)
    return ToolResult(
        success=True, output={"text": _escape_surrogates(text), "punycode": punycode}
    )


async def punycode_decode_impl(punycode: str) -> ToolResult:
    """Decode a Punycode string (without the `xn--` prefix) to Unicode.

    Lone surrogates in the decoded text are backslash-escaped in the output and
    listed under `lone_surrogates` in the details.

    Args:
        punycode (str): The Punycode string to decode.

    Returns:
        ToolResult: Decoded string or error details.
    """
    try:
        text = decode(punycode)
    except PunycodeError as e:
        logger.debug("Decoding %r failed: %s", punycode, e)
        return _codec_failure(e)

    details: dict[str, object] = {}
    surrogates = _lone_surrogates(text)
    if surrogates:
        details["lone_surrogates"] = surrogates
    return ToolResult(
        success=True,
        output={"punycode": punycode, "text": _escape_surrogates(text)},
        details=details,
    )


async def domain_to_ascii_impl(domain: str) -> ToolResult:
    """Perform Unicode IDN domain name conversion into punycode ASCII format.

    Args:
        domain (str): The domain name or email address to convert.

    Returns:
        ToolResult: ASCII domain, per-label breakdown and DNS name report, or
        error details.
    """
    try:
        ascii_domain = to_ascii(domain)
    except PunycodeError as e:
        logger.debug("Converting %r to ASCII failed: %s", domain, e)
        return _codec_failure(e)

    _, at, host = ascii_domain.partition("@")
    if not at:
        host = ascii_domain
    return ToolResult(
        success=True,
        output={"domain": _escape_surrogates(domain), "ascii": _escape_surrogates(ascii_domain)},
        details={
            "labels": [_escape_surrogates(label) for label in split_labels(host)],
            "is_email": bool(at),
            "dns_name": _dns_name_report(host),
        },
    )


async def domain_to_unicode_impl(domain: str) -> ToolResult:
    """Perform punycode ASCII domain name conversion into Unicode.

    Args:
        domain (str): The domain name or email address to convert.

    Returns:
        ToolResult: Unicode domain and per-label breakdown, or error details.
    """
    try:
        unicode_domain = to_unicode(domain)
    except PunycodeError as e:
        logger.debug("Converting %r to Unicode failed: %s", domain, e)
        return _codec_failure(e)

    _, at, host = unicode_domain.partition("@")
    if not at:
        host = unicode_domain
    details: dict[str, object] = {
        "labels": [_escape_surrogates(label) for label in split_labels(host)]
    }
    surrogates = _lone_surrogates(unicode_domain)
    if surrogates:
        details["lone_surrogates"] = surrogates
    return ToolResult(
        success=True,
        output={"domain": domain, "unicode": _escape_surrogates(unicode_domain)},
        details=details,
    )


async def ucs2_decode_impl(text: str) -> ToolResult:
    """List the code points of a string, joining surrogate pairs."""
    return ToolResult(success=True, output=ucs2_decode(text))


async def ucs2_encode_impl(code_points: list[int]) -> ToolResult:
    """Build a UTF-16 style string from a list of code points.

    The UTF-16 code units are reported in the details; the output text holds
    one character per code point.

    Args:
        code_points (list[int]): Code points in the range 0 to 0x10FFFF.

    Returns:
        ToolResult: The text and its code units, or error details for out of
        range values.
    """
    invalid = [value for value in code_points if not 0 <= value <= 0x10FFFF]
    if invalid:
        return ToolResult(
            success=False,
            error="Code points must be in the range 0 to 0x10FFFF",
            details={"invalid": invalid},
        )
    return ToolResult(
        success=True,
        output={"text": _escape_surrogates(code_points_to_text(code_points))},
        details={"code_units": [f"U+{ord(unit):04X}" for unit in ucs2_encode(code_points)]},
    )
